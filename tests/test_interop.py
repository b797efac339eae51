from __future__ import annotations

import unittest
from urllib.parse import urlparse, urlsplit

from pydantic import AnyUrl, TypeAdapter

import tests._path  # noqa: F401

from irikit import IRI, ConversionFailedError, InvalidURIError, is_valid_http
from irikit.interop import from_uri, from_url, to_url, url_string

_any_url = TypeAdapter(AnyUrl)


class URLStringTests(unittest.TestCase):
    def test_urllib_results(self) -> None:
        text = "https://example.com/path?q=1#frag"
        self.assertEqual(url_string(urlsplit(text)), text)
        self.assertEqual(url_string(urlparse(text)), text)

    def test_pydantic_url_is_already_encoded(self) -> None:
        url = _any_url.validate_python("https://example.com/寿司")
        self.assertIn("%E5%AF%BF%E5%8F%B8", url_string(url))
        self.assertTrue(is_valid_http(url))
        self.assertFalse(is_valid_http(_any_url.validate_python("ftp://example.com/file")))

    def test_unsupported(self) -> None:
        with self.assertRaises(TypeError):
            url_string(3.14)


class FromURLTests(unittest.TestCase):
    def test_from_split_result(self) -> None:
        iri = from_url(urlsplit("https://example.com/path"))
        self.assertEqual(iri, IRI("https://example.com/path"))
        self.assertEqual(IRI.from_url(urlsplit("https://example.com/path")), iri)

    def test_from_uri(self) -> None:
        self.assertEqual(from_uri("https://example.com/a%20b").value, "https://example.com/a%20b")
        for text in ("", "https://example.com/寿司", "example.com", "https://example.com/a b"):
            with self.assertRaises(InvalidURIError):
                from_uri(text)


class ToURLTests(unittest.TestCase):
    def test_ascii_iri(self) -> None:
        self.assertEqual(
            to_url(IRI("https://example.com/path?q=1")),
            urlsplit("https://example.com/path?q=1"),
        )

    def test_unicode_iri_is_encoded(self) -> None:
        url = to_url(IRI("https://example.com/寿司"))
        self.assertEqual(url.netloc, "example.com")
        self.assertEqual(url.path, "/%E5%AF%BF%E5%8F%B8")
        self.assertEqual(url.geturl(), "https://example.com/%E5%AF%BF%E5%8F%B8")

    def test_accepts_strings(self) -> None:
        self.assertEqual(to_url("https://example.com/a b").path, "/a%20b")

    def test_conversion_failure(self) -> None:
        with self.assertRaises(ConversionFailedError) as ctx:
            to_url(IRI.unchecked("http://例え.jp:99999/"))
        self.assertEqual(ctx.exception.text, "http://例え.jp:99999/")
        self.assertIn("could not be converted", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()

"""Adapters between :class:`~irikit.iri.IRI` and foreign URL types.

Supported URL types are the ``urllib.parse`` split/parse results and
pydantic's ``AnyUrl`` family. Their string forms are usually already
percent-encoded (and, for pydantic, IDNA-encoded), so an IRI built from
them holds the URI spelling rather than the original Unicode text.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import ParseResult, SplitResult, urlsplit

from pydantic import AnyUrl

from irikit.errors import ConversionFailedError, InvalidURIError
from irikit.iri import IRI, IRILike, iri_string
from irikit.parsing.encoding import encode_to_uri, is_uri
from irikit.validation import scheme_of


def url_string(url: Any) -> str:
    """Absolute string form of a foreign URL object."""
    if isinstance(url, (SplitResult, ParseResult)):
        return url.geturl()
    if isinstance(url, AnyUrl):
        return str(url)
    raise TypeError(f"Cannot represent {type(url).__name__} as an IRI")


def from_url(url: Any) -> IRI:
    return IRI.from_url(url)


def from_uri(text: str) -> IRI:
    """Build an IRI from ASCII URI text, raising :class:`InvalidURIError` otherwise."""
    if not text or not is_uri(text) or not scheme_of(text):
        raise InvalidURIError(text)
    return IRI.unchecked(text)


def to_url(value: IRILike) -> SplitResult:
    """Convert an IRI to a ``urllib.parse.SplitResult`` over its URI form.

    ASCII IRIs convert directly; others are percent-encoded first.
    Raises :class:`ConversionFailedError` when encoding still does not
    produce a parseable URI.
    """
    text = iri_string(value)
    encoded = encode_to_uri(text)
    if encoded is None:
        raise ConversionFailedError(text)
    return urlsplit(encoded)


__all__ = ["from_uri", "from_url", "to_url", "url_string"]

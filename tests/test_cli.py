from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import tests._path  # noqa: F401

from irikit.__main__ import main


def run_cli(*argv: str) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class CLITests(unittest.TestCase):
    def test_validate(self) -> None:
        code, out, _ = run_cli("validate", "https://example.com/寿司", "urn:isbn:0451450523")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["valid\thttps://example.com/寿司", "valid\turn:isbn:0451450523"])

    def test_validate_reports_invalid(self) -> None:
        code, out, _ = run_cli("validate", "https://example.com", "example.com")
        self.assertEqual(code, 1)
        self.assertIn("invalid\texample.com", out)

    def test_validate_strict(self) -> None:
        self.assertEqual(run_cli("validate", "https://example.com/a b")[0], 0)
        self.assertEqual(run_cli("validate", "--strict", "https://example.com/a b")[0], 1)

    def test_validate_http(self) -> None:
        self.assertEqual(run_cli("validate", "--http", "https://example.com")[0], 0)
        self.assertEqual(run_cli("validate", "--http", "ftp://example.com")[0], 1)

    def test_normalize(self) -> None:
        code, out, _ = run_cli("normalize", "HTTPS://EXAMPLE.COM:443/a/./b/../c")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "https://example.com/a/c")

    def test_normalize_invalid_input(self) -> None:
        code, out, err = run_cli("normalize", "example.com")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Invalid IRI", err)

    def test_to_uri(self) -> None:
        code, out, _ = run_cli("to-uri", "https://example.com/hello world")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "https://example.com/hello%20world")

    def test_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "irikit.yaml"
            config_path.write_text(
                "default_mode: strict\ndefault_ports:\n  http: 8080\n",
                encoding="utf-8",
            )
            code, out, _ = run_cli("--config", str(config_path), "normalize", "http://example.com:8080/x")
            self.assertEqual(out.strip(), "http://example.com/x")
            self.assertEqual(code, 0)
            code, _, _ = run_cli("--config", str(config_path), "validate", "https://example.com/a b")
            self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()

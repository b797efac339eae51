"""IRI validation: scheme checks, lenient and strict modes, HTTP(S) gate."""

from __future__ import annotations

import string
from enum import Enum
from typing import TYPE_CHECKING, Optional

from irikit.config import DEFAULT_SETTINGS, IRISettings
from irikit.parsing.components import Decomposer, decompose

if TYPE_CHECKING:
    from irikit.iri import IRILike

_SCHEME_FIRST = frozenset(string.ascii_letters)
_SCHEME_REST = frozenset(string.ascii_letters + string.digits + "+-.")


class ValidationMode(str, Enum):
    LENIENT = "lenient"
    STRICT = "strict"


def scheme_of(text: str) -> Optional[str]:
    """Return the text before the first colon, or ``None`` without a colon."""
    scheme, colon, _ = text.partition(":")
    if not colon:
        return None
    return scheme


def is_valid_scheme(scheme: str, mode: ValidationMode = ValidationMode.LENIENT) -> bool:
    """Check a scheme token; strict mode follows ``ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )``."""
    if not scheme:
        return False
    if mode is ValidationMode.LENIENT:
        return True
    return scheme[0] in _SCHEME_FIRST and all(char in _SCHEME_REST for char in scheme[1:])


def _is_control(char: str) -> bool:
    code = ord(char)
    return code <= 0x1F or 0x7F <= code <= 0x9F


def has_forbidden_characters(text: str) -> bool:
    """True if ``text`` holds a C0/C1 control character or a literal space."""
    return any(char == " " or _is_control(char) for char in text)


def is_valid_iri(
    text: str,
    mode: ValidationMode = ValidationMode.LENIENT,
    *,
    decomposer: Decomposer = decompose,
) -> bool:
    """Return True if ``text`` is an IRI under ``mode``.

    Both modes require a non-empty scheme before the first colon. Strict
    mode also requires a well-formed scheme, no control characters or
    unencoded spaces, text that ``decomposer`` can split, and a non-empty
    fragment when a ``#`` is present.
    """
    if not text:
        return False
    scheme = scheme_of(text)
    if scheme is None or not is_valid_scheme(scheme, ValidationMode.LENIENT):
        return False
    if mode is ValidationMode.LENIENT:
        return True

    if not is_valid_scheme(scheme, ValidationMode.STRICT):
        return False
    if has_forbidden_characters(text):
        return False
    components = decomposer(text)
    if components is None:
        return False
    if components.fragment is not None and not components.fragment:
        return False
    return True


def is_valid_http(
    value: "str | IRILike",
    *,
    decomposer: Decomposer = decompose,
    settings: Optional[IRISettings] = None,
) -> bool:
    """Return True for a valid IRI whose scheme is ``http`` or ``https``.

    ``value`` may be a string, an :class:`~irikit.iri.IRI`, or any URL-like
    object :func:`~irikit.iri.iri_string` understands.
    """
    from irikit.iri import iri_string

    try:
        text = iri_string(value)
    except TypeError:
        return False
    if not is_valid_iri(text, decomposer=decomposer):
        return False

    components = decomposer(text)
    scheme = components.scheme if components is not None else scheme_of(text)
    if scheme is None:
        return False
    http_schemes = (settings or DEFAULT_SETTINGS).http_schemes
    return ascii_lower(scheme) in http_schemes


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only; other characters pass through."""
    return text.translate(_ASCII_LOWER)


__all__ = [
    "ValidationMode",
    "ascii_lower",
    "has_forbidden_characters",
    "is_valid_http",
    "is_valid_iri",
    "is_valid_scheme",
    "scheme_of",
]

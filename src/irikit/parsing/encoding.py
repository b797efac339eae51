"""Percent-encoding between IRIs and ASCII URIs (RFC 3987 section 3.1)."""

from __future__ import annotations

import logging
import re
import string
from typing import Optional
from urllib.parse import quote, urlsplit

_logger = logging.getLogger(__name__)

UNRESERVED = string.ascii_letters + string.digits + "-._~"
SUB_DELIMS = "!$&'()*+,;="
GEN_DELIMS = ":/?#[]@"

# Union of the characters a URI may carry unescaped in its host, path,
# query and fragment.
URI_ALLOWED = UNRESERVED + SUB_DELIMS + GEN_DELIMS
_URI_ALLOWED_SET = frozenset(URI_ALLOWED)

_PCT_TRIPLET_RE = re.compile(r"%[0-9A-Fa-f]{2}")


def percent_encode(text: str, safe: str = URI_ALLOWED) -> str:
    """UTF-8 percent-encode every character of ``text`` not in ``safe``.

    Existing ``%XX`` triplets are kept as they are; a ``%`` that does not
    start a triplet is encoded as ``%25``. Raises ``UnicodeEncodeError`` for
    text holding lone surrogates.
    """
    safe = safe.replace("%", "")
    pieces = []
    last = 0
    for match in _PCT_TRIPLET_RE.finditer(text):
        pieces.append(quote(text[last : match.start()], safe=safe))
        pieces.append(match.group())
        last = match.end()
    pieces.append(quote(text[last:], safe=safe))
    return "".join(pieces)


def is_uri(text: str) -> bool:
    """Return True if ``text`` is usable as a URI without further encoding."""
    if not text.isascii():
        return False
    bare = _PCT_TRIPLET_RE.sub("", text)
    if any(char not in _URI_ALLOWED_SET for char in bare):
        return False
    if text.count("#") > 1:
        return False
    try:
        urlsplit(text).port
    except ValueError:
        return False
    return True


def encode_to_uri(text: str) -> Optional[str]:
    """Return the URI form of ``text``, or ``None`` if encoding cannot produce one."""
    if is_uri(text):
        return text
    try:
        encoded = percent_encode(text)
    except UnicodeEncodeError:
        return None
    if is_uri(encoded):
        return encoded
    return None


def to_uri_string(text: str) -> str:
    """Best-effort URI conversion; falls back to ``text`` unchanged."""
    encoded = encode_to_uri(text)
    if encoded is None:
        _logger.debug("Percent-encoding did not yield a URI for %r; keeping it as is", text)
        return text
    return encoded


__all__ = [
    "URI_ALLOWED",
    "encode_to_uri",
    "is_uri",
    "percent_encode",
    "to_uri_string",
]

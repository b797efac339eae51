"""IRI normalization helpers (RFC 3986 section 6.2.2 / 6.2.3)."""

from __future__ import annotations

import logging
from typing import Optional

from irikit.config import DEFAULT_SETTINGS, IRISettings
from irikit.parsing.components import Decomposer, URIComponents, compose, decompose
from irikit.utils.dot_segments import remove_dot_segments
from irikit.validation import ascii_lower

_logger = logging.getLogger(__name__)

EMPTY_PATH_AS_ROOT = ("http", "https")


def default_port(scheme: str, settings: Optional[IRISettings] = None) -> Optional[int]:
    """Registered default port for ``scheme``, if known."""
    return (settings or DEFAULT_SETTINGS).default_ports.get(ascii_lower(scheme))


def normalize_components(components: URIComponents, settings: Optional[IRISettings] = None) -> URIComponents:
    scheme = ascii_lower(components.scheme)
    host = components.host.lower() if components.host is not None else None

    port = components.port
    if port is not None and port == default_port(scheme, settings):
        port = None

    path = components.path
    if not path and scheme in EMPTY_PATH_AS_ROOT:
        path = "/"
    if path:
        path = remove_dot_segments(path)
        # "http:./" collapses to an empty path
        if not path and scheme in EMPTY_PATH_AS_ROOT:
            path = "/"

    return components.with_changes(scheme=scheme, host=host, port=port, path=path)


def normalize_iri(
    text: str,
    *,
    decomposer: Decomposer = decompose,
    settings: Optional[IRISettings] = None,
) -> str:
    """Return the syntax-normalized form of ``text``.

    Lowercases scheme and host, drops a default port, turns an empty HTTP(S)
    path into ``/`` and removes dot segments. Query and fragment are left
    alone. Text that cannot be decomposed or recomposed comes back unchanged.
    """
    components = decomposer(text)
    if components is None:
        _logger.debug("Cannot decompose %r; leaving it unnormalized", text)
        return text

    normalized = compose(normalize_components(components, settings))
    if normalized is None:
        _logger.debug("Cannot recompose normalized %r; leaving it unnormalized", text)
        return text
    return normalized


__all__ = ["EMPTY_PATH_AS_ROOT", "default_port", "normalize_components", "normalize_iri"]

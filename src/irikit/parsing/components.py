"""Generic URI decomposition built on :mod:`urllib.parse`."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple
from urllib.parse import urlsplit

# urlsplit silently drops these, which would change the text being decomposed.
_STRIPPED_ANYWHERE = ("\t", "\r", "\n")
_C0_CONTROL_OR_SPACE = "".join(chr(code) for code in range(0x21))


@dataclass(frozen=True)
class URIComponents:
    """Pieces of an absolute IRI/URI.

    ``host`` is ``None`` when the text has no authority (``mailto:``,
    ``urn:``) and ``""`` for an empty authority (``file:///etc``). ``query``
    and ``fragment`` are ``None`` when their delimiter is absent, so an empty
    fragment (``http://a/#``) stays distinguishable from a missing one.
    """

    scheme: str
    userinfo: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path: str = ""
    query: Optional[str] = None
    fragment: Optional[str] = None

    @property
    def has_authority(self) -> bool:
        return self.host is not None

    def with_changes(self, **changes: object) -> "URIComponents":
        return replace(self, **changes)


Decomposer = Callable[[str], Optional[URIComponents]]


def _split_authority(netloc: str) -> Tuple[Optional[str], str]:
    userinfo, at_sign, host_port = netloc.rpartition("@")
    if host_port.startswith("["):
        host = host_port[: host_port.find("]") + 1]
    else:
        host = host_port.partition(":")[0]
    return (userinfo if at_sign else None), host


def decompose(text: str) -> Optional[URIComponents]:
    """Split ``text`` into :class:`URIComponents`, or return ``None``.

    Fails when there is no scheme, when :func:`urllib.parse.urlsplit`
    rejects the text (unbalanced IPv6 brackets, bad or out-of-range port),
    or when ``urlsplit`` would rewrite it before parsing.
    """
    if not text or text[0] in _C0_CONTROL_OR_SPACE:
        return None
    if any(char in text for char in _STRIPPED_ANYWHERE):
        return None
    try:
        split = urlsplit(text)
        port = split.port
    except ValueError:
        return None
    if not split.scheme:
        return None

    # urlsplit lowercases the scheme; keep the caller's spelling.
    scheme = text[: len(split.scheme)]
    userinfo: Optional[str] = None
    host: Optional[str] = None
    if text[len(scheme) + 1 :].startswith("//"):
        userinfo, host = _split_authority(split.netloc)

    before_fragment, hash_sign, _ = text.partition("#")
    return URIComponents(
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        port=port,
        path=split.path,
        query=split.query if "?" in before_fragment else None,
        fragment=split.fragment if hash_sign else None,
    )


def compose(components: URIComponents) -> Optional[str]:
    """Reassemble components into text, or ``None`` if they cannot form one."""
    if not components.scheme:
        return None

    parts = [components.scheme, ":"]
    path = components.path
    if components.has_authority:
        # RFC 3986 section 3.3
        if path and not path.startswith("/"):
            return None
        parts.append("//")
        if components.userinfo is not None:
            parts.extend((components.userinfo, "@"))
        parts.append(components.host or "")
        if components.port is not None:
            parts.append(f":{components.port}")
    else:
        if path.startswith("//"):
            return None
        if components.userinfo is not None or components.port is not None:
            return None

    parts.append(path)
    if components.query is not None:
        parts.extend(("?", components.query))
    if components.fragment is not None:
        parts.extend(("#", components.fragment))
    return "".join(parts)


__all__ = ["Decomposer", "URIComponents", "compose", "decompose"]

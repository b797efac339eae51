"""RFC 3986 section 5.2.4 dot-segment removal."""

from __future__ import annotations


def _drop_last_segment(output: str) -> str:
    index = output.rfind("/")
    if index == -1:
        return ""
    return output[:index]


def remove_dot_segments(path: str) -> str:
    """Collapse ``.`` and ``..`` segments of ``path``.

    ``/a/b/c/./../../g`` becomes ``/a/g`` and ``/a/../b`` becomes ``/b``.
    Every pass consumes part of the input buffer, so the loop is linear in
    the length of the path.
    """
    remaining = path
    output = ""

    while remaining:
        # A
        if remaining.startswith("../"):
            remaining = remaining[3:]
        elif remaining.startswith("./"):
            remaining = remaining[2:]
        # B
        elif remaining.startswith("/./"):
            remaining = "/" + remaining[3:]
        elif remaining == "/.":
            remaining = "/"
        # C
        elif remaining.startswith("/../"):
            remaining = "/" + remaining[4:]
            output = _drop_last_segment(output)
        elif remaining == "/..":
            remaining = "/"
            output = _drop_last_segment(output)
        # D
        elif remaining in (".", ".."):
            remaining = ""
        # E: move the first segment, including its leading slash
        else:
            slash = remaining.find("/", 1)
            if slash == -1:
                output += remaining
                remaining = ""
            else:
                output += remaining[:slash]
                remaining = remaining[slash:]

    return output


__all__ = ["remove_dot_segments"]

"""irikit utility helpers."""

from .canonical import default_port, normalize_components, normalize_iri
from .dot_segments import remove_dot_segments

__all__ = ["default_port", "normalize_components", "normalize_iri", "remove_dot_segments"]

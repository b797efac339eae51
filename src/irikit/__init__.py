"""Internationalized Resource Identifiers (RFC 3987) with URI interop (RFC 3986)."""

from .errors import ConversionFailedError, EmptyIRIError, InvalidIRIError, InvalidURIError, IRIError
from .iri import IRI, IRILike, Representable, iri_string
from .utils import normalize_iri, remove_dot_segments
from .validation import ValidationMode, is_valid_http, is_valid_iri

__all__ = [
    "IRI",
    "IRILike",
    "Representable",
    "iri_string",
    "ValidationMode",
    "is_valid_iri",
    "is_valid_http",
    "normalize_iri",
    "remove_dot_segments",
    "IRIError",
    "EmptyIRIError",
    "InvalidIRIError",
    "InvalidURIError",
    "ConversionFailedError",
]

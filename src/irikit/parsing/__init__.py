"""URI decomposition and percent-encoding helpers."""

from .components import Decomposer, URIComponents, compose, decompose
from .encoding import URI_ALLOWED, encode_to_uri, is_uri, percent_encode, to_uri_string

__all__ = [
    "Decomposer",
    "URIComponents",
    "compose",
    "decompose",
    "URI_ALLOWED",
    "encode_to_uri",
    "is_uri",
    "percent_encode",
    "to_uri_string",
]

"""Exceptions raised by irikit."""

from __future__ import annotations


class IRIError(ValueError):
    """Base class for IRI construction and conversion failures."""


class EmptyIRIError(IRIError):
    def __init__(self) -> None:
        super().__init__("IRI must be non-empty")


class InvalidIRIError(IRIError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid IRI: {text!r}")
        self.text = text


class InvalidURIError(IRIError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid URI: {text!r}")
        self.text = text


class ConversionFailedError(IRIError):
    """Percent-encoding could not turn the IRI into a parseable URI."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Failed to convert IRI to URL. The IRI {text!r} is malformed and could not be "
            "converted to a valid URL even after percent-encoding."
        )
        self.text = text


__all__ = [
    "IRIError",
    "EmptyIRIError",
    "InvalidIRIError",
    "InvalidURIError",
    "ConversionFailedError",
]

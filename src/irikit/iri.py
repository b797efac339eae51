"""The IRI value type and the Representable capability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union, runtime_checkable
from urllib.parse import ParseResult, SplitResult

from pydantic import AnyUrl

from irikit.config import IRISettings
from irikit.errors import EmptyIRIError, InvalidIRIError
from irikit.parsing.components import Decomposer, decompose
from irikit.parsing.encoding import to_uri_string
from irikit.utils.canonical import normalize_iri
from irikit.validation import ValidationMode, is_valid_iri


@runtime_checkable
class Representable(Protocol):
    """Anything that can hand out an :class:`IRI`."""

    @property
    def iri(self) -> "IRI":
        ...


@dataclass(frozen=True, repr=False)
class IRI:
    """An Internationalized Resource Identifier (RFC 3987).

    ``IRI(text)`` validates ``text`` leniently and raises
    :class:`~irikit.errors.EmptyIRIError` or
    :class:`~irikit.errors.InvalidIRIError`. Use :meth:`parse` to pick the
    validation mode and :meth:`unchecked` for text that is already trusted.

    Equality and hashing compare ``value`` verbatim; call :meth:`normalized`
    on both sides to compare equivalent spellings.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"IRI value must be a string, not {type(self.value).__name__}")
        _check(self.value, ValidationMode.LENIENT, decompose)

    @classmethod
    def parse(
        cls,
        text: str,
        mode: ValidationMode = ValidationMode.LENIENT,
        *,
        decomposer: Decomposer = decompose,
    ) -> "IRI":
        _check(text, mode, decomposer)
        return cls.unchecked(text)

    @classmethod
    def unchecked(cls, text: str) -> "IRI":
        """Wrap ``text`` without validating it."""
        iri = object.__new__(cls)
        object.__setattr__(iri, "value", text)
        return iri

    @classmethod
    def from_url(cls, url: Any) -> "IRI":
        """Wrap the string form of a URL-like object (see :func:`iri_string`)."""
        return cls.unchecked(iri_string(url))

    @property
    def iri(self) -> "IRI":
        return self

    @property
    def uri_string(self) -> str:
        return self.to_uri()

    def to_uri(self) -> str:
        """ASCII URI form of this IRI; the value itself if it cannot be encoded."""
        return to_uri_string(self.value)

    def normalized(
        self,
        *,
        decomposer: Decomposer = decompose,
        settings: Optional[IRISettings] = None,
    ) -> "IRI":
        normalized = normalize_iri(self.value, decomposer=decomposer, settings=settings)
        if normalized == self.value:
            return self
        return IRI.unchecked(normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"IRI({self.value!r})"


IRILike = Union[str, IRI, Representable, SplitResult, ParseResult, AnyUrl]


def _check(text: str, mode: ValidationMode, decomposer: Decomposer) -> None:
    if not text:
        raise EmptyIRIError()
    if not is_valid_iri(text, mode, decomposer=decomposer):
        raise InvalidIRIError(text)


def iri_string(value: IRILike) -> str:
    """Return the IRI text carried by ``value``.

    Strings pass through, :class:`IRI` and other :class:`Representable`
    objects give their ``iri.value``, and foreign URL types are handled by
    :func:`irikit.interop.url_string`. Foreign forms may already be
    percent-encoded, so the original Unicode spelling is not recoverable.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, IRI):
        return value.value
    if isinstance(value, Representable):
        return value.iri.value

    from irikit.interop import url_string

    return url_string(value)


__all__ = ["IRI", "IRILike", "Representable", "iri_string"]

"""Conversion protocols shared by the value types and the raw layouts.

``ConvertFrom`` is implemented by types this package owns and builds an owned
instance from a raw structure. ``ConvertInto`` is implemented on the raw
structures themselves and produces a target type the package does not own,
such as a numpy array or ``str``.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ConvertFrom(Protocol):
    """Owned type constructible from a reference to a raw structure."""

    @classmethod
    def convert_from(cls: Any, raw: Any) -> Any:
        """Convert to this type from the raw input."""
        ...


@runtime_checkable
class ConvertInto(Protocol[T_co]):
    """Raw structure convertible into a foreign target type."""

    def convert_into(self) -> T_co:
        ...

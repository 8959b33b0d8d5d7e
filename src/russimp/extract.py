"""Extraction of raw pointer + length arrays into owned sequences.

Every routine here treats a null pointer (or ``None``) and a zero length the
same way: the result is empty. Nothing is dereferenced in that case.

Trust boundary: the length passed alongside a pointer is taken from the
native structure and is NOT checked against the real size of the buffer. A
length larger than the buffer reads foreign memory. The native producer is
responsible for keeping pointer, length and lifetime consistent for the
duration of the call; callers must not let the native data be freed or
mutated while an extraction is in progress.

Results never reference native memory: elements are converted (or copied)
before they are returned. ``borrow_pointer_array`` is the one exception and
exists for walking a native graph inside a single conversion.
"""

import ctypes
import logging
from typing import Any, List, Optional, Sequence, Type, TypeVar

import numpy as np

from russimp.convert import ConvertFrom

logger = logging.getLogger(__name__)

MAX_CHANNELS = 8

T = TypeVar("T", bound=ConvertFrom)


def _is_empty(raw, length: int) -> bool:
    return not raw or length <= 0


def extract_one(raw, component: Type[T]) -> Optional[T]:
    """Convert the pointee of ``raw`` with ``component.convert_from``.

    Returns:
        The converted value, or None if ``raw`` is null.
    """
    if not raw:
        return None
    return component.convert_from(raw.contents)


def extract_array(raw, length: int, component: Type[T]) -> List[T]:
    """Convert ``length`` contiguous raw elements with ``component.convert_from``.

    Args:
        raw: ctypes pointer to the first element.
        length: Number of elements reported by the native structure.
        component: Owned type implementing ``convert_from``.

    Returns:
        List of converted elements, empty for a null pointer or zero length.
    """
    if _is_empty(raw, length):
        return []
    return [component.convert_from(raw[i]) for i in range(length)]


def extract_foreign_array(raw, length: int) -> List[Any]:
    """Convert ``length`` contiguous raw elements through their ``convert_into``.

    Used when the owned element type (numpy vector, ``str``) is not defined by
    this package, so the conversion lives on the raw structure instead.
    """
    if _is_empty(raw, length):
        return []
    return [raw[i].convert_into() for i in range(length)]


def borrow_pointer_array(raw, length: int) -> List[Any]:
    """Dereference an array of pointers without converting the pointees.

    The returned structures are views into native memory and must be converted
    before the native data is released. Null entries are skipped.
    """
    if _is_empty(raw, length):
        return []

    pointees = []
    for i in range(length):
        item = raw[i]
        if not item:
            logger.debug("Skipping null entry %d of %d in pointer array", i, length)
            continue
        pointees.append(item.contents)
    return pointees


def extract_pointer_array(raw, length: int, component: Type[T]) -> List[T]:
    """Convert an array of pointers-to-struct, keeping the original order."""
    return [component.convert_from(item) for item in borrow_pointer_array(raw, length)]


def _check_slots(slots: Sequence) -> None:
    if len(slots) != MAX_CHANNELS:
        raise ValueError(
            f"Expected {MAX_CHANNELS} channel slots, got {len(slots)}"
        )


def extract_channels(
    slots: Sequence, length: int, component: Type[T]
) -> List[Optional[List[T]]]:
    """Convert the fixed 8-slot channel layout (colour sets, UV sets).

    Each slot is evaluated on its own: a null slot gives None, a non-null slot
    gives a list of ``length`` elements. The native format has a single
    shared length for all channels.

    Raises:
        ValueError: If ``slots`` does not hold exactly 8 entries.
    """
    _check_slots(slots)
    return [
        extract_array(slot, length, component) if slot else None for slot in slots
    ]


def extract_foreign_channels(slots: Sequence, length: int) -> List[Optional[List[Any]]]:
    """Same as ``extract_channels`` but converting through ``convert_into``."""
    _check_slots(slots)
    return [extract_foreign_array(slot, length) if slot else None for slot in slots]


def clone_raw_array(raw, length: int, element_type=None) -> np.ndarray:
    """Copy ``length`` plain-data elements verbatim into a numpy array.

    The dtype is derived from the ctypes element type, so structures become
    structured arrays. Only use this for plain-data element types (no
    pointers inside).

    Args:
        raw: ctypes pointer to the first element.
        length: Number of elements.
        element_type: ctypes element type to read ``raw`` as; defaults to the
            pointer's type. The pointer is reinterpreted, not converted.

    Returns:
        An owned numpy array; empty for a null pointer or zero length.
    """
    if element_type is None:
        element_type = getattr(raw, "_type_", None)
    if _is_empty(raw, length):
        if element_type is None:
            return np.empty(0)
        return np.empty(0, dtype=np.dtype(element_type))
    if element_type is not raw._type_:
        raw = ctypes.cast(raw, ctypes.POINTER(element_type))
    return np.ctypeslib.as_array(raw, shape=(length,)).copy()

"""Key/value metadata attached to nodes and scenes."""

import ctypes
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List

from russimp.error import MetadataError
from russimp.extract import extract_array, extract_foreign_array
from russimp.raw import AiMetadata, AiString, AiVector3D


class MetadataType(enum.IntEnum):
    BOOL = 0
    INT32 = 1
    UINT64 = 2
    FLOAT = 3
    DOUBLE = 4
    AISTRING = 5
    AIVECTOR3D = 6
    AIMETADATA = 7
    INT64 = 8
    UINT32 = 9


_SCALAR_TYPES = {
    MetadataType.BOOL: ctypes.c_bool,
    MetadataType.INT32: ctypes.c_int32,
    MetadataType.UINT64: ctypes.c_uint64,
    MetadataType.FLOAT: ctypes.c_float,
    MetadataType.DOUBLE: ctypes.c_double,
    MetadataType.INT64: ctypes.c_int64,
    MetadataType.UINT32: ctypes.c_uint32,
}


def _read(address: int, ctype):
    return ctypes.cast(address, ctypes.POINTER(ctype)).contents


@dataclass
class MetadataEntry:
    """A typed metadata value.

    ``value`` is a bool, int, float, str, a (3,) float32 array or a nested
    ``MetaData`` depending on ``type``.
    """

    type: MetadataType
    value: Any

    @classmethod
    def convert_from(cls, raw) -> "MetadataEntry":
        try:
            entry_type = MetadataType(raw.mType)
        except ValueError as exc:
            raise MetadataError(f"Unknown metadata type {raw.mType}") from exc

        if not raw.mData:
            raise MetadataError(f"Metadata entry of type {entry_type.name} has no data")

        if entry_type in _SCALAR_TYPES:
            value = _read(raw.mData, _SCALAR_TYPES[entry_type]).value
        elif entry_type == MetadataType.AISTRING:
            value = _read(raw.mData, AiString).convert_into()
        elif entry_type == MetadataType.AIVECTOR3D:
            value = _read(raw.mData, AiVector3D).convert_into()
        else:
            value = MetaData.convert_from(_read(raw.mData, AiMetadata))

        return cls(type=entry_type, value=value)


@dataclass
class MetaData:
    keys: List[str] = field(default_factory=list)
    values: List[MetadataEntry] = field(default_factory=list)

    @classmethod
    def convert_from(cls, raw) -> "MetaData":
        count = raw.mNumProperties
        return cls(
            keys=extract_foreign_array(raw.mKeys, count),
            values=extract_array(raw.mValues, count, MetadataEntry),
        )

    def __len__(self) -> int:
        return len(self.keys)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``."""
        for name, entry in zip(self.keys, self.values):
            if name == key:
                return entry.value
        return default

    def as_dict(self) -> Dict[str, Any]:
        """Flatten to a plain dict, recursing into nested metadata."""
        result = {}
        for name, entry in zip(self.keys, self.values):
            value = entry.value
            if isinstance(value, MetaData):
                value = value.as_dict()
            result[name] = value
        return result

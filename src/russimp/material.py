"""Materials and their raw property lists."""

import ctypes
import enum
import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

from russimp.error import MaterialError, decode_utf8
from russimp.extract import clone_raw_array, extract_pointer_array

NAME_KEY = "?mat.name"
TEXTURE_FILE_KEY = "$tex.file"


class TextureType(enum.IntEnum):
    NONE = 0
    DIFFUSE = 1
    SPECULAR = 2
    AMBIENT = 3
    EMISSIVE = 4
    HEIGHT = 5
    NORMALS = 6
    SHININESS = 7
    OPACITY = 8
    DISPLACEMENT = 9
    LIGHTMAP = 10
    REFLECTION = 11
    BASE_COLOR = 12
    NORMAL_CAMERA = 13
    EMISSION_COLOR = 14
    METALNESS = 15
    DIFFUSE_ROUGHNESS = 16
    AMBIENT_OCCLUSION = 17
    UNKNOWN = 18
    SHEEN = 19
    CLEARCOAT = 20
    TRANSMISSION = 21


class PropertyTypeInfo(enum.IntEnum):
    FLOAT = 0x1
    DOUBLE = 0x2
    STRING = 0x3
    INTEGER = 0x4
    BUFFER = 0x5


def _decode_string(payload: bytes) -> str:
    # 32-bit length prefix, then the characters and a terminating zero.
    if len(payload) < 4:
        raise MaterialError(f"String property too short ({len(payload)} bytes)")
    length = int.from_bytes(payload[:4], sys.byteorder)
    if length > len(payload) - 4:
        raise MaterialError(
            f"String property length {length} exceeds payload of {len(payload)} bytes"
        )
    return decode_utf8(payload[4:4 + length])


def _decode_numbers(payload: bytes, dtype) -> np.ndarray:
    try:
        return np.frombuffer(payload, dtype=dtype).copy()
    except ValueError as exc:
        raise MaterialError(f"Malformed {np.dtype(dtype).name} property: {exc}") from exc


@dataclass
class MaterialProperty:
    """A single material property.

    ``data`` is a str for string properties, a float32/float64/int32 array
    for numeric properties and bytes for buffers.
    """

    key: str
    semantic: TextureType
    index: int
    type_info: PropertyTypeInfo
    data: Any

    @classmethod
    def convert_from(cls, raw) -> "MaterialProperty":
        key = raw.mKey.convert_into()
        try:
            type_info = PropertyTypeInfo(raw.mType)
        except ValueError as exc:
            raise MaterialError(f"Unknown property type {raw.mType} for '{key}'") from exc
        try:
            semantic = TextureType(raw.mSemantic)
        except ValueError as exc:
            raise MaterialError(f"Unknown texture type {raw.mSemantic} for '{key}'") from exc

        payload = clone_raw_array(
            raw.mData, raw.mDataLength, element_type=ctypes.c_ubyte
        ).tobytes()

        if type_info == PropertyTypeInfo.STRING:
            data = _decode_string(payload)
        elif type_info == PropertyTypeInfo.FLOAT:
            data = _decode_numbers(payload, np.float32)
        elif type_info == PropertyTypeInfo.DOUBLE:
            data = _decode_numbers(payload, np.float64)
        elif type_info == PropertyTypeInfo.INTEGER:
            data = _decode_numbers(payload, np.int32)
        else:
            data = payload

        return cls(
            key=key,
            semantic=semantic,
            index=raw.mIndex,
            type_info=type_info,
            data=data,
        )


@dataclass
class Material:
    properties: List[MaterialProperty] = field(default_factory=list)

    @classmethod
    def convert_from(cls, raw) -> "Material":
        return cls(
            properties=extract_pointer_array(
                raw.mProperties, raw.mNumProperties, MaterialProperty
            )
        )

    def get(
        self,
        key: str,
        semantic: TextureType = TextureType.NONE,
        index: int = 0,
    ) -> Optional[Any]:
        """Return the data of the property matching key, semantic and index."""
        for prop in self.properties:
            if prop.key == key and prop.semantic == semantic and prop.index == index:
                return prop.data
        return None

    @property
    def name(self) -> Optional[str]:
        return self.get(NAME_KEY)

    def texture_path(self, texture_type: TextureType, index: int = 0) -> Optional[str]:
        """Path of the ``index``-th texture of ``texture_type``, if any.

        Embedded textures are referenced as ``*<n>``.
        """
        return self.get(TEXTURE_FILE_KEY, texture_type, index)

    def texture_types(self) -> List[TextureType]:
        """Texture types this material has at least one texture for."""
        found = {
            prop.semantic for prop in self.properties if prop.key == TEXTURE_FILE_KEY
        }
        return sorted(found)

"""Textures embedded in a scene file."""

import ctypes
from dataclasses import dataclass

import numpy as np

from russimp.error import decode_utf8
from russimp.extract import clone_raw_array


@dataclass
class Texture:
    """An embedded texture.

    For uncompressed textures ``data`` is a structured array of ``width *
    height`` BGRA texels. When ``height`` is 0 the texture is compressed
    (png, jpg, ...), ``width`` is its size in bytes and ``data`` is a uint8
    array of the file contents; ``format_hint`` names the format.
    """

    filename: str
    width: int
    height: int
    format_hint: str
    data: np.ndarray

    @classmethod
    def convert_from(cls, raw) -> "Texture":
        if raw.mHeight == 0:
            data = clone_raw_array(raw.pcData, raw.mWidth, element_type=ctypes.c_ubyte)
        else:
            data = clone_raw_array(raw.pcData, raw.mWidth * raw.mHeight)

        return cls(
            filename=raw.mFilename.convert_into(),
            width=raw.mWidth,
            height=raw.mHeight,
            format_hint=decode_utf8(raw.achFormatHint),
            data=data,
        )

    @property
    def is_compressed(self) -> bool:
        return self.height == 0

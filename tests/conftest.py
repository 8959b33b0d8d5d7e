"""Pytest fixtures for russimp tests."""

import ctypes
import sys
from pathlib import Path
from typing import Iterable, List, Sequence, Union

import numpy as np
import pytest

from russimp import native
from russimp.raw import AiMatrix4x4, AiMaterialProperty, AiString


class NativeBuilder:
    """Builds native assimp structures in ctypes-owned memory.

    Every buffer created here is kept alive until the test finishes, so the
    pointers handed to the code under test stay valid.
    """

    def __init__(self):
        self._keep: List[object] = []

    def keep(self, obj):
        self._keep.append(obj)
        return obj

    def string(self, text: Union[str, bytes]) -> AiString:
        data = text.encode("utf-8") if isinstance(text, str) else text
        value = AiString()
        value.length = len(data)
        ctypes.memmove(value.data, data, len(data))
        return value

    def array(self, ctype, items: Sequence):
        """Contiguous array of ``ctype`` returned as ``POINTER(ctype)``."""
        buffer = self.keep((ctype * len(items))(*items))
        return ctypes.cast(buffer, ctypes.POINTER(ctype))

    def pointers(self, ctype, structs: Iterable):
        """Array of pointers to ``structs`` returned as ``POINTER(POINTER(ctype))``."""
        items = [self.keep(ctypes.pointer(self.keep(s))) for s in structs]
        return self.array(ctypes.POINTER(ctype), items)

    def pointer(self, struct):
        return self.keep(ctypes.pointer(self.keep(struct)))

    @staticmethod
    def null(ctype):
        return ctypes.POINTER(ctype)()

    def address(self, value) -> int:
        """Address of a ctypes value, for ``void*`` fields."""
        self.keep(value)
        return ctypes.addressof(value)

    def material_property(
        self,
        key: str,
        type_info: int,
        payload: bytes,
        semantic: int = 0,
        index: int = 0,
    ) -> AiMaterialProperty:
        buffer = self.keep(ctypes.create_string_buffer(payload, len(payload) or 1))
        prop = AiMaterialProperty()
        prop.mKey = self.string(key)
        prop.mSemantic = semantic
        prop.mIndex = index
        prop.mDataLength = len(payload)
        prop.mType = type_info
        prop.mData = ctypes.cast(buffer, ctypes.POINTER(ctypes.c_char))
        return prop

    @staticmethod
    def string_payload(text: str) -> bytes:
        """Encode a string the way material properties store it."""
        data = text.encode("utf-8")
        return len(data).to_bytes(4, sys.byteorder) + data + b"\0"


@pytest.fixture
def native_builder() -> NativeBuilder:
    """Factory for native structures that live for the duration of a test."""
    return NativeBuilder()


def make_matrix(values: Sequence[float]) -> AiMatrix4x4:
    """Row-major values a1, a2, ..., d4."""
    return AiMatrix4x4(*values)


@pytest.fixture
def identity_matrix_raw() -> AiMatrix4x4:
    """Native identity matrix: a1=b2=c3=d4=1, everything else 0."""
    return make_matrix(np.eye(4).flatten())


@pytest.fixture
def sample_matrix_raw() -> AiMatrix4x4:
    """Native matrix: 90-degree rotation around Z, translated by [10, 20, 30].

    Row-major, so the translation sits in a4, b4, c4.
    """
    return make_matrix([
        0, -1, 0, 10,
        1, 0, 0, 20,
        0, 0, 1, 30,
        0, 0, 0, 1,
    ])


@pytest.fixture
def sample_transform() -> np.ndarray:
    """Same transform as ``sample_matrix_raw`` as a numpy array."""
    return np.array([
        [0, -1, 0, 10],
        [1, 0, 0, 20],
        [0, 0, 1, 30],
        [0, 0, 0, 1]
    ], dtype=np.float32)


@pytest.fixture
def models_root(tmp_path: Path) -> Path:
    """Directory holding model files generated for integration tests."""
    root = tmp_path / "models"
    root.mkdir()
    return root


@pytest.fixture
def simple_cube_obj(models_root: Path) -> Path:
    """Write a 10x10x10 cube centered at origin as OBJ.

    Returns the path relative to ``models_root``.
    """
    trimesh = pytest.importorskip("trimesh")
    cube = trimesh.creation.box(extents=[10, 10, 10])
    cube.export(str(models_root / "cube.obj"))
    return Path("cube.obj")


@pytest.fixture
def simple_cube_stl(models_root: Path) -> Path:
    """Write a 10x10x10 cube centered at origin as binary STL."""
    trimesh = pytest.importorskip("trimesh")
    cube = trimesh.creation.box(extents=[10, 10, 10])
    stl_path = models_root / "cube.stl"
    cube.export(str(stl_path))
    return stl_path


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "assimp: marks tests as requiring the native assimp library"
    )


@pytest.fixture
def skip_without_assimp():
    """Skip test if libassimp is not installed."""
    if not native.is_available():
        pytest.skip("assimp not installed")

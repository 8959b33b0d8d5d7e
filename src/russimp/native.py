"""Bindings to the native assimp shared library."""

import ctypes
import ctypes.util
import logging
from functools import lru_cache
from typing import Optional

from russimp.error import AssimpNotAvailableError, decode_c_string
from russimp.raw import AiScene

logger = logging.getLogger(__name__)

LIBRARY_NAME = "assimp"


@lru_cache(maxsize=None)
def load_library(path: Optional[str] = None) -> ctypes.CDLL:
    """Load libassimp and declare the signatures used by the package.

    Args:
        path: Explicit path to the shared library. When omitted the library
            is located with ``ctypes.util.find_library``.

    Raises:
        AssimpNotAvailableError: If the library cannot be found or loaded.
    """
    location = path or ctypes.util.find_library(LIBRARY_NAME)
    if location is None:
        raise AssimpNotAvailableError(
            "The assimp shared library was not found. "
            "Install assimp or set ImportConfig.library_path."
        )

    try:
        lib = ctypes.CDLL(location)
    except OSError as exc:
        raise AssimpNotAvailableError(f"Failed to load assimp from {location}: {exc}") from exc

    lib.aiImportFile.argtypes = [ctypes.c_char_p, ctypes.c_uint]
    lib.aiImportFile.restype = ctypes.POINTER(AiScene)
    lib.aiImportFileFromMemory.argtypes = [
        ctypes.c_char_p,
        ctypes.c_uint,
        ctypes.c_uint,
        ctypes.c_char_p,
    ]
    lib.aiImportFileFromMemory.restype = ctypes.POINTER(AiScene)
    lib.aiReleaseImport.argtypes = [ctypes.POINTER(AiScene)]
    lib.aiReleaseImport.restype = None
    lib.aiGetErrorString.argtypes = []
    lib.aiGetErrorString.restype = ctypes.c_char_p

    logger.debug("Loaded assimp from %s", location)
    return lib


def is_available(path: Optional[str] = None) -> bool:
    """Check if libassimp can be loaded."""
    try:
        load_library(path)
        return True
    except AssimpNotAvailableError:
        return False


def import_file(lib: ctypes.CDLL, path: str, flags: int):
    """Run the importer on a file. Returns a possibly-null scene pointer."""
    return lib.aiImportFile(path.encode("utf-8"), int(flags))


def import_memory(lib: ctypes.CDLL, data: bytes, flags: int, hint: str = ""):
    """Run the importer on an in-memory buffer."""
    return lib.aiImportFileFromMemory(data, len(data), int(flags), hint.encode("utf-8"))


def release_import(lib: ctypes.CDLL, scene) -> None:
    """Free a scene returned by ``import_file`` or ``import_memory``."""
    lib.aiReleaseImport(scene)


def last_error(lib: ctypes.CDLL) -> str:
    """Return the importer's description of the last failure."""
    return decode_c_string(lib.aiGetErrorString())

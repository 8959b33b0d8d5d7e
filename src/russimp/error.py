"""Error types raised by the conversion layer and its consumers."""

from typing import Optional

UNKNOWN_ERROR = "unknown error"


class RussimpError(Exception):
    """Base class of the closed set of import failures.

    Only ``SceneImportError`` renders its message through ``str()``; every
    other category renders ``UNKNOWN_ERROR`` and keeps its message on
    ``.message``.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return UNKNOWN_ERROR

    @classmethod
    def from_decode_error(cls, exc: UnicodeError) -> "PrimitiveError":
        """Lift a string decoding failure into ``PrimitiveError``."""
        return PrimitiveError(str(exc))


class SceneImportError(RussimpError):
    """Raised when the native importer rejects a file or buffer."""

    def __str__(self) -> str:
        return self.message


class MetadataError(RussimpError):
    """Raised when a metadata entry cannot be decoded."""

    pass


class MaterialError(RussimpError):
    """Raised when a material property cannot be decoded."""

    pass


class PrimitiveError(RussimpError):
    """Raised when a native string or primitive fails to decode."""

    pass


class TextureNotFoundError(RussimpError):
    """Raised when a material references a texture the scene does not hold."""

    def __init__(self):
        super().__init__("")


class AssimpNotAvailableError(ImportError):
    """Raised when the native assimp library cannot be located or loaded."""


def decode_utf8(data: bytes) -> str:
    """Decode native bytes as UTF-8, raising ``PrimitiveError`` on failure."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RussimpError.from_decode_error(exc) from exc


def decode_c_string(value: Optional[bytes]) -> str:
    """Take ownership of a ``c_char_p`` result; a null pointer becomes ``""``."""
    if value is None:
        return ""
    return decode_utf8(value)

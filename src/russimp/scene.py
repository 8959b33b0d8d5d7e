"""Scene import.

Example:
    from russimp import PostProcess, Scene

    scene = Scene.from_file(
        "models/box.obj",
        flags=PostProcess.TRIANGULATE | PostProcess.JOIN_IDENTICAL_VERTICES,
    )
    for mesh in scene.meshes:
        print(mesh.name, len(mesh.vertices))
"""

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from russimp import native
from russimp.animation import Animation
from russimp.camera import Camera
from russimp.config import ImportConfig, PostProcess
from russimp.error import SceneImportError, TextureNotFoundError
from russimp.extract import extract_one, extract_pointer_array
from russimp.light import Light
from russimp.material import Material, TextureType
from russimp.mesh import Mesh
from russimp.metadata import MetaData
from russimp.node import Node
from russimp.texture import Texture

logger = logging.getLogger(__name__)


class SceneFlags(enum.IntFlag):
    INCOMPLETE = 0x1
    VALIDATED = 0x2
    VALIDATION_WARNING = 0x4
    NON_VERBOSE_FORMAT = 0x8
    TERRAIN = 0x10
    ALLOW_SHARED = 0x20


@dataclass
class Scene:
    """A fully owned copy of an imported scene.

    Nothing in a ``Scene`` refers to native memory; the native scene is
    released as soon as it has been converted.
    """

    flags: SceneFlags = SceneFlags(0)
    root: Optional[Node] = None
    meshes: List[Mesh] = field(default_factory=list)
    materials: List[Material] = field(default_factory=list)
    animations: List[Animation] = field(default_factory=list)
    textures: List[Texture] = field(default_factory=list)
    lights: List[Light] = field(default_factory=list)
    cameras: List[Camera] = field(default_factory=list)
    metadata: Optional[MetaData] = None
    name: str = ""

    @classmethod
    def convert_from(cls, raw) -> "Scene":
        return cls(
            flags=SceneFlags(raw.mFlags),
            root=extract_one(raw.mRootNode, Node),
            meshes=extract_pointer_array(raw.mMeshes, raw.mNumMeshes, Mesh),
            materials=extract_pointer_array(raw.mMaterials, raw.mNumMaterials, Material),
            animations=extract_pointer_array(raw.mAnimations, raw.mNumAnimations, Animation),
            textures=extract_pointer_array(raw.mTextures, raw.mNumTextures, Texture),
            lights=extract_pointer_array(raw.mLights, raw.mNumLights, Light),
            cameras=extract_pointer_array(raw.mCameras, raw.mNumCameras, Camera),
            metadata=extract_one(raw.mMetaData, MetaData),
            name=raw.mName.convert_into(),
        )

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        flags: Optional[Union[PostProcess, int]] = None,
        config: Optional[ImportConfig] = None,
    ) -> "Scene":
        """Import a scene from a file.

        Args:
            path: Model file; resolved against ``config.models_root`` if set.
            flags: Post-processing steps. Defaults to ``config.flags``.
            config: Import configuration. Defaults to ``ImportConfig()``.

        Returns:
            The imported scene.

        Raises:
            SceneImportError: If the file is missing or the importer fails.
            AssimpNotAvailableError: If libassimp cannot be loaded.
        """
        config = config or ImportConfig()
        path = config.resolve_model(path)

        if not path.exists():
            raise SceneImportError(f"Model file not found: {path}")

        if flags is None:
            flags = config.flags

        lib = native.load_library(config.library_path)
        raw = native.import_file(lib, str(path), flags)
        scene = cls._take(lib, raw)
        logger.info(
            "Imported %s: %d meshes, %d materials",
            path,
            len(scene.meshes),
            len(scene.materials),
        )
        return scene

    @classmethod
    def from_buffer(
        cls,
        data: bytes,
        flags: Optional[Union[PostProcess, int]] = None,
        hint: str = "",
        config: Optional[ImportConfig] = None,
    ) -> "Scene":
        """Import a scene from an in-memory file.

        Args:
            data: File contents.
            flags: Post-processing steps. Defaults to ``config.flags``.
            hint: File extension hint such as ``"obj"``.
            config: Import configuration. Defaults to ``ImportConfig()``.
        """
        config = config or ImportConfig()
        if not data:
            raise SceneImportError("Cannot import an empty buffer")

        if flags is None:
            flags = config.flags

        lib = native.load_library(config.library_path)
        raw = native.import_memory(lib, data, flags, hint)
        return cls._take(lib, raw)

    @classmethod
    def _take(cls, lib, raw) -> "Scene":
        """Convert a native scene and release it."""
        if not raw:
            raise SceneImportError(native.last_error(lib))

        try:
            return cls.convert_from(raw.contents)
        finally:
            native.release_import(lib, raw)

    def embedded_texture(self, path: str) -> Texture:
        """Look up an embedded texture by ``*<index>`` reference or filename.

        Raises:
            TextureNotFoundError: If no embedded texture matches.
        """
        if path.startswith("*"):
            try:
                index = int(path[1:])
            except ValueError as exc:
                raise TextureNotFoundError() from exc
            if 0 <= index < len(self.textures):
                return self.textures[index]
            raise TextureNotFoundError()

        short_name = Path(path).name
        for texture in self.textures:
            if texture.filename and Path(texture.filename).name == short_name:
                return texture
        raise TextureNotFoundError()

    def material_texture(
        self,
        material: Material,
        texture_type: TextureType,
        index: int = 0,
    ) -> Texture:
        """Return the embedded texture a material uses for ``texture_type``.

        Raises:
            TextureNotFoundError: If the material has no such texture or it is
                not embedded in the scene.
        """
        path = material.texture_path(texture_type, index)
        if path is None:
            raise TextureNotFoundError()
        return self.embedded_texture(path)

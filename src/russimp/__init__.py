"""Owned, safely accessible Python data from scenes imported by assimp."""

__version__ = "0.1.0"

from russimp.animation import Animation, NodeAnim, QuatKey, VectorKey
from russimp.bone import Bone, VertexWeight
from russimp.camera import Camera
from russimp.config import ImportConfig, PostProcess
from russimp.error import (
    AssimpNotAvailableError,
    MaterialError,
    MetadataError,
    PrimitiveError,
    RussimpError,
    SceneImportError,
    TextureNotFoundError,
)
from russimp.face import Face
from russimp.light import Light, LightSourceType
from russimp.material import Material, MaterialProperty, TextureType
from russimp.mesh import Mesh
from russimp.metadata import MetaData, MetadataEntry, MetadataType
from russimp.node import Node
from russimp.scene import Scene
from russimp.texture import Texture
from russimp.types import AABB, Color3D, Color4D, Vector2D

__all__ = [
    "AABB",
    "Animation",
    "AssimpNotAvailableError",
    "Bone",
    "Camera",
    "Color3D",
    "Color4D",
    "Face",
    "ImportConfig",
    "Light",
    "LightSourceType",
    "Material",
    "MaterialError",
    "MaterialProperty",
    "Mesh",
    "MetaData",
    "MetadataEntry",
    "MetadataError",
    "MetadataType",
    "Node",
    "NodeAnim",
    "PostProcess",
    "PrimitiveError",
    "QuatKey",
    "RussimpError",
    "Scene",
    "SceneImportError",
    "Texture",
    "TextureNotFoundError",
    "TextureType",
    "Vector2D",
    "VectorKey",
    "VertexWeight",
]

# Optional interop exports (requires trimesh and scipy)
try:
    from russimp.interop import (
        matrix_to_pose,
        mesh_to_trimesh,
        quaternion_to_rotation,
        scene_to_trimesh,
    )

    __all__.extend([
        "matrix_to_pose",
        "mesh_to_trimesh",
        "quaternion_to_rotation",
        "scene_to_trimesh",
    ])
except ImportError:
    pass  # trimesh/scipy not installed

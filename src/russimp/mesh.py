"""Meshes and morph-target meshes."""

import enum
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from russimp.bone import Bone
from russimp.extract import (
    extract_array,
    extract_channels,
    extract_foreign_array,
    extract_foreign_channels,
    extract_pointer_array,
)
from russimp.face import Face
from russimp.types import AABB, Color4D


class PrimitiveType(enum.IntFlag):
    POINT = 0x1
    LINE = 0x2
    TRIANGLE = 0x4
    POLYGON = 0x8
    NGON_ENCODING_FLAG = 0x10


class MorphingMethod(enum.IntEnum):
    UNKNOWN = 0x0
    VERTEX_BLEND = 0x1
    MORPH_NORMALIZED = 0x2
    MORPH_RELATIVE = 0x3


def _stack(vectors: List[np.ndarray], width: int = 3) -> np.ndarray:
    """Stack converted vectors into an (N, width) float32 array."""
    return np.asarray(vectors, dtype=np.float32).reshape(-1, width)


def _stack_channels(channels: List[Optional[List[np.ndarray]]]) -> List[Optional[np.ndarray]]:
    return [None if channel is None else _stack(channel) for channel in channels]


def _empty_vectors() -> np.ndarray:
    return np.empty((0, 3), dtype=np.float32)


@dataclass
class AnimMesh:
    """Vertex attribute replacements used for morph-target animation."""

    name: str = ""
    vertices: np.ndarray = field(default_factory=_empty_vectors)
    normals: np.ndarray = field(default_factory=_empty_vectors)
    tangents: np.ndarray = field(default_factory=_empty_vectors)
    bitangents: np.ndarray = field(default_factory=_empty_vectors)
    colors: List[Optional[List[Color4D]]] = field(default_factory=list)
    texture_coords: List[Optional[np.ndarray]] = field(default_factory=list)
    weight: float = 0.0

    @classmethod
    def convert_from(cls, raw) -> "AnimMesh":
        n = raw.mNumVertices
        return cls(
            name=raw.mName.convert_into(),
            vertices=_stack(extract_foreign_array(raw.mVertices, n)),
            normals=_stack(extract_foreign_array(raw.mNormals, n)),
            tangents=_stack(extract_foreign_array(raw.mTangents, n)),
            bitangents=_stack(extract_foreign_array(raw.mBitangents, n)),
            colors=extract_channels(raw.mColors, n, Color4D),
            texture_coords=_stack_channels(extract_foreign_channels(raw.mTextureCoords, n)),
            weight=raw.mWeight,
        )


@dataclass
class Mesh:
    """A mesh with a single material.

    Per-vertex arrays are (N, 3) float32 arrays; attributes the file does not
    provide are empty. ``colors`` and ``texture_coords`` always hold 8 slots,
    None where the channel is absent. Texture coordinates keep all three
    components; ``uv_components`` tells how many are meaningful per channel.
    """

    name: str = ""
    primitive_types: PrimitiveType = PrimitiveType(0)
    vertices: np.ndarray = field(default_factory=_empty_vectors)
    normals: np.ndarray = field(default_factory=_empty_vectors)
    tangents: np.ndarray = field(default_factory=_empty_vectors)
    bitangents: np.ndarray = field(default_factory=_empty_vectors)
    faces: List[Face] = field(default_factory=list)
    colors: List[Optional[List[Color4D]]] = field(default_factory=list)
    texture_coords: List[Optional[np.ndarray]] = field(default_factory=list)
    uv_components: List[int] = field(default_factory=list)
    bones: List[Bone] = field(default_factory=list)
    material_index: int = 0
    anim_meshes: List[AnimMesh] = field(default_factory=list)
    method: MorphingMethod = MorphingMethod.UNKNOWN
    aabb: AABB = field(default_factory=AABB)

    @classmethod
    def convert_from(cls, raw) -> "Mesh":
        n = raw.mNumVertices
        return cls(
            name=raw.mName.convert_into(),
            primitive_types=PrimitiveType(raw.mPrimitiveTypes),
            vertices=_stack(extract_foreign_array(raw.mVertices, n)),
            normals=_stack(extract_foreign_array(raw.mNormals, n)),
            tangents=_stack(extract_foreign_array(raw.mTangents, n)),
            bitangents=_stack(extract_foreign_array(raw.mBitangents, n)),
            faces=extract_array(raw.mFaces, raw.mNumFaces, Face),
            colors=extract_channels(raw.mColors, n, Color4D),
            texture_coords=_stack_channels(extract_foreign_channels(raw.mTextureCoords, n)),
            uv_components=list(raw.mNumUVComponents),
            bones=extract_pointer_array(raw.mBones, raw.mNumBones, Bone),
            material_index=raw.mMaterialIndex,
            anim_meshes=extract_pointer_array(raw.mAnimMeshes, raw.mNumAnimMeshes, AnimMesh),
            method=MorphingMethod(raw.mMethod),
            aabb=AABB.convert_from(raw.mAABB),
        )

    @property
    def has_bones(self) -> bool:
        return bool(self.bones)

    def is_triangulated(self) -> bool:
        """True if every face is a triangle."""
        return all(len(face) == 3 for face in self.faces)

"""Skinning bones and their vertex weights."""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from russimp.extract import extract_array
from russimp.types import Mat4


@dataclass(frozen=True)
class VertexWeight:
    vertex_id: int
    weight: float

    @classmethod
    def convert_from(cls, raw) -> "VertexWeight":
        return cls(vertex_id=raw.mVertexId, weight=raw.mWeight)


@dataclass
class Bone:
    """A bone influencing a subset of a mesh's vertices.

    Attributes:
        name: Name of the node the bone is bound to.
        weights: Influence of the bone on individual vertices.
        offset_matrix: Transform from mesh space to bone space in bind pose.
    """

    name: str
    weights: List[VertexWeight] = field(default_factory=list)
    offset_matrix: Mat4 = field(default_factory=lambda: np.eye(4, dtype=np.float32))

    @classmethod
    def convert_from(cls, raw) -> "Bone":
        return cls(
            name=raw.mName.convert_into(),
            weights=extract_array(raw.mWeights, raw.mNumWeights, VertexWeight),
            offset_matrix=raw.mOffsetMatrix.convert_into(),
        )

"""Keyframe animations."""

import enum
from dataclasses import dataclass, field
from typing import List

import numpy as np

from russimp.extract import clone_raw_array, extract_array, extract_pointer_array
from russimp.types import Quat, Vec3, read_only


class AnimBehaviour(enum.IntEnum):
    DEFAULT = 0x0
    CONSTANT = 0x1
    LINEAR = 0x2
    REPEAT = 0x3


class _ArrayKey:
    """Equality for keys holding an array value; such keys are not hashable."""

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.time == other.time and bool(np.array_equal(self.value, other.value))


@dataclass(frozen=True, eq=False)
class VectorKey(_ArrayKey):
    time: float
    value: Vec3

    @classmethod
    def convert_from(cls, raw) -> "VectorKey":
        return cls(time=raw.mTime, value=read_only(raw.mValue.convert_into()))


@dataclass(frozen=True, eq=False)
class QuatKey(_ArrayKey):
    time: float
    value: Quat

    @classmethod
    def convert_from(cls, raw) -> "QuatKey":
        return cls(time=raw.mTime, value=read_only(raw.mValue.convert_into()))


@dataclass(frozen=True)
class MeshKey:
    time: float
    value: int

    @classmethod
    def convert_from(cls, raw) -> "MeshKey":
        return cls(time=raw.mTime, value=raw.mValue)


@dataclass
class MeshMorphKey:
    time: float
    values: np.ndarray
    weights: np.ndarray

    @classmethod
    def convert_from(cls, raw) -> "MeshMorphKey":
        count = raw.mNumValuesAndWeights
        return cls(
            time=raw.mTime,
            values=clone_raw_array(raw.mValues, count),
            weights=clone_raw_array(raw.mWeights, count),
        )


@dataclass
class NodeAnim:
    """Animation channel for a single node."""

    node_name: str
    position_keys: List[VectorKey] = field(default_factory=list)
    rotation_keys: List[QuatKey] = field(default_factory=list)
    scaling_keys: List[VectorKey] = field(default_factory=list)
    pre_state: AnimBehaviour = AnimBehaviour.DEFAULT
    post_state: AnimBehaviour = AnimBehaviour.DEFAULT

    @classmethod
    def convert_from(cls, raw) -> "NodeAnim":
        return cls(
            node_name=raw.mNodeName.convert_into(),
            position_keys=extract_array(raw.mPositionKeys, raw.mNumPositionKeys, VectorKey),
            rotation_keys=extract_array(raw.mRotationKeys, raw.mNumRotationKeys, QuatKey),
            scaling_keys=extract_array(raw.mScalingKeys, raw.mNumScalingKeys, VectorKey),
            pre_state=AnimBehaviour(raw.mPreState),
            post_state=AnimBehaviour(raw.mPostState),
        )


@dataclass
class MeshAnim:
    name: str
    keys: List[MeshKey] = field(default_factory=list)

    @classmethod
    def convert_from(cls, raw) -> "MeshAnim":
        return cls(
            name=raw.mName.convert_into(),
            keys=extract_array(raw.mKeys, raw.mNumKeys, MeshKey),
        )


@dataclass
class MeshMorphAnim:
    name: str
    keys: List[MeshMorphKey] = field(default_factory=list)

    @classmethod
    def convert_from(cls, raw) -> "MeshMorphAnim":
        return cls(
            name=raw.mName.convert_into(),
            keys=extract_array(raw.mKeys, raw.mNumKeys, MeshMorphKey),
        )


@dataclass
class Animation:
    """A keyframe animation.

    Attributes:
        name: Animation name, may be empty.
        duration: Duration in ticks.
        ticks_per_second: Ticks per second, 0 if not specified in the file.
        channels: Node animation channels.
        mesh_channels: Vertex-based mesh animation channels.
        morph_mesh_channels: Morph-target animation channels.
    """

    name: str = ""
    duration: float = 0.0
    ticks_per_second: float = 0.0
    channels: List[NodeAnim] = field(default_factory=list)
    mesh_channels: List[MeshAnim] = field(default_factory=list)
    morph_mesh_channels: List[MeshMorphAnim] = field(default_factory=list)

    @classmethod
    def convert_from(cls, raw) -> "Animation":
        return cls(
            name=raw.mName.convert_into(),
            duration=raw.mDuration,
            ticks_per_second=raw.mTicksPerSecond,
            channels=extract_pointer_array(raw.mChannels, raw.mNumChannels, NodeAnim),
            mesh_channels=extract_pointer_array(
                raw.mMeshChannels, raw.mNumMeshChannels, MeshAnim
            ),
            morph_mesh_channels=extract_pointer_array(
                raw.mMorphMeshChannels, raw.mNumMorphMeshChannels, MeshMorphAnim
            ),
        )

    def channel(self, node_name: str):
        """Return the channel animating ``node_name``, or None."""
        for channel in self.channels:
            if channel.node_name == node_name:
                return channel
        return None

"""Cameras."""

from dataclasses import dataclass

from russimp.types import Vec3


@dataclass
class Camera:
    name: str
    position: Vec3
    up: Vec3
    look_at: Vec3
    horizontal_fov: float
    clip_plane_near: float
    clip_plane_far: float
    aspect: float
    orthographic_width: float

    @classmethod
    def convert_from(cls, raw) -> "Camera":
        return cls(
            name=raw.mName.convert_into(),
            position=raw.mPosition.convert_into(),
            up=raw.mUp.convert_into(),
            look_at=raw.mLookAt.convert_into(),
            horizontal_fov=raw.mHorizontalFOV,
            clip_plane_near=raw.mClipPlaneNear,
            clip_plane_far=raw.mClipPlaneFar,
            aspect=raw.mAspect,
            orthographic_width=raw.mOrthographicWidth,
        )

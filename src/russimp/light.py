"""Light sources."""

import enum
from dataclasses import dataclass

from russimp.types import Color3D, Vec3, Vector2D


class LightSourceType(enum.IntEnum):
    UNDEFINED = 0x0
    DIRECTIONAL = 0x1
    POINT = 0x2
    SPOT = 0x3
    AMBIENT = 0x4
    AREA = 0x5


@dataclass
class Light:
    """A light source.

    Cone angles are in radians; ``size`` only applies to area lights.
    """

    name: str
    light_type: LightSourceType
    position: Vec3
    direction: Vec3
    up: Vec3
    attenuation_constant: float
    attenuation_linear: float
    attenuation_quadratic: float
    color_diffuse: Color3D
    color_specular: Color3D
    color_ambient: Color3D
    angle_inner_cone: float
    angle_outer_cone: float
    size: Vector2D

    @classmethod
    def convert_from(cls, raw) -> "Light":
        return cls(
            name=raw.mName.convert_into(),
            light_type=LightSourceType(raw.mType),
            position=raw.mPosition.convert_into(),
            direction=raw.mDirection.convert_into(),
            up=raw.mUp.convert_into(),
            attenuation_constant=raw.mAttenuationConstant,
            attenuation_linear=raw.mAttenuationLinear,
            attenuation_quadratic=raw.mAttenuationQuadratic,
            color_diffuse=Color3D.convert_from(raw.mColorDiffuse),
            color_specular=Color3D.convert_from(raw.mColorSpecular),
            color_ambient=Color3D.convert_from(raw.mColorAmbient),
            angle_inner_cone=raw.mAngleInnerCone,
            angle_outer_cone=raw.mAngleOuterCone,
            size=Vector2D.convert_from(raw.mSize),
        )

"""Native assimp memory layouts.

These ``ctypes`` structures mirror the C structs populated by assimp 5.x.
Field names and ordering are a fixed contract with the native library and
must not be changed. Instances are only ever read transiently during
extraction; nothing in the package keeps a reference to them afterwards.

The small value structs implement ``convert_into()`` which produces a target
type this package does not define (numpy arrays, ``str``).
"""

import ctypes
from ctypes import POINTER, c_char, c_double, c_float, c_int, c_ubyte, c_uint, c_void_p

import numpy as np

from russimp.error import decode_utf8

ai_real = c_float

MAXLEN = 1024
HINTMAXTEXTURELEN = 9
MAX_NUMBER_OF_COLOR_SETS = 8
MAX_NUMBER_OF_TEXTURECOORDS = 8


class AiVector2D(ctypes.Structure):
    _fields_ = [("x", ai_real), ("y", ai_real)]

    def convert_into(self) -> np.ndarray:
        return np.array((self.x, self.y), dtype=np.float32)


class AiVector3D(ctypes.Structure):
    _fields_ = [("x", ai_real), ("y", ai_real), ("z", ai_real)]

    def convert_into(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=np.float32)


class AiColor3D(ctypes.Structure):
    _fields_ = [("r", ai_real), ("g", ai_real), ("b", ai_real)]


class AiColor4D(ctypes.Structure):
    _fields_ = [("r", ai_real), ("g", ai_real), ("b", ai_real), ("a", ai_real)]


class AiQuaternion(ctypes.Structure):
    # Native memory order is w, x, y, z.
    _fields_ = [("w", ai_real), ("x", ai_real), ("y", ai_real), ("z", ai_real)]

    def convert_into(self) -> np.ndarray:
        """Return the quaternion as ``[x, y, z, w]`` (scalar-last)."""
        return np.array((self.x, self.y, self.z, self.w), dtype=np.float32)


class AiMatrix4x4(ctypes.Structure):
    _fields_ = [
        (name, ai_real)
        for row in "abcd"
        for name in (f"{row}1", f"{row}2", f"{row}3", f"{row}4")
    ]

    def convert_into(self) -> np.ndarray:
        """Return a 4x4 array built column by column.

        Column ``j`` is ``(a_j, b_j, c_j, d_j)``, so the translation stored in
        ``a4, b4, c4`` ends up in ``[:3, 3]``.
        """
        return np.column_stack(
            (
                (self.a1, self.b1, self.c1, self.d1),
                (self.a2, self.b2, self.c2, self.d2),
                (self.a3, self.b3, self.c3, self.d3),
                (self.a4, self.b4, self.c4, self.d4),
            )
        ).astype(np.float32)


class AiAABB(ctypes.Structure):
    _fields_ = [("mMin", AiVector3D), ("mMax", AiVector3D)]


class AiString(ctypes.Structure):
    _fields_ = [("length", ctypes.c_uint32), ("data", c_ubyte * MAXLEN)]

    def convert_into(self) -> str:
        length = min(self.length, MAXLEN)
        return decode_utf8(bytes(self.data[:length]))


class AiFace(ctypes.Structure):
    _fields_ = [("mNumIndices", c_uint), ("mIndices", POINTER(c_uint))]


class AiVertexWeight(ctypes.Structure):
    _fields_ = [("mVertexId", c_uint), ("mWeight", ai_real)]


class AiNode(ctypes.Structure):
    pass


class AiMetadataEntry(ctypes.Structure):
    _fields_ = [("mType", c_int), ("mData", c_void_p)]


class AiMetadata(ctypes.Structure):
    _fields_ = [
        ("mNumProperties", c_uint),
        ("mKeys", POINTER(AiString)),
        ("mValues", POINTER(AiMetadataEntry)),
    ]


AiNode._fields_ = [
    ("mName", AiString),
    ("mTransformation", AiMatrix4x4),
    ("mParent", POINTER(AiNode)),
    ("mNumChildren", c_uint),
    ("mChildren", POINTER(POINTER(AiNode))),
    ("mNumMeshes", c_uint),
    ("mMeshes", POINTER(c_uint)),
    ("mMetaData", POINTER(AiMetadata)),
]


class AiBone(ctypes.Structure):
    _fields_ = [
        ("mName", AiString),
        ("mNumWeights", c_uint),
        ("mArmature", POINTER(AiNode)),
        ("mNode", POINTER(AiNode)),
        ("mWeights", POINTER(AiVertexWeight)),
        ("mOffsetMatrix", AiMatrix4x4),
    ]


class AiAnimMesh(ctypes.Structure):
    _fields_ = [
        ("mName", AiString),
        ("mVertices", POINTER(AiVector3D)),
        ("mNormals", POINTER(AiVector3D)),
        ("mTangents", POINTER(AiVector3D)),
        ("mBitangents", POINTER(AiVector3D)),
        ("mColors", POINTER(AiColor4D) * MAX_NUMBER_OF_COLOR_SETS),
        ("mTextureCoords", POINTER(AiVector3D) * MAX_NUMBER_OF_TEXTURECOORDS),
        ("mNumVertices", c_uint),
        ("mWeight", c_float),
    ]


class AiMesh(ctypes.Structure):
    _fields_ = [
        ("mPrimitiveTypes", c_uint),
        ("mNumVertices", c_uint),
        ("mNumFaces", c_uint),
        ("mVertices", POINTER(AiVector3D)),
        ("mNormals", POINTER(AiVector3D)),
        ("mTangents", POINTER(AiVector3D)),
        ("mBitangents", POINTER(AiVector3D)),
        ("mColors", POINTER(AiColor4D) * MAX_NUMBER_OF_COLOR_SETS),
        ("mTextureCoords", POINTER(AiVector3D) * MAX_NUMBER_OF_TEXTURECOORDS),
        ("mNumUVComponents", c_uint * MAX_NUMBER_OF_TEXTURECOORDS),
        ("mFaces", POINTER(AiFace)),
        ("mNumBones", c_uint),
        ("mBones", POINTER(POINTER(AiBone))),
        ("mMaterialIndex", c_uint),
        ("mName", AiString),
        ("mNumAnimMeshes", c_uint),
        ("mAnimMeshes", POINTER(POINTER(AiAnimMesh))),
        ("mMethod", c_uint),
        ("mAABB", AiAABB),
    ]


class AiVectorKey(ctypes.Structure):
    _fields_ = [("mTime", c_double), ("mValue", AiVector3D)]


class AiQuatKey(ctypes.Structure):
    _fields_ = [("mTime", c_double), ("mValue", AiQuaternion)]


class AiMeshKey(ctypes.Structure):
    _fields_ = [("mTime", c_double), ("mValue", c_uint)]


class AiMeshMorphKey(ctypes.Structure):
    _fields_ = [
        ("mTime", c_double),
        ("mValues", POINTER(c_uint)),
        ("mWeights", POINTER(c_double)),
        ("mNumValuesAndWeights", c_uint),
    ]


class AiNodeAnim(ctypes.Structure):
    _fields_ = [
        ("mNodeName", AiString),
        ("mNumPositionKeys", c_uint),
        ("mPositionKeys", POINTER(AiVectorKey)),
        ("mNumRotationKeys", c_uint),
        ("mRotationKeys", POINTER(AiQuatKey)),
        ("mNumScalingKeys", c_uint),
        ("mScalingKeys", POINTER(AiVectorKey)),
        ("mPreState", c_int),
        ("mPostState", c_int),
    ]


class AiMeshAnim(ctypes.Structure):
    _fields_ = [
        ("mName", AiString),
        ("mNumKeys", c_uint),
        ("mKeys", POINTER(AiMeshKey)),
    ]


class AiMeshMorphAnim(ctypes.Structure):
    _fields_ = [
        ("mName", AiString),
        ("mNumKeys", c_uint),
        ("mKeys", POINTER(AiMeshMorphKey)),
    ]


class AiAnimation(ctypes.Structure):
    _fields_ = [
        ("mName", AiString),
        ("mDuration", c_double),
        ("mTicksPerSecond", c_double),
        ("mNumChannels", c_uint),
        ("mChannels", POINTER(POINTER(AiNodeAnim))),
        ("mNumMeshChannels", c_uint),
        ("mMeshChannels", POINTER(POINTER(AiMeshAnim))),
        ("mNumMorphMeshChannels", c_uint),
        ("mMorphMeshChannels", POINTER(POINTER(AiMeshMorphAnim))),
    ]


class AiCamera(ctypes.Structure):
    _fields_ = [
        ("mName", AiString),
        ("mPosition", AiVector3D),
        ("mUp", AiVector3D),
        ("mLookAt", AiVector3D),
        ("mHorizontalFOV", c_float),
        ("mClipPlaneNear", c_float),
        ("mClipPlaneFar", c_float),
        ("mAspect", c_float),
        ("mOrthographicWidth", c_float),
    ]


class AiLight(ctypes.Structure):
    _fields_ = [
        ("mName", AiString),
        ("mType", c_int),
        ("mPosition", AiVector3D),
        ("mDirection", AiVector3D),
        ("mUp", AiVector3D),
        ("mAttenuationConstant", c_float),
        ("mAttenuationLinear", c_float),
        ("mAttenuationQuadratic", c_float),
        ("mColorDiffuse", AiColor3D),
        ("mColorSpecular", AiColor3D),
        ("mColorAmbient", AiColor3D),
        ("mAngleInnerCone", c_float),
        ("mAngleOuterCone", c_float),
        ("mSize", AiVector2D),
    ]


class AiMaterialProperty(ctypes.Structure):
    _fields_ = [
        ("mKey", AiString),
        ("mSemantic", c_uint),
        ("mIndex", c_uint),
        ("mDataLength", c_uint),
        ("mType", c_int),
        ("mData", POINTER(c_char)),
    ]


class AiMaterial(ctypes.Structure):
    _fields_ = [
        ("mProperties", POINTER(POINTER(AiMaterialProperty))),
        ("mNumProperties", c_uint),
        ("mNumAllocated", c_uint),
    ]


class AiTexel(ctypes.Structure):
    _fields_ = [("b", c_ubyte), ("g", c_ubyte), ("r", c_ubyte), ("a", c_ubyte)]


class AiTexture(ctypes.Structure):
    _fields_ = [
        ("mWidth", c_uint),
        ("mHeight", c_uint),
        ("achFormatHint", c_char * HINTMAXTEXTURELEN),
        ("pcData", POINTER(AiTexel)),
        ("mFilename", AiString),
    ]


class AiScene(ctypes.Structure):
    _fields_ = [
        ("mFlags", c_uint),
        ("mRootNode", POINTER(AiNode)),
        ("mNumMeshes", c_uint),
        ("mMeshes", POINTER(POINTER(AiMesh))),
        ("mNumMaterials", c_uint),
        ("mMaterials", POINTER(POINTER(AiMaterial))),
        ("mNumAnimations", c_uint),
        ("mAnimations", POINTER(POINTER(AiAnimation))),
        ("mNumTextures", c_uint),
        ("mTextures", POINTER(POINTER(AiTexture))),
        ("mNumLights", c_uint),
        ("mLights", POINTER(POINTER(AiLight))),
        ("mNumCameras", c_uint),
        ("mCameras", POINTER(POINTER(AiCamera))),
        ("mMetaData", POINTER(AiMetadata)),
        ("mName", AiString),
    ]

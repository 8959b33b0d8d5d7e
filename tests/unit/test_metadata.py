"""Unit tests for metadata extraction."""

import ctypes

import numpy as np
import pytest

from russimp.error import MetadataError
from russimp.metadata import MetaData, MetadataEntry, MetadataType
from russimp.raw import AiMetadata, AiMetadataEntry, AiString, AiVector3D


def _entry(native_builder, entry_type, value):
    return AiMetadataEntry(entry_type, native_builder.address(value))


def _metadata(native_builder, items):
    """Build a native metadata block from (key, type, ctypes value) triples."""
    raw = AiMetadata()
    raw.mNumProperties = len(items)
    raw.mKeys = native_builder.array(
        AiString, [native_builder.string(k) for k, _, _ in items]
    )
    raw.mValues = native_builder.array(
        AiMetadataEntry, [_entry(native_builder, t, v) for _, t, v in items]
    )
    return raw


class TestMetadataEntry:
    @pytest.mark.parametrize(
        "entry_type, value, expected",
        [
            (MetadataType.BOOL, ctypes.c_bool(True), True),
            (MetadataType.INT32, ctypes.c_int32(-7), -7),
            (MetadataType.UINT64, ctypes.c_uint64(2 ** 40), 2 ** 40),
            (MetadataType.FLOAT, ctypes.c_float(0.5), 0.5),
            (MetadataType.DOUBLE, ctypes.c_double(1e-9), 1e-9),
            (MetadataType.INT64, ctypes.c_int64(-(2 ** 40)), -(2 ** 40)),
            (MetadataType.UINT32, ctypes.c_uint32(9), 9),
        ],
    )
    def test_scalars(self, native_builder, entry_type, value, expected):
        entry = MetadataEntry.convert_from(_entry(native_builder, entry_type, value))

        assert entry.type == entry_type
        assert entry.value == expected

    def test_string(self, native_builder):
        raw = _entry(native_builder, MetadataType.AISTRING, native_builder.string("Blender"))

        assert MetadataEntry.convert_from(raw).value == "Blender"

    def test_vector(self, native_builder):
        raw = _entry(native_builder, MetadataType.AIVECTOR3D, AiVector3D(1, 2, 3))

        np.testing.assert_array_equal(MetadataEntry.convert_from(raw).value, [1, 2, 3])

    def test_unknown_type(self, native_builder):
        raw = _entry(native_builder, 42, ctypes.c_int32(0))

        with pytest.raises(MetadataError) as exc_info:
            MetadataEntry.convert_from(raw)

        assert "42" in exc_info.value.message

    def test_null_data(self):
        with pytest.raises(MetadataError):
            MetadataEntry.convert_from(AiMetadataEntry(MetadataType.INT32, None))


class TestMetaData:
    def test_keys_and_values(self, native_builder):
        raw = _metadata(
            native_builder,
            [
                ("UnitScaleFactor", MetadataType.DOUBLE, ctypes.c_double(2.54)),
                ("UpAxis", MetadataType.INT32, ctypes.c_int32(1)),
            ],
        )

        metadata = MetaData.convert_from(raw)

        assert metadata.keys == ["UnitScaleFactor", "UpAxis"]
        assert len(metadata) == 2
        assert metadata.get("UpAxis") == 1
        assert metadata.get("Missing", "default") == "default"

    def test_nested(self, native_builder):
        inner = _metadata(native_builder, [("depth", MetadataType.UINT32, ctypes.c_uint32(2))])
        outer = _metadata(native_builder, [("child", MetadataType.AIMETADATA, inner)])

        metadata = MetaData.convert_from(outer)

        assert isinstance(metadata.get("child"), MetaData)
        assert metadata.as_dict() == {"child": {"depth": 2}}

    def test_empty(self):
        metadata = MetaData.convert_from(AiMetadata())

        assert metadata.keys == []
        assert metadata.values == []
        assert metadata.as_dict() == {}

    def test_bad_entry_propagates(self, native_builder):
        raw = _metadata(native_builder, [("broken", 99, ctypes.c_int32(0))])

        with pytest.raises(MetadataError):
            MetaData.convert_from(raw)

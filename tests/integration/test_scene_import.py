"""Integration tests importing real files through libassimp."""

from pathlib import Path

import numpy as np
import pytest

from russimp import ImportConfig, PostProcess, Scene, SceneImportError

pytestmark = pytest.mark.assimp


@pytest.fixture
def import_config(models_root: Path) -> ImportConfig:
    """Configuration resolving relative model paths against the test models."""
    return ImportConfig(models_root=str(models_root))


class TestImportFile:
    def test_cube_obj(self, skip_without_assimp, simple_cube_obj: Path, import_config):
        """Import a triangulated cube written by trimesh."""
        scene = Scene.from_file(simple_cube_obj, config=import_config)

        assert len(scene.meshes) >= 1
        mesh = scene.meshes[0]
        assert len(mesh.vertices) >= 8
        assert len(mesh.faces) == 12
        assert mesh.is_triangulated()

    def test_cube_extent(self, skip_without_assimp, simple_cube_obj: Path, import_config):
        scene = Scene.from_file(
            simple_cube_obj,
            flags=PostProcess.TRIANGULATE | PostProcess.GEN_BOUNDING_BOXES,
            config=import_config,
        )

        vertices = np.vstack([mesh.vertices for mesh in scene.meshes])
        np.testing.assert_array_almost_equal(vertices.min(axis=0), [-5, -5, -5])
        np.testing.assert_array_almost_equal(vertices.max(axis=0), [5, 5, 5])
        np.testing.assert_array_almost_equal(scene.meshes[0].aabb.max, [5, 5, 5])

    def test_root_references_meshes(
        self, skip_without_assimp, simple_cube_obj: Path, import_config
    ):
        scene = Scene.from_file(simple_cube_obj, config=import_config)

        referenced = {int(i) for node in scene.root.walk() for i in node.meshes}
        assert referenced == set(range(len(scene.meshes)))

    def test_cube_stl(self, skip_without_assimp, simple_cube_stl: Path):
        scene = Scene.from_file(simple_cube_stl)

        assert sum(len(mesh.faces) for mesh in scene.meshes) == 12

    def test_corrupt_file_raises(self, skip_without_assimp, models_root: Path):
        corrupt = models_root / "corrupt.stl"
        # Binary STL header claiming 1000 faces with no face data
        corrupt.write_bytes(b"\x00" * 80 + (1000).to_bytes(4, "little"))

        with pytest.raises(SceneImportError) as exc_info:
            Scene.from_file(corrupt)

        assert str(exc_info.value) != ""


class TestImportBuffer:
    def test_obj_buffer(self, skip_without_assimp, simple_cube_obj: Path, import_config):
        data = import_config.resolve_model(simple_cube_obj).read_bytes()

        scene = Scene.from_buffer(data, hint="obj")

        assert sum(len(mesh.faces) for mesh in scene.meshes) == 12

    def test_garbage_buffer_raises(self, skip_without_assimp):
        with pytest.raises(SceneImportError):
            Scene.from_buffer(b"this is not a model", hint="xyz")

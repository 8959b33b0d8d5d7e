"""Unit tests for trimesh / scipy interop."""

import numpy as np
import pytest

pytest.importorskip("trimesh")
pytest.importorskip("scipy")

from russimp.face import Face
from russimp.interop import (
    matrix_to_pose,
    mesh_to_trimesh,
    quaternion_to_rotation,
    scene_to_trimesh,
)
from russimp.mesh import Mesh
from russimp.node import Node
from russimp.scene import Scene


def _quad_mesh(name="quad", with_polygon=False) -> Mesh:
    vertices = np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], dtype=np.float32)
    faces = [
        Face(np.array([0, 1, 2], dtype=np.uint32)),
        Face(np.array([0, 2, 3], dtype=np.uint32)),
    ]
    if with_polygon:
        faces.append(Face(np.array([0, 1, 2, 3], dtype=np.uint32)))
    return Mesh(name=name, vertices=vertices, faces=faces)


class TestMeshToTrimesh:
    def test_geometry(self):
        tm = mesh_to_trimesh(_quad_mesh())

        assert tm.vertices.shape == (4, 3)
        assert tm.faces.tolist() == [[0, 1, 2], [0, 2, 3]]
        assert tm.area == pytest.approx(1.0)

    def test_skips_polygons(self, caplog):
        with caplog.at_level("WARNING", logger="russimp.interop"):
            tm = mesh_to_trimesh(_quad_mesh(with_polygon=True))

        assert len(tm.faces) == 2
        assert "non-triangular" in caplog.text

    def test_empty_mesh(self):
        tm = mesh_to_trimesh(Mesh())

        assert len(tm.vertices) == 0
        assert len(tm.faces) == 0


class TestSceneToTrimesh:
    def test_node_transform_applied(self):
        root = Node(name="root")
        child = Node(name="child", meshes=np.array([0], dtype=np.uint32), parent=root)
        child.transformation = np.eye(4, dtype=np.float32)
        child.transformation[:3, 3] = [10, 0, 0]
        root.children.append(child)
        scene = Scene(root=root, meshes=[_quad_mesh()])

        result = scene_to_trimesh(scene)

        assert len(result.geometry) == 1
        np.testing.assert_array_almost_equal(result.bounds[0], [10, 0, 0])
        np.testing.assert_array_almost_equal(result.bounds[1], [11, 1, 0])

    def test_nodes_sharing_a_name_are_kept(self):
        """Two nodes with the same name and mesh stay two instances."""
        root = Node(name="root")
        for offset in (0, 10):
            part = Node(name="part", meshes=np.array([0], dtype=np.uint32), parent=root)
            part.transformation = np.eye(4, dtype=np.float32)
            part.transformation[:3, 3] = [offset, 0, 0]
            root.children.append(part)
        scene = Scene(root=root, meshes=[_quad_mesh()])

        result = scene_to_trimesh(scene)

        assert len(result.graph.nodes_geometry) == 2
        np.testing.assert_array_almost_equal(result.bounds[0], [0, 0, 0])
        np.testing.assert_array_almost_equal(result.bounds[1], [11, 1, 0])

    def test_empty_scene(self):
        assert len(scene_to_trimesh(Scene()).geometry) == 0


class TestRotation:
    def test_identity_quaternion(self):
        rotation = quaternion_to_rotation(np.array([0, 0, 0, 1], dtype=np.float32))

        np.testing.assert_array_almost_equal(rotation.as_matrix(), np.eye(3))

    def test_matrix_to_pose(self, sample_transform: np.ndarray):
        position, quaternion = matrix_to_pose(sample_transform)

        np.testing.assert_array_almost_equal(position, [10, 20, 30])
        # 90 degrees around Z as [x, y, z, w]; sign is ambiguous
        expected = np.array([0, 0, np.sin(np.pi / 4), np.cos(np.pi / 4)])
        assert np.allclose(quaternion, expected) or np.allclose(quaternion, -expected)

    def test_matrix_to_pose_with_scale(self):
        transform = np.diag([2.0, 2.0, 2.0, 1.0])

        _, quaternion = matrix_to_pose(transform)

        np.testing.assert_array_almost_equal(np.abs(quaternion), [0, 0, 0, 1])

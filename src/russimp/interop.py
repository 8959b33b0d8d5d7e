"""Conversion of imported data into trimesh and scipy types.

Requires the ``interop`` extra (trimesh, scipy).
"""

import logging
from typing import Tuple

import numpy as np
import trimesh
from scipy.spatial.transform import Rotation

from russimp.mesh import Mesh
from russimp.scene import Scene

logger = logging.getLogger(__name__)


def mesh_to_trimesh(mesh: Mesh) -> trimesh.Trimesh:
    """Convert a mesh to a ``trimesh.Trimesh``.

    Only triangular faces are kept; import with ``PostProcess.TRIANGULATE`` to
    avoid dropping polygons.

    Args:
        mesh: Imported mesh.

    Returns:
        Triangle mesh sharing no memory with ``mesh``.
    """
    triangles = [face.indices for face in mesh.faces if len(face) == 3]
    skipped = len(mesh.faces) - len(triangles)
    if skipped:
        logger.warning(
            "Skipping %d non-triangular faces of mesh '%s'", skipped, mesh.name
        )

    faces = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    vertex_normals = None
    if len(mesh.normals) and len(mesh.normals) == len(mesh.vertices):
        vertex_normals = mesh.normals.astype(np.float64)

    return trimesh.Trimesh(
        vertices=mesh.vertices.astype(np.float64),
        faces=faces,
        vertex_normals=vertex_normals,
        process=False,
    )


def scene_to_trimesh(scene: Scene) -> trimesh.Scene:
    """Convert a scene to a ``trimesh.Scene``.

    Every mesh reference of every node becomes one geometry instance placed
    with the node's global transformation. Instance names carry a running
    number, so nodes sharing a name do not replace each other.
    """
    result = trimesh.Scene()
    if scene.root is None:
        return result

    instance = 0
    for node in scene.root.walk():
        transform = node.global_transformation().astype(np.float64)
        for mesh_index in node.meshes:
            mesh = scene.meshes[int(mesh_index)]
            result.add_geometry(
                mesh_to_trimesh(mesh),
                node_name=f"{node.name}:{mesh_index}:{instance}",
                geom_name=mesh.name or f"mesh_{mesh_index}",
                transform=transform,
            )
            instance += 1
    return result


def quaternion_to_rotation(quaternion: np.ndarray) -> Rotation:
    """Create a scipy rotation from an ``[x, y, z, w]`` quaternion.

    scipy uses the same scalar-last order, so no reordering is needed.
    """
    return Rotation.from_quat(np.asarray(quaternion, dtype=np.float64))


def matrix_to_pose(transform: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Extract position and quaternion from a 4x4 transformation matrix.

    Scale is assumed to be uniform and is divided out before the rotation
    is extracted.

    Args:
        transform: 4x4 homogeneous transformation matrix.

    Returns:
        Tuple of (position, quaternion) where:
        - position is [x, y, z]
        - quaternion is [x, y, z, w] (scalar-last convention)
    """
    transform = np.asarray(transform, dtype=np.float64)
    position = transform[:3, 3].copy()

    rotation_matrix = transform[:3, :3]
    scale = np.linalg.norm(rotation_matrix, axis=0)
    rotation_matrix = rotation_matrix / np.where(scale > 0, scale, 1.0)

    quaternion = Rotation.from_matrix(rotation_matrix).as_quat()
    return position, quaternion

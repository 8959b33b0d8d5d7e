"""Scene graph nodes."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import numpy as np

from russimp.extract import borrow_pointer_array, clone_raw_array, extract_one
from russimp.metadata import MetaData
from russimp.types import Mat4


@dataclass(eq=False)
class Node:
    """A node of the scene hierarchy.

    Attributes:
        name: Node name, used to match bones and animation channels.
        transformation: Transform relative to the parent node.
        meshes: Indices into ``Scene.meshes``.
        metadata: Optional per-node metadata.
        children: Child nodes.
        parent: Parent node, None for the root.
    """

    name: str
    transformation: Mat4 = field(default_factory=lambda: np.eye(4, dtype=np.float32))
    meshes: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.uint32))
    metadata: Optional[MetaData] = None
    children: List["Node"] = field(default_factory=list)
    parent: Optional["Node"] = field(default=None, repr=False)

    @classmethod
    def convert_from(cls, raw) -> "Node":
        node = cls(
            name=raw.mName.convert_into(),
            transformation=raw.mTransformation.convert_into(),
            meshes=clone_raw_array(raw.mMeshes, raw.mNumMeshes),
            metadata=extract_one(raw.mMetaData, MetaData),
        )
        for raw_child in borrow_pointer_array(raw.mChildren, raw.mNumChildren):
            child = cls.convert_from(raw_child)
            child.parent = node
            node.children.append(child)
        return node

    def walk(self) -> Iterator["Node"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> Optional["Node"]:
        """Return the first node in this subtree called ``name``."""
        for node in self.walk():
            if node.name == name:
                return node
        return None

    def global_transformation(self) -> Mat4:
        """Transform from this node's space to the root's space."""
        result = self.transformation.copy()
        parent = self.parent
        while parent is not None:
            result = parent.transformation @ result
            parent = parent.parent
        return result

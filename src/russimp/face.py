"""Mesh faces."""

from dataclasses import dataclass, field

import numpy as np

from russimp.extract import clone_raw_array


@dataclass
class Face:
    """A polygon as indices into the owning mesh's vertex arrays."""

    indices: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.uint32))

    @classmethod
    def convert_from(cls, raw) -> "Face":
        return cls(indices=clone_raw_array(raw.mIndices, raw.mNumIndices))

    def __len__(self) -> int:
        return len(self.indices)

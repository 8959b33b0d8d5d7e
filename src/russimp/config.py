"""Import configuration."""

import enum
from dataclasses import dataclass, field
from functools import reduce
from pathlib import Path
from typing import List, Optional, Union

import yaml


class PostProcess(enum.IntFlag):
    """Post-processing steps applied by the native importer."""

    CALC_TANGENT_SPACE = 0x1
    JOIN_IDENTICAL_VERTICES = 0x2
    MAKE_LEFT_HANDED = 0x4
    TRIANGULATE = 0x8
    REMOVE_COMPONENT = 0x10
    GEN_NORMALS = 0x20
    GEN_SMOOTH_NORMALS = 0x40
    SPLIT_LARGE_MESHES = 0x80
    PRE_TRANSFORM_VERTICES = 0x100
    LIMIT_BONE_WEIGHTS = 0x200
    VALIDATE_DATA_STRUCTURE = 0x400
    IMPROVE_CACHE_LOCALITY = 0x800
    REMOVE_REDUNDANT_MATERIALS = 0x1000
    FIX_INFACING_NORMALS = 0x2000
    POPULATE_ARMATURE_DATA = 0x4000
    SORT_BY_PTYPE = 0x8000
    FIND_DEGENERATES = 0x10000
    FIND_INVALID_DATA = 0x20000
    GEN_UV_COORDS = 0x40000
    TRANSFORM_UV_COORDS = 0x80000
    FIND_INSTANCES = 0x100000
    OPTIMIZE_MESHES = 0x200000
    OPTIMIZE_GRAPH = 0x400000
    FLIP_UVS = 0x800000
    FLIP_WINDING_ORDER = 0x1000000
    SPLIT_BY_BONE_COUNT = 0x2000000
    DEBONE = 0x4000000
    GLOBAL_SCALE = 0x8000000
    EMBED_TEXTURES = 0x10000000
    FORCE_GEN_NORMALS = 0x20000000
    DROP_NORMALS = 0x40000000
    GEN_BOUNDING_BOXES = 0x80000000


@dataclass
class ImportConfig:
    """Configuration for scene imports."""

    post_process: List[str] = field(
        default_factory=lambda: [
            "CALC_TANGENT_SPACE",
            "TRIANGULATE",
            "JOIN_IDENTICAL_VERTICES",
            "SORT_BY_PTYPE",
        ]
    )
    library_path: Optional[str] = None  # explicit libassimp location
    models_root: Optional[str] = None  # base directory for relative model paths

    @property
    def flags(self) -> PostProcess:
        """Post-process step names combined into a single flag value.

        Raises:
            ValueError: If a step name is unknown.
        """
        steps = []
        for name in self.post_process:
            try:
                steps.append(PostProcess[name.upper()])
            except KeyError as exc:
                raise ValueError(f"Unknown post-process step '{name}'") from exc
        return reduce(lambda a, b: a | b, steps, PostProcess(0))

    def resolve_model(self, relative_path: Union[str, Path]) -> Path:
        """Resolve a model path against ``models_root`` when one is set."""
        if self.models_root:
            return Path(self.models_root) / relative_path
        return Path(relative_path)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ImportConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ImportConfig instance.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "ImportConfig":
        config = cls()

        if "post_process" in data:
            config.post_process = list(data["post_process"])

        if "library_path" in data:
            config.library_path = data["library_path"]

        if "models_root" in data:
            config.models_root = data["models_root"]

        return config

    def to_dict(self) -> dict:
        return {
            "post_process": list(self.post_process),
            "library_path": self.library_path,
            "models_root": self.models_root,
        }

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file.

        Args:
            path: Output path for YAML file.
        """
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

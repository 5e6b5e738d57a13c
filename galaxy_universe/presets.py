"""Named galaxy presets.

A small registry of ready-made :class:`GalaxyConfig` values. The built-in
``reference`` preset is the golden configuration used for regression tests;
applications may register more (re-registering a name replaces it).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from galaxy_universe.config import GalaxyConfig
from galaxy_universe.types import UpAxis


@dataclass(frozen=True)
class GalaxyPreset:
    """Named galaxy configuration.

    Attributes:
        name: Registry key.
        description: Human-readable summary.
        config: Configuration handed to the generator.
    """

    name: str
    description: str
    config: GalaxyConfig


_PRESET_REGISTRY: List[GalaxyPreset] = []
_NAME_INDEX: Dict[str, GalaxyPreset] = {}


def register_preset(preset: GalaxyPreset) -> None:
    if preset.name in _NAME_INDEX:
        existing_idx = next(
            i for i, p in enumerate(_PRESET_REGISTRY) if p.name == preset.name
        )
        _PRESET_REGISTRY[existing_idx] = preset
    else:
        _PRESET_REGISTRY.append(preset)
    _NAME_INDEX[preset.name] = preset


def all_presets() -> List[GalaxyPreset]:
    """Return registered presets sorted by name for stable ordering."""
    return sorted(_PRESET_REGISTRY, key=lambda p: p.name.lower())


def find_preset_by_name(name: str) -> Optional[GalaxyPreset]:
    return _NAME_INDEX.get(name)


register_preset(
    GalaxyPreset(
        name="reference",
        description="Three arms, 2000 stars, 2.5 revolutions",
        config=GalaxyConfig(),
    )
)
register_preset(
    GalaxyPreset(
        name="twin",
        description="Two tightly wound arms",
        config=GalaxyConfig(
            seed=7,
            branch_count=2,
            elem_count=1200,
            init_radius=0.1,
            expansion_rate=0.6,
            revolution_count=3.0,
            depth_std_dev=0.05,
            lat_offset_std_dev=0.03,
        ),
    )
)
register_preset(
    GalaxyPreset(
        name="pinwheel",
        description="Five loose arms in the XZ plane",
        config=GalaxyConfig(
            seed=2024,
            branch_count=5,
            elem_count=3000,
            init_radius=0.2,
            expansion_rate=2.0,
            revolution_count=1.5,
            depth_std_dev=0.1,
            lat_offset_std_dev=0.08,
            up_axis=UpAxis.Y,
        ),
    )
)

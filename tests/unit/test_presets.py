from dataclasses import replace

from galaxy_universe.config import GalaxyConfig, validate_config
from galaxy_universe.galaxy import generate_stars
from galaxy_universe.presets import (
    GalaxyPreset,
    all_presets,
    find_preset_by_name,
    register_preset,
)


def test_builtin_presets_are_valid() -> None:
    names = [p.name for p in all_presets()]
    assert {"reference", "twin", "pinwheel"} <= set(names)
    assert names == sorted(names, key=str.lower)
    for preset in all_presets():
        validate_config(preset.config)


def test_reference_preset_is_default_config() -> None:
    preset = find_preset_by_name("reference")
    assert preset is not None
    assert preset.config == GalaxyConfig()


def test_register_replaces_existing_name() -> None:
    first = GalaxyPreset("custom-test", "first", GalaxyConfig(elem_count=30))
    second = GalaxyPreset("custom-test", "second", GalaxyConfig(elem_count=60))
    register_preset(first)
    register_preset(second)
    matches = [p for p in all_presets() if p.name == "custom-test"]
    assert matches == [second]
    assert find_preset_by_name("custom-test") is second


def test_unknown_preset_is_none() -> None:
    assert find_preset_by_name("no-such-galaxy") is None


def test_preset_drives_generation() -> None:
    preset = find_preset_by_name("twin")
    assert preset is not None
    config = replace(preset.config, elem_count=20)
    assert len(generate_stars(config)) == 20

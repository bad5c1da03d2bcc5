import pytest

from media_presets.core.exceptions import (
    BreakpointsMissingError,
    UnknownPresetError,
)
from media_presets.core.preset_registry import PresetRegistry
from media_presets.models.data_models import CropMode
from media_presets.services.preset_resolver import resolve_preset

BREAKPOINTS = {"sm": 480, "md": 768}


def _registry(**presets):
    presets.setdefault(
        "default", {"mode": "rc", "resolutions": ["1x", "2x"]}
    )
    return PresetRegistry(presets)


def test_unknown_preset():
    with pytest.raises(UnknownPresetError):
        resolve_preset("missing-preset", {}, _registry(), BREAKPOINTS)


@pytest.mark.parametrize("breakpoints", [{}, None])
def test_breakpoints_missing(breakpoints):
    with pytest.raises(BreakpointsMissingError):
        resolve_preset("default", {}, _registry(), breakpoints)


def test_unknown_preset_checked_before_breakpoints():
    with pytest.raises(UnknownPresetError):
        resolve_preset("missing-preset", {}, _registry(), {})


def test_end_to_end_default_preset():
    resolved = resolve_preset(
        "default", {"size": "200x100"}, _registry(), BREAKPOINTS
    )

    assert resolved.root.to_json() == {
        "mode": "rc",
        "size": "200x100",
        "fill": None,
        "maxWidth": 0,
        "resolutions": ["1x", "2x"],
    }
    assert list(resolved.breakpoints) == ["sm", "md"]
    for name, width in BREAKPOINTS.items():
        descriptor = resolved.breakpoints[name]
        assert descriptor.mode == CropMode.FIT
        assert descriptor.size == "200x100"
        assert descriptor.resolutions == ["1x", "2x"]
        assert descriptor.max_width == width


def test_override_wins_over_preset():
    registry = _registry(card={"mode": "fill", "size": "300x200"})
    resolved = resolve_preset("card", {"mode": "c"}, registry, BREAKPOINTS)
    assert resolved.root.mode == CropMode.CROP


def test_mode_falls_back_to_default_preset():
    registry = _registry(
        default={"mode": "a"}, card={"size": "300x200"}
    )
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert resolved.root.mode == CropMode.AUTO


def test_hard_coded_fallbacks_without_default_preset():
    registry = PresetRegistry({"card": {"size": 300}})
    resolved = resolve_preset("card", None, registry, BREAKPOINTS)
    assert resolved.root.mode == CropMode.FIT
    assert resolved.root.size == "300x300"
    assert resolved.root.resolutions == ["1x", "2x"]
    assert resolved.root.fill is None


def test_resolutions_come_from_preset_first():
    registry = _registry(card={"size": 300, "resolutions": ["3X", "1x"]})
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert resolved.root.resolutions == ["1x", "3x"]


def test_fill_must_be_a_string():
    registry = _registry(card={"size": 300, "fill": 12})
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert resolved.root.fill is None


def test_missing_size_forces_original_mode():
    registry = _registry(card={"mode": "c"})
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert resolved.root.size == "0x0"
    assert resolved.root.mode == CropMode.ORIGINAL
    for descriptor in resolved.breakpoints.values():
        assert descriptor.mode == CropMode.ORIGINAL


def test_zero_size_breakpoint_forces_original_mode():
    registry = _registry(
        card={
            "size": "300x200",
            "mode": "c",
            "breakpoints": {"sm": {"size": "0x0", "mode": "e"}},
        }
    )
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert resolved.root.mode == CropMode.CROP
    assert resolved.breakpoints["sm"].mode == CropMode.ORIGINAL
    assert resolved.breakpoints["md"].mode == CropMode.CROP


def test_breakpoint_inherits_from_resolved_root():
    registry = _registry(
        default={"mode": "a", "size": "10x10"},
        card={"breakpoints": {"sm": {"fill": "0,0,0"}}},
    )
    resolved = resolve_preset(
        "card", {"size": "300x200", "mode": "c"}, registry, BREAKPOINTS
    )
    sm = resolved.breakpoints["sm"]
    assert sm.fill == "0,0,0"
    assert sm.mode == CropMode.CROP
    assert sm.size == "300x200"
    assert sm.max_width == 480
    assert resolved.breakpoints["md"].fill is None


def test_breakpoint_alias():
    registry = _registry(
        card={
            "size": "300x200",
            "breakpoints": {"sm": {"size": "100x100"}, "md": "sm"},
        }
    )
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    sm, md = resolved.breakpoints["sm"], resolved.breakpoints["md"]
    assert md.size == sm.size == "100x100"
    assert md.mode == sm.mode
    assert (sm.max_width, md.max_width) == (480, 768)


def test_breakpoint_alias_keeps_explicit_max_width():
    registry = _registry(
        card={
            "size": "300x200",
            "breakpoints": {
                "sm": {"size": "100x100", "maxWidth": 500},
                "md": "sm",
            },
        }
    )
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert resolved.breakpoints["md"].max_width == 500


def test_alias_to_missing_breakpoint_falls_back_to_root():
    registry = _registry(
        card={"size": "300x200", "breakpoints": {"md": "missing"}}
    )
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert resolved.breakpoints["md"].size == "300x200"
    assert resolved.breakpoints["md"].max_width == 768


def test_breakpoints_outside_catalogue_are_ignored():
    registry = _registry(
        card={"size": "300x200", "breakpoints": {"xxl": {"size": "9x9"}}}
    )
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert list(resolved.breakpoints) == ["sm", "md"]


def test_breakpoints_fall_back_to_default_preset():
    registry = _registry(
        default={"mode": "rc", "breakpoints": {"sm": {"size": "50x50"}}},
        card={"size": "300x200"},
    )
    resolved = resolve_preset("card", {}, registry, BREAKPOINTS)
    assert resolved.breakpoints["sm"].size == "50x50"
    assert resolved.breakpoints["md"].size == "300x200"


def test_breakpoints_ordered_by_width():
    resolved = resolve_preset(
        "default",
        {"size": 10},
        _registry(),
        {"lg": 1200, "sm": 480, "md": 768},
    )
    assert list(resolved.breakpoints) == ["sm", "md", "lg"]


def test_resolution_is_idempotent():
    registry = _registry(card={"size": "300x200", "mode": "fill"})
    first = resolve_preset("card", {"fill": "1,2,3"}, registry, BREAKPOINTS)
    second = resolve_preset("card", {"fill": "1,2,3"}, registry, BREAKPOINTS)
    assert first == second
    assert first.root.resolutions is not second.root.resolutions


def test_resolution_does_not_mutate_registry():
    registry = _registry(card={"size": "300x200"})
    before = registry.get("card").model_dump()
    resolve_preset(
        "card", {"size": "1x1", "mode": "c"}, registry, BREAKPOINTS
    )
    assert registry.get("card").model_dump() == before


def test_serialized_form_excludes_breakpoints(media_config):
    resolved = resolve_preset(
        "hero", {}, media_config.presets, media_config.breakpoints
    )
    data = resolved.to_json()
    assert "breakpoints" not in data["preset"]
    assert data["breakpoints"]["md"] == {
        "mode": "c",
        "size": "480x300",
        "fill": "255,255,255",
        "maxWidth": 768,
        "resolutions": ["1x", "2x"],
    }

import logging
from typing import Dict, Mapping, NamedTuple, Optional

from media_presets.core.exceptions import BreakpointsMissingError
from media_presets.core.preset_registry import PresetRegistry
from media_presets.helpers.resolutions import normalize_resolutions
from media_presets.helpers.sizes import (
    ORIGINAL_SIZE,
    classify_size,
    preset_size_string,
)
from media_presets.models.data_models import CropMode, PresetDefinition
from media_presets.models.render_descriptor import RenderDescriptor

logger = logging.getLogger(__name__)

FALLBACK_MODE = CropMode.FIT
FALLBACK_RESOLUTIONS = ["1x", "2x"]


class ResolvedPreset(NamedTuple):
    root: RenderDescriptor
    breakpoints: Dict[str, RenderDescriptor]

    def to_json(self) -> dict:
        return {
            "preset": self.root.to_json(),
            "breakpoints": {
                name: descriptor.to_json()
                for name, descriptor in self.breakpoints.items()
            },
        }


def _first_set(*values):
    return next((value for value in values if value is not None), None)


def _descriptor(size, mode, fill, resolutions, max_width=0):
    size = preset_size_string(classify_size(size))
    return RenderDescriptor(
        mode=CropMode.ORIGINAL if size == ORIGINAL_SIZE else mode,
        size=size,
        fill=fill if isinstance(fill, str) else None,
        resolutions=normalize_resolutions(resolutions),
        max_width=int(max_width or 0),
    )


def _breakpoint_entries(
    definitions: Optional[Mapping],
) -> Dict[str, PresetDefinition]:
    """Substitute one level of string aliases and drop empty entries."""
    entries = {}
    for name, value in (definitions or {}).items():
        if isinstance(value, str):
            target = definitions.get(value)
            if not isinstance(target, PresetDefinition):
                logger.warning(
                    "Breakpoint '%s' aliases missing breakpoint '%s'",
                    name,
                    value,
                )
                continue
            value = target
        if not value.model_fields_set:
            continue
        entries[name] = value
    return entries


def resolve_preset(
    name: str,
    overrides: Optional[Mapping],
    registry: PresetRegistry,
    breakpoints: Optional[Mapping[str, int]],
) -> ResolvedPreset:
    """Merge overrides, the named preset and the default preset into one
    root descriptor plus one descriptor per catalogue breakpoint.

    Raises UnknownPresetError for an unregistered name and
    BreakpointsMissingError when the breakpoint catalogue is empty.
    """
    preset = registry.get(name)
    default = registry.default
    overrides = overrides or {}

    root = _descriptor(
        size=_first_set(overrides.get("size"), preset.size, default.size),
        mode=_first_set(
            CropMode.parse(overrides.get("mode")),
            preset.mode,
            default.mode,
            FALLBACK_MODE,
        ),
        fill=_first_set(overrides.get("fill"), preset.fill, default.fill),
        resolutions=_first_set(
            preset.resolutions, default.resolutions, FALLBACK_RESOLUTIONS
        ),
        max_width=preset.max_width,
    )

    if not breakpoints:
        raise BreakpointsMissingError()

    entries = _breakpoint_entries(
        _first_set(preset.breakpoints, default.breakpoints)
    )

    resolved = {}
    for breakpoint, width in sorted(
        breakpoints.items(), key=lambda item: item[1]
    ):
        entry = entries.get(breakpoint)
        if entry is None:
            resolved[breakpoint] = root.model_copy(
                update={
                    "max_width": root.max_width or int(width),
                    "resolutions": list(root.resolutions),
                }
            )
            continue

        resolved[breakpoint] = _descriptor(
            size=_first_set(entry.size, root.size),
            mode=_first_set(entry.mode, root.mode),
            fill=_first_set(entry.fill, root.fill),
            resolutions=_first_set(entry.resolutions, root.resolutions),
            max_width=entry.max_width or width,
        )

    logger.debug(
        "Resolved preset '%s' to %s across %d breakpoints",
        name,
        root.to_json(),
        len(resolved),
    )
    return ResolvedPreset(root=root, breakpoints=resolved)

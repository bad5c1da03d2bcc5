import logging
from typing import Dict, List, Mapping, Optional, Union

from media_presets.core.exceptions import UnknownPresetError
from media_presets.models.data_models import CropMode, PresetDefinition

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "default"

FALLBACK_DEFAULT = PresetDefinition(
    mode=CropMode.FIT, resolutions=["1x", "2x"]
)


class PresetRegistry:
    """Named presets. Written at configuration load, read while rendering."""

    def __init__(self, presets: Optional[Mapping] = None):
        self._presets: Dict[str, PresetDefinition] = {}
        for name, preset in (presets or {}).items():
            self.register(name, preset)

    def register(
        self, name: str, preset: Union[PresetDefinition, Mapping]
    ) -> PresetDefinition:
        if not isinstance(preset, PresetDefinition):
            preset = PresetDefinition.model_validate(preset)
        self._presets[name] = preset
        logger.debug("Registered preset '%s'", name)
        return preset

    def get(self, name: str) -> PresetDefinition:
        if name not in self._presets:
            raise UnknownPresetError(name)
        return self._presets[name]

    @property
    def default(self) -> PresetDefinition:
        return self._presets.get(DEFAULT_PRESET, FALLBACK_DEFAULT)

    def names(self) -> List[str]:
        return list(self._presets)

    def __len__(self) -> int:
        return len(self._presets)


class MediaConfig:
    """Preset registry plus the breakpoint catalogue (name -> pixel width)."""

    def __init__(
        self,
        presets: Optional[Union[PresetRegistry, Mapping]] = None,
        breakpoints: Optional[Mapping[str, int]] = None,
    ):
        if not isinstance(presets, PresetRegistry):
            presets = PresetRegistry(presets)
        self.presets = presets
        self.breakpoints: Dict[str, int] = {
            name: int(width) for name, width in (breakpoints or {}).items()
        }

    def register(self, name: str, preset) -> PresetDefinition:
        return self.presets.register(name, preset)

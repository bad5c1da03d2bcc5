import json
import logging
import os
from typing import Dict, Optional

from pydantic import BaseModel

from media_presets.core.preset_registry import MediaConfig
from media_presets.models.data_models import PresetDefinition

logger = logging.getLogger(__name__)


class MediaConfigDocument(BaseModel):
    breakpoints: Optional[Dict[str, int]] = None
    presets: Optional[Dict[str, PresetDefinition]] = None


def load_media_config(directory: str) -> MediaConfig:
    breakpoints = {}
    presets = {}

    if not os.path.isdir(directory):
        logger.warning("Media config directory '%s' not found", directory)
        return MediaConfig()

    for filename in sorted(os.listdir(directory)):
        if filename.endswith(".json"):
            with open(os.path.join(directory, filename), "r") as file:
                document = MediaConfigDocument(**json.load(file))
            breakpoints.update(document.breakpoints or {})
            presets.update(document.presets or {})
            logger.debug("Loaded media config from %s", filename)

    logger.info(
        "Loaded %d presets and %d breakpoints from %s",
        len(presets),
        len(breakpoints),
        directory,
    )
    return MediaConfig(presets=presets, breakpoints=breakpoints)

import logging
from typing import Optional

from fastapi import FastAPI

from media_presets.api import images, presets
from media_presets.core.config_loader import load_media_config
from media_presets.core.preset_registry import MediaConfig
from media_presets.core.settings import Settings


def create_app(
    settings: Optional[Settings] = None,
    media_config: Optional[MediaConfig] = None,
) -> FastAPI:
    settings = settings or Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    app = FastAPI(
        title="Media Presets",
        description="Responsive image preset resolution",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.media_config = media_config or load_media_config(
        settings.config_directory
    )

    app.include_router(presets.router)
    app.include_router(images.router)
    return app

from fastapi import Request

from media_presets.core.preset_registry import MediaConfig
from media_presets.core.settings import Settings
from media_presets.services.media_url import MediaUrlFn, media_url_factory


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_media_config(request: Request) -> MediaConfig:
    return request.app.state.media_config


def get_media_url(request: Request) -> MediaUrlFn:
    return media_url_factory(request.app.state.settings.media_base_url)

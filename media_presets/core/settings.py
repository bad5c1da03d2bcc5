from pydantic_settings import BaseSettings, SettingsConfigDict

from media_presets.helpers.geometry import PLACEHOLDER_URL
from media_presets.models.data_models import RenderMode


class Settings(BaseSettings):
    config_directory: str = "config"
    media_base_url: str = ""
    placeholder_url: str = PLACEHOLDER_URL
    render_mode: RenderMode = RenderMode.LIVE
    log_level: str = "info"

    model_config = SettingsConfigDict(
        env_prefix="MEDIA_PRESETS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from media_presets.core.exceptions import InvalidModeError


class CropMode(str, Enum):
    ORIGINAL = "o"
    FILL = "fill"
    EXACT = "e"
    FIT = "rc"
    PORTRAIT = "p"
    LANDSCAPE = "l"
    AUTO = "a"
    CROP = "c"

    @classmethod
    def parse(cls, raw) -> Optional["CropMode"]:
        """Accept a member, a wire code ("rc") or a member name ("fit")."""
        if raw is None or raw == "":
            return None
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            value = raw.strip()
            for mode in cls:
                if value == mode.value or value.upper() == mode.name:
                    return mode
        raise InvalidModeError(raw)


class RenderMode(str, Enum):
    EDIT = "edit"
    LIVE = "live"
    PREVIEW = "preview"


class PresetDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mode: Optional[CropMode] = None
    # raw size value, classified at resolution time
    size: Any = None
    fill: Any = None
    resolutions: Optional[List[Any]] = None
    breakpoints: Optional[Dict[str, Union[str, "PresetDefinition"]]] = None
    max_width: int = Field(default=0, alias="maxWidth")

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, v):
        return CropMode.parse(v)

    @field_validator("max_width", mode="before")
    @classmethod
    def coerce_max_width(cls, v):
        return int(v or 0)


class BoundAsset(BaseModel):
    id: Optional[Union[int, str]] = None
    path: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class ImageBinding(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    area: Optional[str] = None
    size: Any = None
    width: Optional[int] = None
    height: Optional[int] = None
    mode: Optional[CropMode] = None
    color: Optional[str] = "0,0,0"
    src: Any = None
    alt: Optional[str] = None
    title: Optional[str] = None
    css_class: Optional[str] = Field(default=None, alias="class")
    style: Optional[str] = None

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, v):
        return CropMode.parse(v)

    @property
    def inline(self) -> bool:
        return bool(self.area)


class PictureBinding(BaseModel):
    model_config = ConfigDict(frozen=True)

    area: Optional[str] = None
    preset: str = "default"
    size: Any = None
    width: Optional[int] = None
    height: Optional[int] = None
    mode: Optional[CropMode] = None
    fill: Optional[str] = None
    src: Any = None
    alt: Optional[str] = None
    title: Optional[str] = None
    image_class: Optional[str] = None
    picture_class: Optional[str] = None

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, v):
        return CropMode.parse(v)

    @property
    def inline(self) -> bool:
        return bool(self.area)

    def size_override(self):
        """Explicit size, or width/height folded into "WxH"."""
        if self.size:
            return self.size
        width = self.width or self.height
        height = self.height or self.width
        if width and height:
            return f"{int(width)}x{int(height)}"
        return None

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from media_presets.models.data_models import CropMode


class RenderDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mode: CropMode
    size: str
    fill: Optional[str] = None
    resolutions: List[str]
    max_width: int = Field(default=0, alias="maxWidth")

    def to_json(self) -> dict:
        return {
            "mode": self.mode.value,
            "size": self.size,
            "fill": self.fill,
            "maxWidth": self.max_width,
            "resolutions": list(self.resolutions),
        }


class SrcSet(BaseModel):
    breakpoint: str
    max_width: int = Field(alias="maxWidth")
    sources: Dict[str, str]
    combined: str

    model_config = ConfigDict(populate_by_name=True)

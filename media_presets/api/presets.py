from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator

from media_presets.api.dependencies import get_media_config, get_media_url
from media_presets.core.exceptions import (
    BreakpointsMissingError,
    UnknownPresetError,
)
from media_presets.core.preset_registry import MediaConfig
from media_presets.models.data_models import CropMode, PictureBinding
from media_presets.services.media_url import MediaUrlFn
from media_presets.services.picture_component import PictureComponent
from media_presets.services.preset_resolver import resolve_preset

router = APIRouter()


class SrcSetRequest(BaseModel):
    path: str
    size: Any = None
    width: Optional[int] = None
    height: Optional[int] = None
    mode: Optional[CropMode] = None
    fill: Optional[str] = None

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, v):
        return CropMode.parse(v)


@router.get(
    "/presets",
    summary="List Presets",
    description="Registered preset names and the breakpoint catalogue.",
)
async def list_presets(config: MediaConfig = Depends(get_media_config)):
    return {
        "presets": config.presets.names(),
        "breakpoints": config.breakpoints,
    }


@router.get(
    "/presets/{name}",
    summary="Resolve Preset",
    description="Resolved root descriptor and per-breakpoint descriptors.",
)
async def get_preset(
    name: str, config: MediaConfig = Depends(get_media_config)
):
    try:
        resolved = resolve_preset(
            name, None, config.presets, config.breakpoints
        )
    except UnknownPresetError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BreakpointsMissingError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return resolved.to_json()


@router.post(
    "/presets/{name}/srcset",
    summary="Build Srcset",
    description="Srcset entries for a source path rendered through a preset.",
)
async def build_srcset(
    name: str,
    request: SrcSetRequest,
    config: MediaConfig = Depends(get_media_config),
    media_url_fn: MediaUrlFn = Depends(get_media_url),
):
    try:
        picture = PictureComponent(
            PictureBinding(
                preset=name,
                src=request.path,
                size=request.size,
                width=request.width,
                height=request.height,
                mode=request.mode,
                fill=request.fill,
            ),
            config,
            media_url_fn=media_url_fn,
        )
        return {
            "src": picture.default_src(),
            "srcsets": [
                srcset.model_dump(by_alias=True)
                for srcset in picture.src_sets()
            ],
        }
    except UnknownPresetError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BreakpointsMissingError as e:
        raise HTTPException(status_code=500, detail=str(e))

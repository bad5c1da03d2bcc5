from fastapi import APIRouter, Depends

from media_presets.api.dependencies import get_media_url, get_settings
from media_presets.core.settings import Settings
from media_presets.models.data_models import ImageBinding
from media_presets.services.image_component import ImageComponent
from media_presets.services.media_url import MediaUrlFn

router = APIRouter()


@router.post(
    "/images/resolve",
    summary="Resolve Image",
    description="Normalized size, crop mode and URL for a single image.",
    response_description="The size, mode and source URL of the image.",
)
async def resolve_image(
    binding: ImageBinding,
    settings: Settings = Depends(get_settings),
    media_url_fn: MediaUrlFn = Depends(get_media_url),
):
    image = ImageComponent(
        binding,
        render_mode=settings.render_mode,
        media_url_fn=media_url_fn,
        placeholder_url=settings.placeholder_url,
    )
    return {
        "size": image.size(),
        "mode": image.mode().value,
        "src": image.src(),
        "should_render": image.should_render(),
    }

from typing import Optional, Tuple

from media_presets.helpers.sizes import (
    ORIGINAL_SIZE,
    classify_size,
    image_size_string,
)
from media_presets.models.data_models import CropMode, RenderMode

PLACEHOLDER_SIZE = "256x256"
PLACEHOLDER_URL = "https://placehold.it"


def normalize_geometry(
    raw_size=None,
    raw_width=None,
    raw_height=None,
    raw_mode=None,
    render_mode: RenderMode = RenderMode.LIVE,
    has_content: bool = False,
) -> Tuple[Optional[str], CropMode]:
    """Turn raw size/width/height/mode inputs into (size, crop mode).

    A lone width or height is used for both axes and forces LANDSCAPE or
    PORTRAIT respectively. Without a usable size the mode is ORIGINAL.
    In edit mode with no bound content a placeholder box is sized instead.
    """
    mode = CropMode.parse(raw_mode)

    if raw_width and not raw_height:
        mode = CropMode.LANDSCAPE
        raw_height = raw_width
    elif raw_height and not raw_width:
        mode = CropMode.PORTRAIT
        raw_width = raw_height

    size_input = classify_size(raw_size, drop_empty=False)
    if not raw_size and raw_width and raw_height:
        size_input = classify_size(f"{int(raw_width)}x{int(raw_height)}")

    size = image_size_string(size_input)

    if size is None and render_mode == RenderMode.EDIT and not has_content:
        size = PLACEHOLDER_SIZE

    if not size or size == ORIGINAL_SIZE:
        return size, CropMode.ORIGINAL

    return size, mode or CropMode.EXACT


def placeholder_src(size: Optional[str], base_url: str = PLACEHOLDER_URL):
    return f"{base_url.rstrip('/')}/{size or PLACEHOLDER_SIZE}"

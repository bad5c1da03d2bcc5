from typing import Callable, Optional
from urllib.parse import quote

from media_presets.models.data_models import CropMode

MediaUrlFn = Callable[[str, Optional[str], CropMode, Optional[str]], str]


def media_url(
    path: str,
    size: Optional[str] = None,
    mode: CropMode = CropMode.ORIGINAL,
    fill: Optional[str] = None,
    base_url: str = "",
) -> str:
    path = path.lstrip("/")
    base_url = base_url.rstrip("/")

    if not size or mode == CropMode.ORIGINAL:
        return f"{base_url}/{path}"

    segments = [CropMode(mode).value, size]
    if fill:
        segments.append(quote(fill.replace(" ", ""), safe=","))
    return f"{base_url}/media/{'/'.join(segments)}/{path}"


def media_url_factory(base_url: str) -> MediaUrlFn:
    def _media_url(path, size=None, mode=CropMode.ORIGINAL, fill=None):
        return media_url(path, size, mode, fill, base_url=base_url)

    return _media_url

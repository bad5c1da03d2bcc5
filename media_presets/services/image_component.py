from typing import Optional

from media_presets.core.abstract_content_binder import ContentBinder
from media_presets.helpers.geometry import (
    PLACEHOLDER_URL,
    normalize_geometry,
    placeholder_src,
)
from media_presets.helpers.sources import source_path
from media_presets.models.data_models import (
    CropMode,
    ImageBinding,
    RenderMode,
)
from media_presets.services.media_url import MediaUrlFn, media_url


class ImageComponent:
    """A single, non-responsive image bound to a source or a content area."""

    def __init__(
        self,
        binding: ImageBinding,
        render_mode: RenderMode = RenderMode.LIVE,
        binder: Optional[ContentBinder] = None,
        media_url_fn: MediaUrlFn = media_url,
        placeholder_url: str = PLACEHOLDER_URL,
    ):
        self.binding = binding
        self.render_mode = render_mode
        self.media_url_fn = media_url_fn
        self.placeholder_url = placeholder_url
        self.content = None

        self._src = binding.src
        self._alt = binding.alt
        self._title = binding.title

        if binding.inline and binder is not None:
            if render_mode == RenderMode.EDIT:
                self.content = binder.ensure_binding_exists(
                    binding.area, "image"
                )
            else:
                self.content = binder.resolve_binding(
                    binding.area, render_mode
                )

            if self.content:
                self._src = self.content
                self._alt = self.content.description
                self._title = self.content.title

        self._size, self._mode = normalize_geometry(
            binding.size,
            binding.width,
            binding.height,
            binding.mode,
            render_mode=render_mode,
            has_content=self.path() is not None,
        )

    @property
    def id(self):
        if self.binding.inline and self.content:
            return self.content.id
        return None

    @property
    def inline(self) -> bool:
        return self.binding.inline

    @property
    def css_class(self) -> Optional[str]:
        return self.binding.css_class

    @property
    def style(self) -> Optional[str]:
        return self.binding.style

    def path(self) -> Optional[str]:
        return source_path(self._src, "path", "image")

    def size(self) -> Optional[str]:
        return self._size

    def mode(self) -> CropMode:
        return self._mode

    def color(self) -> Optional[str]:
        return self.binding.color

    def src(self) -> Optional[str]:
        path = self.path()
        if path:
            return self.media_url_fn(
                path, self.size(), self.mode(), self.color()
            )
        if self.render_mode == RenderMode.EDIT:
            return placeholder_src(self.size(), self.placeholder_url)
        return None

    def alt(self) -> Optional[str]:
        return self._alt

    def title(self) -> Optional[str]:
        return self._title

    def should_render(self) -> bool:
        return not (self.render_mode == RenderMode.LIVE and not self.path())

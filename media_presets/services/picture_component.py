import uuid
from typing import List, Optional

from media_presets.core.abstract_content_binder import ContentBinder
from media_presets.core.preset_registry import MediaConfig
from media_presets.helpers.geometry import PLACEHOLDER_URL, placeholder_src
from media_presets.helpers.sizes import ORIGINAL_SIZE
from media_presets.helpers.sources import source_path
from media_presets.models.data_models import PictureBinding, RenderMode
from media_presets.models.render_descriptor import SrcSet
from media_presets.services.media_url import MediaUrlFn, media_url
from media_presets.services.preset_resolver import (
    ResolvedPreset,
    resolve_preset,
)
from media_presets.services.srcset_builder import build_srcsets


class PictureComponent:
    """A responsive picture rendered through a named preset."""

    def __init__(
        self,
        binding: PictureBinding,
        config: MediaConfig,
        render_mode: RenderMode = RenderMode.LIVE,
        binder: Optional[ContentBinder] = None,
        media_url_fn: MediaUrlFn = media_url,
        placeholder_url: str = PLACEHOLDER_URL,
    ):
        self.binding = binding
        self.config = config
        self.render_mode = render_mode
        self.media_url_fn = media_url_fn
        self.placeholder_url = placeholder_url
        self.content = None

        if binding.inline and binder is not None:
            if render_mode == RenderMode.EDIT:
                self.content = binder.ensure_binding_exists(
                    binding.area, "image"
                )
            else:
                self.content = binder.resolve_binding(
                    binding.area, render_mode
                )

    @property
    def inline(self) -> bool:
        return self.binding.inline

    def overrides(self) -> dict:
        return {
            "size": self.binding.size_override(),
            "mode": self.binding.mode,
            "fill": self.binding.fill,
        }

    def preset(self) -> ResolvedPreset:
        return resolve_preset(
            self.binding.preset,
            self.overrides(),
            self.config.presets,
            self.config.breakpoints,
        )

    def src(self) -> Optional[str]:
        if self.inline:
            return self.content.path if self.content else None
        return source_path(self.binding.src)

    def default_src(self) -> Optional[str]:
        root = self.preset().root
        src = self.src()
        if src:
            return self.media_url_fn(src, root.size, root.mode, root.fill)

        if self.inline and self.render_mode == RenderMode.EDIT:
            size = None if root.size == ORIGINAL_SIZE else root.size
            return placeholder_src(size, self.placeholder_url)
        return None

    def src_sets(self) -> List[SrcSet]:
        src = self.src()
        if not src:
            return []
        resolved = self.preset()
        return build_srcsets(
            src, resolved.root, resolved.breakpoints, self.media_url_fn
        )

    def editor_settings(self) -> dict:
        if not (self.inline and self.render_mode == RenderMode.EDIT):
            return {}
        root = self.preset().root
        content_id = self.content.id if self.content else None
        return {
            "id": f"e-{content_id or ''}-picture-{uuid.uuid4().hex[:13]}",
            "data-content-type": "image",
            "data-content-field": "image",
            "data-content-dimensions": root.size,
            "data-content-compressiontype": root.mode.value,
            "data-content-id": content_id,
        }

    def should_render(self) -> bool:
        return self.render_mode == RenderMode.EDIT or bool(self.src())

    def title(self) -> Optional[str]:
        if self.content and self.content.title is not None:
            return self.content.title
        return self.binding.title

    def alt(self) -> Optional[str]:
        if self.content and self.content.description is not None:
            return self.content.description
        return self.binding.alt

import logging
from typing import Dict, Optional

from media_presets.core.abstract_content_binder import ContentBinder
from media_presets.models.data_models import BoundAsset, RenderMode

logger = logging.getLogger(__name__)


class InMemoryContentBinder(ContentBinder):
    def __init__(self, assets: Optional[Dict[str, BoundAsset]] = None):
        self.assets: Dict[str, BoundAsset] = dict(assets or {})
        self.kinds: Dict[str, str] = {}

    def bind(self, area: str, asset) -> BoundAsset:
        if not isinstance(asset, BoundAsset):
            asset = BoundAsset.model_validate(asset)
        self.assets[area] = asset
        return asset

    def resolve_binding(
        self, area: str, render_mode: RenderMode
    ) -> Optional[BoundAsset]:
        return self.assets.get(area)

    def ensure_binding_exists(
        self, area: str, kind: str
    ) -> Optional[BoundAsset]:
        if area not in self.assets:
            logger.debug("Creating empty %s binding for '%s'", kind, area)
            self.assets[area] = BoundAsset(id=len(self.assets) + 1)
            self.kinds[area] = kind
        return self.assets[area]

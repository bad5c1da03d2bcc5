from abc import ABC, abstractmethod
from typing import Optional

from media_presets.models.data_models import BoundAsset, RenderMode


class ContentBinder(ABC):
    @abstractmethod
    def resolve_binding(
        self, area: str, render_mode: RenderMode
    ) -> Optional[BoundAsset]:
        pass

    @abstractmethod
    def ensure_binding_exists(
        self, area: str, kind: str
    ) -> Optional[BoundAsset]:
        pass

from collections.abc import Mapping
from typing import Optional


def source_path(src, *fields: str) -> Optional[str]:
    """Path from a raw source: a string, or a mapping/object carrying one of
    the given fields ("path" by default)."""
    fields = fields or ("path",)
    if src is None:
        return None
    if isinstance(src, str):
        return src or None
    for field in fields:
        if isinstance(src, Mapping):
            value = src.get(field)
        else:
            value = getattr(src, field, None)
        if value:
            return str(value)
    return None

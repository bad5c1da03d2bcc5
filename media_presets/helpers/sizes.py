"""Size values and the closed set of raw size inputs."""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

ORIGINAL_SIZE = "0x0"


class Size(NamedTuple):
    width: int
    height: int

    def __str__(self):
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class SizeAbsent:
    pass


@dataclass(frozen=True)
class SizeScalar:
    value: int


@dataclass(frozen=True)
class SizePair:
    width: Union[int, str]
    height: Union[int, str]


@dataclass(frozen=True)
class SizeText:
    value: str


@dataclass(frozen=True)
class SizeUnsupported:
    raw: object = None


SizeInput = Union[
    SizeAbsent, SizeScalar, SizePair, SizeText, SizeUnsupported
]


def classify_size(raw, drop_empty: bool = True) -> SizeInput:
    """Sort a raw size value into one of the input variants.

    Sequences drop empty items first unless drop_empty is False, in which
    case the first two items are taken as they are.
    """
    if isinstance(
        raw, (SizeAbsent, SizeScalar, SizePair, SizeText, SizeUnsupported)
    ):
        return raw
    if raw is None:
        return SizeAbsent()
    if isinstance(raw, bool):
        return SizeUnsupported(raw)
    if isinstance(raw, (int, float)):
        return SizeScalar(int(raw))
    if isinstance(raw, str):
        return SizeText(raw)
    if isinstance(raw, Size):
        return SizePair(raw.width, raw.height)
    if isinstance(raw, (list, tuple)):
        if not drop_empty and len(raw) >= 2:
            return SizePair(raw[0], raw[1])
        items = [item for item in raw if item]
        if len(items) == 1:
            return SizeScalar(_as_int(items[0]))
        if not items:
            return SizePair(0, 0)
        return SizePair(items[0], items[1] if len(items) > 1 else 0)
    return SizeUnsupported(raw)


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def image_size_string(size: SizeInput) -> Optional[str]:
    """Canonical size for a single image.

    None when no size was given, "0x0" for shapes that cannot be read.
    """
    if isinstance(size, SizeText):
        text = size.value.lower()
        if text.find("x") > 0:
            width, height = text.split("x")[:2]
            return f"{width}x{height}"
        if _is_numeric(text):
            return f"{text}x{text}"
        return text or None
    if isinstance(size, SizeScalar):
        return f"{size.value}x{size.value}"
    if isinstance(size, SizePair):
        return f"{size.width}x{size.height}"
    if isinstance(size, SizeUnsupported):
        return ORIGINAL_SIZE
    return None


def preset_size_string(size: SizeInput) -> str:
    """Canonical size for a preset, "0x0" when nothing usable."""
    if isinstance(size, SizeText) and size.value:
        if "x" in size.value:
            return size.value
        return f"{size.value}x{size.value}"
    if isinstance(size, SizeScalar):
        return f"{size.value}x{size.value}"
    if isinstance(size, SizePair):
        return f"{size.width}x{size.height}"
    return ORIGINAL_SIZE


def _is_numeric(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True

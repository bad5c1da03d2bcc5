import logging
import re
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTIONS = ["1x", "2x", "3x"]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def density_factor(resolution: str) -> int:
    match = _LEADING_INT.match(resolution)
    return int(match.group(1)) if match else 0


def normalize_resolutions(resolutions: Optional[Iterable]) -> List[str]:
    """Lower-cased "Nx" entries in ascending density order.

    Non-string entries and strings without the trailing "x" are dropped,
    duplicates are kept.
    """
    if resolutions is None:
        resolutions = DEFAULT_RESOLUTIONS

    kept = []
    for resolution in resolutions:
        if not isinstance(resolution, str):
            logger.debug("Dropping non-string resolution %r", resolution)
            continue
        resolution = resolution.lower()
        if not resolution.endswith("x"):
            logger.warning("Dropping invalid resolution %r", resolution)
            continue
        kept.append(resolution)

    return sorted(kept, key=density_factor)

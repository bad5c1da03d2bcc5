import argparse
import logging
import sys

from media_presets.core.config_loader import load_media_config
from media_presets.core.exceptions import MediaPresetError
from media_presets.core.preset_registry import MediaConfig
from media_presets.services.preset_resolver import resolve_preset

logger = logging.getLogger(__name__)


def check_presets(config: MediaConfig) -> int:
    """Resolve every registered preset, returning the number of failures."""
    failures = 0
    for name in config.presets.names():
        try:
            resolved = resolve_preset(
                name, None, config.presets, config.breakpoints
            )
        except MediaPresetError as e:
            logger.error("Preset '%s' failed to resolve: %s", name, e)
            failures += 1
            continue

        logger.info("Preset '%s': %s", name, resolved.root.to_json())
        for breakpoint, descriptor in resolved.breakpoints.items():
            logger.info("  %s: %s", breakpoint, descriptor.to_json())
    return failures


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Resolve every configured media preset"
    )
    parser.add_argument("directory", nargs="?", default="config")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    config = load_media_config(args.directory)
    failures = check_presets(config)
    if failures:
        logger.error("%d preset(s) failed to resolve", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

"""Shared test fixtures."""

import pytest

from media_presets.core.preset_registry import MediaConfig

BREAKPOINTS = {"sm": 480, "md": 768}


def fake_media_url(path, size=None, mode=None, fill=None):
    mode = mode.value if mode is not None else None
    return f"https://cdn.test/{mode}/{size}/{fill}/{path}"


@pytest.fixture
def media_url_fn():
    return fake_media_url


@pytest.fixture
def media_config() -> MediaConfig:
    return MediaConfig(
        presets={
            "default": {"mode": "rc", "resolutions": ["1x", "2x"]},
            "hero": {
                "mode": "fill",
                "size": "1200x400",
                "fill": "255,255,255",
                "breakpoints": {
                    "sm": {"size": "480x300", "mode": "c"},
                    "md": "sm",
                },
            },
            "original": {"size": "0x0", "mode": "c"},
        },
        breakpoints=BREAKPOINTS,
    )

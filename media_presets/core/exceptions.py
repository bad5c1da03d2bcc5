class MediaPresetError(Exception):
    """Base class for preset resolution failures."""


class UnknownPresetError(MediaPresetError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Preset '{name}' is not registered")

    def __str__(self):
        return self.args[0]


class BreakpointsMissingError(MediaPresetError):
    def __init__(self):
        super().__init__(
            "No breakpoints configured, responsive presets cannot be resolved"
        )


class InvalidModeError(MediaPresetError, ValueError):
    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Unsupported crop mode: {mode!r}")

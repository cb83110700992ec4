"""Building blocks for small Raspberry Pi robot programs: scripts, durations, colours, gamepads and connections."""

__version__ = "1.0.0"
"""nirpilot: desktop automation (windows, keyboard, mouse, system) via NirCmd."""

from nirpilot import log  # noqa: F401  (silences the package logger by default)
from nirpilot.config import __version__
from nirpilot import clipboard, keyboard, mouse, system, window

win = window

__all__ = [
    "__version__",
    "clipboard",
    "keyboard",
    "mouse",
    "system",
    "win",
    "window",
]

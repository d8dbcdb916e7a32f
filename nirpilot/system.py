"""System utilities: screenshots, sound, speech, tray balloons and dialogs.

Example::

    from nirpilot import system

    # Screenshot of the active window
    await system.screenshot("ActiveWindow", r"c:\\temp\\shot.png")

    # Screenshot of a region
    await system.screenshot(Rectangle(10, 20, 300, 500), r"c:\\temp\\shot.png")

    if await system.question_box("A Question", "Do you want to continue?"):
        ...
"""

import math
from enum import Enum
from typing import List, Optional, Union

from nirpilot import clipboard
from nirpilot.adapters.nircmd import run_nircmd
from nirpilot.domain.errors import ValidationError
from nirpilot.domain.models import Rectangle
from nirpilot.domain.window_args import is_blank, rectangle_tokens
from nirpilot.ports.outbound import CommandRunner

QUESTION_BOX_YES = 48
_VOLUME_STEP = 655.35  # 65535 / 100


class ScreenshotMode(str, Enum):
    PRIMARY_MONITOR = "PrimaryMonitor"
    ALL_MONITORS = "AllMonitors"
    ACTIVE_WINDOW = "ActiveWindow"


_SCREENSHOT_COMMANDS = {
    ScreenshotMode.ACTIVE_WINDOW: "savescreenshotwin",
    ScreenshotMode.ALL_MONITORS: "savescreenshotfull",
    ScreenshotMode.PRIMARY_MONITOR: "savescreenshot",
}


def _check_range(value: int, low: int, high: int, name: str) -> None:
    if not low <= value <= high:
        raise ValidationError(f"{name} must be between {low} and {high}, got {value}")


async def screenshot(
    mode: Union[ScreenshotMode, str, Rectangle],
    image_path: str,
    runner: Optional[CommandRunner] = None,
) -> int:
    """Save a screenshot of a monitor, the active window or a region.

    Supported formats: .bmp, .gif, .png, .jpg, .tiff. Pass ``"*clipboard*"``
    as ``image_path`` to copy the image to the clipboard instead.
    """
    if is_blank(image_path):
        raise ValidationError("image_path must not be blank")
    if isinstance(mode, Rectangle):
        args = ["savescreenshot", image_path, *rectangle_tokens(mode)]
    else:
        try:
            command = _SCREENSHOT_COMMANDS[ScreenshotMode(mode)]
        except ValueError:
            raise ValidationError(f"Unknown screenshot mode: {mode!r}") from None
        args = [command, image_path]
    return await run_nircmd(args, runner)


async def beep(frequency: int, duration: int, runner: Optional[CommandRunner] = None) -> int:
    """Beep at ``frequency`` hertz for ``duration`` milliseconds."""
    return await run_nircmd(["beep", f"{frequency:d}", f"{duration:d}"], runner)


async def winbeep(runner: Optional[CommandRunner] = None) -> int:
    """Play the standard Windows beep."""
    return await run_nircmd(["stdbeep"], runner)


async def speak(
    text: str,
    rate: int = 0,
    volume: Optional[int] = None,
    runner: Optional[CommandRunner] = None,
) -> int:
    """Speak ``text``.

    Args:
        text: Text to speak.
        rate: -10 (very slow) to 10 (very fast).
        volume: 0 to 100; omitted uses the system default.
    """
    _check_range(rate, -10, 10, "rate")
    args: List[str] = ["speak", "text", text, f"{rate:d}"]
    if volume is not None:
        _check_range(volume, 0, 100, "volume")
        args.append(f"{volume:d}")
    return await run_nircmd(args, runner)


async def balloon(
    title: str,
    text: str,
    icon: int,
    timeout: int,
    runner: Optional[CommandRunner] = None,
) -> int:
    """Show a tray balloon. ``icon`` is an icon index in shell32.dll,
    ``timeout`` is in milliseconds."""
    args = ["trayballoon", title, text, f"shell32.dll,{icon:d}", f"{timeout:d}"]
    return await run_nircmd(args, runner)


async def set_volume(percent: Union[int, float], runner: Optional[CommandRunner] = None) -> int:
    """Set the system volume, 0 (mute) to 100 (highest)."""
    _check_range(percent, 0, 100, "volume")
    level = math.floor(_VOLUME_STEP * percent)
    return await run_nircmd(["setsysvolume", str(level)], runner)


async def _mute_system(flag: int, runner: Optional[CommandRunner]) -> int:
    return await run_nircmd(["mutesysvolume", str(flag)], runner)


async def mute(runner: Optional[CommandRunner] = None) -> int:
    return await _mute_system(1, runner)


async def unmute(runner: Optional[CommandRunner] = None) -> int:
    return await _mute_system(0, runner)


async def question_box(title: str, text: str, runner: Optional[CommandRunner] = None) -> bool:
    """Show a Yes/No dialog; True when the user clicks Yes."""
    exit_code = await run_nircmd(["qboxcom", text, title, "returnval", "0x30"], runner)
    return exit_code == QUESTION_BOX_YES


async def info_box(title: str, text: str, runner: Optional[CommandRunner] = None) -> int:
    return await run_nircmd(["infobox", text, title], runner)


async def set_clipboard(text: str, runner: Optional[CommandRunner] = None) -> int:
    return await clipboard.set_text(text, runner)


async def clear_clipboard(runner: Optional[CommandRunner] = None) -> int:
    return await clipboard.clear(runner)

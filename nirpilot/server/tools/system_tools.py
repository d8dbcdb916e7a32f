"""MCP tools for screenshots, sound, speech, clipboard and message boxes."""

from typing import Literal, Optional

from nirpilot import clipboard, system
from nirpilot.domain.models import Rectangle
from nirpilot.server.mcp_server import mcp
from nirpilot.server.state import get_state, run_tool


@mcp.tool()
async def nirpilot_screenshot(
    image_path: str,
    mode: Literal["PrimaryMonitor", "AllMonitors", "ActiveWindow", "Region"] = "PrimaryMonitor",
    x: int = 0,
    y: int = 0,
    width: int = 0,
    height: int = 0,
) -> dict:
    """Save a screenshot to a file (.bmp, .gif, .png, .jpg, .tiff).

    Args:
        image_path: Destination file, or "*clipboard*" to copy the image.
        mode: What to capture. Region uses x, y, width and height.
    """
    runner = get_state().runner
    target = Rectangle(x, y, width, height) if mode == "Region" else mode
    return await run_tool(lambda: system.screenshot(target, image_path, runner))


@mcp.tool()
async def nirpilot_beep(frequency: Optional[int] = None, duration: int = 500) -> dict:
    """Play a beep of ``frequency`` Hz for ``duration`` ms, or the standard
    Windows beep when no frequency is given."""
    runner = get_state().runner
    if frequency is None:
        return await run_tool(lambda: system.winbeep(runner))
    return await run_tool(lambda: system.beep(frequency, duration, runner))


@mcp.tool()
async def nirpilot_speak(text: str, rate: int = 0, volume: Optional[int] = None) -> dict:
    """Speak text aloud.

    Args:
        text: Text to speak.
        rate: -10 (very slow) to 10 (very fast).
        volume: 0 to 100.
    """
    runner = get_state().runner
    return await run_tool(lambda: system.speak(text, rate, volume, runner))


@mcp.tool()
async def nirpilot_clipboard(action: Literal["set", "clear"], text: str = "") -> dict:
    """Set the clipboard text, or clear the clipboard."""
    runner = get_state().runner
    if action == "clear":
        return await run_tool(lambda: clipboard.clear(runner))
    return await run_tool(lambda: clipboard.set_text(text, runner))


@mcp.tool()
async def nirpilot_volume(
    action: Literal["set", "mute", "unmute"],
    percent: int = 50,
) -> dict:
    """Set the system volume (0-100), mute or unmute it."""
    runner = get_state().runner
    if action == "mute":
        return await run_tool(lambda: system.mute(runner))
    if action == "unmute":
        return await run_tool(lambda: system.unmute(runner))
    return await run_tool(lambda: system.set_volume(percent, runner))


@mcp.tool()
async def nirpilot_message(
    kind: Literal["info", "question", "balloon"],
    title: str,
    text: str,
    icon: int = 77,
    timeout: int = 5000,
) -> dict:
    """Show a message to the user.

    info: an OK box. question: a Yes/No box; ``answer`` is true for Yes.
    balloon: a tray balloon using ``icon`` (shell32.dll index) for
    ``timeout`` ms.
    """
    runner = get_state().runner
    if kind == "question":
        answer = {}

        async def _ask() -> int:
            answer["yes"] = await system.question_box(title, text, runner)
            return 0

        result = await run_tool(_ask)
        if result["success"]:
            result["answer"] = answer["yes"]
        return result
    if kind == "balloon":
        return await run_tool(lambda: system.balloon(title, text, icon, timeout, runner))
    return await run_tool(lambda: system.info_box(title, text, runner))

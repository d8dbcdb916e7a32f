"""MCP tools for keyboard and mouse input."""

from typing import Literal

from nirpilot import keyboard, mouse
from nirpilot.server.mcp_server import mcp
from nirpilot.server.state import get_state, run_tool


@mcp.tool()
async def nirpilot_send_key(
    key: str,
    action: Literal["press", "down", "up"] = "press",
) -> dict:
    """Press, hold down or release a key.

    Args:
        key: Key name such as "enter", "ctrl", "f5", "a" or "7".
        action: press (down + up), down or up.
    """
    runner = get_state().runner
    return await run_tool(lambda: keyboard.send_key(key, action, runner))


@mcp.tool()
async def nirpilot_key_shortcut(
    shortcut: Literal["cut", "copy", "paste", "select_all"],
) -> dict:
    """Send a Ctrl shortcut (Ctrl+X, Ctrl+C, Ctrl+V or Ctrl+A)."""
    runner = get_state().runner
    return await run_tool(lambda: keyboard.SHORTCUTS[shortcut](runner))


@mcp.tool()
async def nirpilot_mouse_button(
    button: Literal["left", "right", "middle"] = "left",
    action: Literal["click", "dblclick", "down", "up"] = "click",
) -> dict:
    """Click, double-click, press or release a mouse button at the cursor."""
    runner = get_state().runner
    return await run_tool(lambda: mouse.button(button, action, runner))


@mcp.tool()
async def nirpilot_set_cursor(x: int, y: int) -> dict:
    """Move the mouse cursor to screen coordinates (x, y)."""
    runner = get_state().runner
    return await run_tool(lambda: mouse.set_cursor(x, y, runner))

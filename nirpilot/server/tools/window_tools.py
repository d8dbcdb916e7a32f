"""MCP tools for window control."""

from typing import Literal, Optional, Union

from nirpilot.server.mcp_server import mcp
from nirpilot.server.state import get_state, run_tool
from nirpilot.window import window_action

WindowActionName = Literal[
    "close",
    "activate",
    "flash",
    "max",
    "min",
    "normal",
    "togglemin",
    "togglemax",
    "center",
    "focus",
    "setsize",
    "move",
]


@mcp.tool()
async def nirpilot_window_action(
    action: WindowActionName,
    title: Optional[str] = None,
    match: Literal["exact", "startsWith", "endsWith", "contains"] = "exact",
    class_name: Optional[str] = None,
    process: Optional[Union[int, str]] = None,
    active: bool = False,
    x: Optional[int] = None,
    y: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> dict:
    """Find a window and act on it.

    Give exactly one way of finding the window. If several are given, the
    first of active, class_name, title, process is used.

    Args:
        action: What to do. setsize and move also need x, y, width and height.
        title: Window title text, compared according to ``match``.
        match: Title comparison: exact, startsWith, endsWith or contains.
        class_name: Window class name.
        process: Process id (number) or executable name such as "notepad.exe".
        active: Target the foreground window.
        x: Left edge in pixels (setsize/move).
        y: Top edge in pixels (setsize/move).
        width: Width in pixels (setsize/move).
        height: Height in pixels (setsize/move).
    """
    find: dict = {}
    if active:
        find["active"] = True
    if class_name is not None:
        find["className"] = class_name
    if title is not None:
        find["title"] = {"value": title, "match": match}
    if process is not None:
        find["process"] = process

    request: dict = {"action": action}
    if any(v is not None for v in (x, y, width, height)):
        request["size"] = {"x": x, "y": y, "width": width, "height": height}

    runner = get_state().runner
    return await run_tool(lambda: window_action(find, request, runner=runner))

"""Mouse cursor and buttons.

Example::

    from nirpilot import mouse

    await mouse.set_cursor(200, 300)
    await mouse.left().double_click()
"""

from enum import Enum
from typing import Optional, Union

from nirpilot.adapters.nircmd import run_nircmd
from nirpilot.domain.errors import ValidationError
from nirpilot.ports.outbound import CommandRunner


class MouseButtons(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class ButtonActions(str, Enum):
    DOWN = "down"
    UP = "up"
    CLICK = "click"
    DOUBLE_CLICK = "dblclick"


def _parse(enum_cls, value, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Unknown mouse {label}: {value!r}") from None


async def set_cursor(x: int, y: int, runner: Optional[CommandRunner] = None) -> int:
    """Move the cursor to absolute screen coordinates."""
    return await run_nircmd(["setcursor", f"{x:d}", f"{y:d}"], runner)


async def button(
    button: Union[MouseButtons, str],
    action: Union[ButtonActions, str],
    runner: Optional[CommandRunner] = None,
) -> int:
    args = [
        "sendmouse",
        _parse(MouseButtons, button, "button").value,
        _parse(ButtonActions, action, "action").value,
    ]
    return await run_nircmd(args, runner)


class MouseButton:
    def __init__(self, button: Union[MouseButtons, str], runner: Optional[CommandRunner] = None):
        self.button = _parse(MouseButtons, button, "button")
        self._runner = runner

    async def _do(self, action: ButtonActions) -> int:
        return await button(self.button, action, self._runner)

    async def click(self) -> int:
        return await self._do(ButtonActions.CLICK)

    async def down(self) -> int:
        return await self._do(ButtonActions.DOWN)

    async def up(self) -> int:
        return await self._do(ButtonActions.UP)

    async def double_click(self) -> int:
        return await self._do(ButtonActions.DOUBLE_CLICK)


def left(runner: Optional[CommandRunner] = None) -> MouseButton:
    return MouseButton(MouseButtons.LEFT, runner)


def right(runner: Optional[CommandRunner] = None) -> MouseButton:
    return MouseButton(MouseButtons.RIGHT, runner)


def middle(runner: Optional[CommandRunner] = None) -> MouseButton:
    return MouseButton(MouseButtons.MIDDLE, runner)

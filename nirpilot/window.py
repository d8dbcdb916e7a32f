"""Window actions.

Example::

    from nirpilot import window

    # Minimize every window whose title contains "myfile"
    await window.window_action({"title": {"value": "myfile", "match": "contains"}}, "min")

    # Same thing through a finder
    await window.by_title_contains("myfile").min()

    # Move the notepad window to (1, 1) and resize it to 100x100
    await window.by_process_name("notepad.exe").set_size(1, 1, 100, 100)
"""

from typing import Any, List, Optional, Union

from nirpilot.adapters.nircmd import run_nircmd
from nirpilot.domain.models import (
    Action,
    ActiveWindow,
    ByClassName,
    ByProcess,
    ByTitle,
    GeometryAction,
    Locator,
    MatchMode,
    Rectangle,
    WindowVerb,
)
from nirpilot.domain.window_args import assemble
from nirpilot.ports.outbound import CommandRunner
from nirpilot.schemas import coerce_action, coerce_locator

WINDOW_PREFIX = "win"


def get_nir_args(window: Any, action: Any) -> List[str]:
    """Translate a window request into ``[verb, *locator, *geometry]``.

    ``window`` may be a title string, a locator, a ``WindowFind`` or a dict
    such as ``{"process": 1234}``; ``action`` a verb string, an action or a
    dict such as ``{"action": "move", "size": {...}}``.

    When both are invalid the action error is raised.
    """
    action = coerce_action(action)
    return assemble(coerce_locator(window), action)


async def window_action(
    window: Any,
    action: Any,
    runner: Optional[CommandRunner] = None,
) -> int:
    """Run ``nircmd win ...`` and return the process exit code."""
    args = [WINDOW_PREFIX, *get_nir_args(window, action)]
    return await run_nircmd(args, runner)


class WindowFinder:
    """A located window; every method runs one action against it."""

    def __init__(self, locator: Union[Locator, str], runner: Optional[CommandRunner] = None):
        self.locator = locator
        self._runner = runner

    def __repr__(self) -> str:
        return f"WindowFinder({self.locator!r})"

    async def _do(self, action: Union[Action, WindowVerb]) -> int:
        return await window_action(self.locator, action, runner=self._runner)

    async def flash(self) -> int:
        return await self._do(WindowVerb.FLASH)

    async def min(self) -> int:
        return await self._do(WindowVerb.MINIMIZE)

    async def max(self) -> int:
        return await self._do(WindowVerb.MAXIMIZE)

    async def activate(self) -> int:
        return await self._do(WindowVerb.ACTIVATE)

    async def center(self) -> int:
        return await self._do(WindowVerb.CENTER)

    async def close(self) -> int:
        return await self._do(WindowVerb.CLOSE)

    async def focus(self) -> int:
        return await self._do(WindowVerb.FOCUS)

    async def normal(self) -> int:
        return await self._do(WindowVerb.NORMAL)

    async def toggle_max(self) -> int:
        return await self._do(WindowVerb.TOGGLE_MAX)

    async def toggle_min(self) -> int:
        return await self._do(WindowVerb.TOGGLE_MIN)

    async def set_size(self, x: int, y: int, width: int, height: int) -> int:
        return await self._do(
            GeometryAction(WindowVerb.SET_SIZE, Rectangle(x, y, width, height))
        )

    async def move_by(self, x: int, y: int, width: int, height: int) -> int:
        return await self._do(
            GeometryAction(WindowVerb.MOVE, Rectangle(x, y, width, height))
        )


def by_title_exact(title: str, runner: Optional[CommandRunner] = None) -> WindowFinder:
    return WindowFinder(ByTitle(title, MatchMode.EXACT), runner)


def by_title_contains(title: str, runner: Optional[CommandRunner] = None) -> WindowFinder:
    return WindowFinder(ByTitle(title, MatchMode.CONTAINS), runner)


def by_title_starts_with(title: str, runner: Optional[CommandRunner] = None) -> WindowFinder:
    return WindowFinder(ByTitle(title, MatchMode.STARTS_WITH), runner)


def by_title_ends_with(title: str, runner: Optional[CommandRunner] = None) -> WindowFinder:
    return WindowFinder(ByTitle(title, MatchMode.ENDS_WITH), runner)


def by_class_name(class_name: str, runner: Optional[CommandRunner] = None) -> WindowFinder:
    return WindowFinder(ByClassName(class_name), runner)


def by_process_name(process_name: str, runner: Optional[CommandRunner] = None) -> WindowFinder:
    """Windows owned by an executable, e.g. ``"notepad.exe"``."""
    return WindowFinder(ByProcess(process_name), runner)


def by_process_id(process_id: int, runner: Optional[CommandRunner] = None) -> WindowFinder:
    return WindowFinder(ByProcess(int(process_id)), runner)


def active_window(runner: Optional[CommandRunner] = None) -> WindowFinder:
    return WindowFinder(ActiveWindow(), runner)

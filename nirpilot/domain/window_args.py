"""Window request → nircmd argument translation.

Pure Python, no I/O. Every function either returns a fresh token list or
raises a ``ValidationError`` subclass.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from nirpilot.domain.errors import (
    BlankValueError,
    NoLocatorFieldError,
    SizeRequiredError,
)
from nirpilot.domain.models import (
    LOCATOR_TYPES,
    Action,
    ActiveWindow,
    ByClassName,
    ByProcess,
    ByTitle,
    GeometryAction,
    Locator,
    MatchMode,
    Rectangle,
    SimpleAction,
    WindowVerb,
)

MATCH_MODE_TOKENS: Dict[MatchMode, str] = {
    MatchMode.EXACT: "title",
    MatchMode.CONTAINS: "ititle",
    MatchMode.ENDS_WITH: "etitle",
    MatchMode.STARTS_WITH: "stitle",
}

ActionLike = Union[Action, WindowVerb, str]


def is_blank(value: Optional[str]) -> bool:
    """True for None, "" and whitespace-only strings."""
    return not value or value.isspace()


def validate_not_blank(value: Optional[str], field: str) -> None:
    if is_blank(value):
        raise BlankValueError(field)


def map_match_mode(mode: Union[MatchMode, str]) -> str:
    return MATCH_MODE_TOKENS[MatchMode.parse(mode)]


def build_locator_args(locator: Union[Locator, str]) -> List[str]:
    """Return the tokens that select the target window."""
    if isinstance(locator, str):
        validate_not_blank(locator, "window")
        return ["title", locator]

    if isinstance(locator, ActiveWindow):
        return ["active"]

    if isinstance(locator, ByClassName):
        validate_not_blank(locator.value, "className")
        return ["class", locator.value]

    if isinstance(locator, ByTitle):
        validate_not_blank(locator.value, "value")
        return [map_match_mode(locator.match), locator.value]

    if isinstance(locator, ByProcess):
        if isinstance(locator.value, int):
            return ["process", f"/{locator.value:d}"]
        validate_not_blank(locator.value, "process")
        return ["process", locator.value]

    raise NoLocatorFieldError()


def as_action(action: ActionLike) -> Action:
    """Promote a bare verb to an action descriptor."""
    if isinstance(action, (SimpleAction, GeometryAction)):
        return action
    verb = WindowVerb.parse(action)
    if verb.needs_size:
        return GeometryAction(verb)
    return SimpleAction(verb)


def rectangle_tokens(size: Rectangle) -> List[str]:
    """x, y, width, height as plain base-10 strings."""
    return [f"{value:d}" for value in (size.x, size.y, size.width, size.height)]


def build_action_args(action: ActionLike) -> List[str]:
    """Return ``[verb]`` or ``[verb, x, y, width, height]``."""
    action = as_action(action)
    if isinstance(action, GeometryAction):
        if action.size is None:
            raise SizeRequiredError(action.verb.value)
        return [action.verb.value, *rectangle_tokens(action.size)]
    return [action.verb.value]


def assemble(locator: Union[Locator, str], action: ActionLike) -> List[str]:
    """Build ``[verb, *locator tokens, *geometry tokens]`` for ``nircmd win``.

    Both inputs are fully validated before any token is produced. The
    subsystem prefix (``win``) is left to the caller.
    """
    if not isinstance(locator, (str, *LOCATOR_TYPES)):
        raise NoLocatorFieldError()

    action = as_action(action)
    if isinstance(action, GeometryAction) and action.size is None:
        raise SizeRequiredError(action.verb.value)

    verb, *geometry = build_action_args(action)
    return [verb, *build_locator_args(locator), *geometry]

"""Request models for loosely structured window requests (dicts, JSON, MCP).

These mirror the ``{window: ..., action: ...}`` shape callers send and turn it
into the domain's tagged locator/action variants.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from nirpilot.domain.errors import (
    InvalidRequestError,
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
from nirpilot.domain.window_args import as_action


class TitleFind(BaseModel):
    model_config = ConfigDict(extra="forbid")

    value: str
    match: MatchMode = Field(
        default=MatchMode.EXACT, validation_alias=AliasChoices("match", "matchMode")
    )


class WindowFind(BaseModel):
    """At most one field should be set; if several are, the first of
    active, className, title, process wins."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    active: Optional[bool] = None
    class_name: Optional[str] = Field(default=None, alias="className")
    title: Optional[TitleFind] = None
    process: Optional[Union[int, str]] = None

    def to_locator(self) -> Locator:
        # Presence decides, not truthiness: {"active": false} still means
        # the active window.
        if self.active is not None:
            return ActiveWindow()
        if self.class_name is not None:
            return ByClassName(self.class_name)
        if self.title is not None:
            return ByTitle(self.title.value, self.title.match)
        if self.process is not None:
            return ByProcess(self.process)
        raise NoLocatorFieldError()


class Size(BaseModel):
    x: Optional[int] = None
    y: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def to_rectangle(self) -> Rectangle:
        if None in (self.x, self.y, self.width, self.height):
            raise SizeRequiredError()
        return Rectangle(self.x, self.y, self.width, self.height)


class WindowActionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    action: WindowVerb
    size: Optional[Size] = None

    def to_action(self) -> Action:
        if not self.action.needs_size:
            # size only matters for setsize/move
            return SimpleAction(self.action)
        if self.size is None:
            raise SizeRequiredError(self.action.value)
        return GeometryAction(self.action, self.size.to_rectangle())


def _validate(model: type, raw: Any):
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        raise InvalidRequestError(str(exc)) from exc


def coerce_locator(raw: Any) -> Union[Locator, str]:
    """Accept a locator variant, a title string, a WindowFind or a dict."""
    if isinstance(raw, (str, *LOCATOR_TYPES)):
        return raw
    if isinstance(raw, WindowFind):
        return raw.to_locator()
    if isinstance(raw, dict):
        return _validate(WindowFind, raw).to_locator()
    if raw is None:
        raise NoLocatorFieldError()
    raise InvalidRequestError(f"Unsupported window locator: {type(raw).__name__}")


def coerce_action(raw: Any) -> Action:
    """Accept an action variant, a verb, a WindowActionRequest or a dict.

    A ``setsize``/``move`` without a rectangle is rejected here.
    """
    if isinstance(raw, WindowActionRequest):
        return raw.to_action()
    if isinstance(raw, dict):
        return _validate(WindowActionRequest, raw).to_action()
    if isinstance(raw, (str, SimpleAction, GeometryAction)):
        action = as_action(raw)
        if isinstance(action, GeometryAction) and action.size is None:
            raise SizeRequiredError(action.verb.value)
        return action
    raise InvalidRequestError(f"Unsupported window action: {type(raw).__name__}")

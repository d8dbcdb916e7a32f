"""Domain layer: pure Python, no framework dependencies."""

from nirpilot.domain.errors import (
    BlankLocatorError,
    BlankValueError,
    InvalidRequestError,
    MissingSizeError,
    NoLocatorFieldError,
    SizeRequiredError,
    UnknownActionError,
    ValidationError,
)
from nirpilot.domain.keys import Key, KeyAction, key_token
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
    SimpleAction,
    WindowVerb,
)
from nirpilot.domain.window_args import (
    assemble,
    build_action_args,
    build_locator_args,
    is_blank,
    map_match_mode,
)

__all__ = [
    "Action",
    "ActiveWindow",
    "BlankLocatorError",
    "BlankValueError",
    "ByClassName",
    "ByProcess",
    "ByTitle",
    "GeometryAction",
    "InvalidRequestError",
    "Key",
    "KeyAction",
    "Locator",
    "MatchMode",
    "MissingSizeError",
    "NoLocatorFieldError",
    "Rectangle",
    "SimpleAction",
    "SizeRequiredError",
    "UnknownActionError",
    "ValidationError",
    "WindowVerb",
    "assemble",
    "build_action_args",
    "build_locator_args",
    "is_blank",
    "key_token",
    "map_match_mode",
]

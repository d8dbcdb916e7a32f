"""Domain data models: pure Python dataclasses and enums."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from nirpilot.domain.errors import (
    InvalidRequestError,
    SizeRequiredError,
    UnknownActionError,
)


class MatchMode(str, Enum):
    """How a window title is compared."""

    EXACT = "exact"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    CONTAINS = "contains"

    @classmethod
    def parse(cls, value: Union["MatchMode", str]) -> "MatchMode":
        try:
            return cls(value)
        except ValueError:
            raise InvalidRequestError(f"{value!r} is not a title match mode") from None


class WindowVerb(str, Enum):
    """Window actions understood by ``nircmd win``."""

    CLOSE = "close"
    ACTIVATE = "activate"
    FLASH = "flash"
    MAXIMIZE = "max"
    MINIMIZE = "min"
    NORMAL = "normal"
    TOGGLE_MIN = "togglemin"
    TOGGLE_MAX = "togglemax"
    CENTER = "center"
    FOCUS = "focus"
    SET_SIZE = "setsize"
    MOVE = "move"

    @classmethod
    def parse(cls, value: Union["WindowVerb", str]) -> "WindowVerb":
        try:
            return cls(value)
        except ValueError:
            raise UnknownActionError(value) from None

    @property
    def needs_size(self) -> bool:
        return self in GEOMETRY_VERBS


GEOMETRY_VERBS = frozenset({WindowVerb.SET_SIZE, WindowVerb.MOVE})


@dataclass(frozen=True)
class Rectangle:
    """Window position and size, in pixels."""

    x: int
    y: int
    width: int
    height: int


# ── Locators ────────────────────────────────────────────────


def _check_text(value, field: str) -> None:
    # blank strings are reported later, with the field name, by the builder
    if value is not None and not isinstance(value, str):
        raise InvalidRequestError(f"{field} must be a string, not {type(value).__name__}")


@dataclass(frozen=True)
class ByTitle:
    value: str
    match: MatchMode = MatchMode.EXACT

    def __post_init__(self):
        _check_text(self.value, "value")
        object.__setattr__(self, "match", MatchMode.parse(self.match))


@dataclass(frozen=True)
class ByClassName:
    value: str

    def __post_init__(self):
        _check_text(self.value, "className")


@dataclass(frozen=True)
class ByProcess:
    value: Union[int, str]  # int = process id, str = executable name

    def __post_init__(self):
        # bool is an int subclass but never a process id
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            raise InvalidRequestError(
                f"process must be a process id or an executable name, "
                f"not {type(self.value).__name__}"
            )


@dataclass(frozen=True)
class ActiveWindow:
    """The foreground window."""


Locator = Union[ByTitle, ByClassName, ByProcess, ActiveWindow]
LOCATOR_TYPES = (ByTitle, ByClassName, ByProcess, ActiveWindow)


# ── Actions ─────────────────────────────────────────────────


@dataclass(frozen=True)
class SimpleAction:
    verb: WindowVerb

    def __post_init__(self):
        verb = WindowVerb.parse(self.verb)
        if verb.needs_size:
            raise SizeRequiredError(verb.value)
        object.__setattr__(self, "verb", verb)


@dataclass(frozen=True)
class GeometryAction:
    """``setsize`` or ``move``; ``size`` is checked when the command is assembled."""

    verb: WindowVerb
    size: Union[Rectangle, None] = None

    def __post_init__(self):
        verb = WindowVerb.parse(self.verb)
        if not verb.needs_size:
            raise UnknownActionError(verb.value, reason="does not take a size")
        object.__setattr__(self, "verb", verb)


Action = Union[SimpleAction, GeometryAction]

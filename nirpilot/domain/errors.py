"""Validation errors raised while translating a request into nircmd arguments.

Every error here is raised before a process is spawned.
"""


class ValidationError(ValueError):
    """Base class for requests that cannot be translated."""


class BlankValueError(ValidationError):
    """A required string field is empty or whitespace only."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Parameter window should be valid: {field}")


# A bare window string is the only blank value a caller can pass without a
# structured locator; both names refer to the same error kind.
BlankLocatorError = BlankValueError


class NoLocatorFieldError(ValidationError):
    """A structured locator has none of active/className/title/process set."""

    def __init__(self):
        super().__init__(
            "Parameter window should be valid: title, active, class or process"
        )


class SizeRequiredError(ValidationError):
    """A setsize/move action was given without a complete rectangle."""

    def __init__(self, verb: str = "setsize"):
        self.verb = verb
        super().__init__(
            "Parameter action.size should be valid when the action is setsize or move"
        )


MissingSizeError = SizeRequiredError


class UnknownActionError(ValidationError):
    def __init__(self, action, reason: str = "is not a window action"):
        self.action = action
        super().__init__(f"{action!r} {reason}")


class InvalidRequestError(ValidationError):
    """A loosely structured request did not match the request schema."""

"""Port interfaces (Hexagonal Architecture)."""

from nirpilot.ports.outbound import CommandRunner

__all__ = ["CommandRunner"]

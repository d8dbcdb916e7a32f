"""Outbound ports: interfaces for external system adapters."""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Runs one nircmd invocation and returns its exit code."""

    async def run(self, args: Sequence[str]) -> int: ...

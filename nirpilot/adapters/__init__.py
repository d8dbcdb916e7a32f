"""Adapters: the NirCmd process runner."""

from nirpilot.adapters.nircmd import (
    NirCmdError,
    NirCmdNotFoundError,
    NirCmdRunner,
    NirCmdTimeoutError,
    find_nircmd,
    get_runner,
    run_nircmd,
)

__all__ = [
    "NirCmdError",
    "NirCmdNotFoundError",
    "NirCmdRunner",
    "NirCmdTimeoutError",
    "find_nircmd",
    "get_runner",
    "run_nircmd",
]

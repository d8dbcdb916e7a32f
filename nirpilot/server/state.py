"""Global state for the MCP server."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from nirpilot.adapters.nircmd import NirCmdError, NirCmdRunner
from nirpilot.config import NirPilotConfig
from nirpilot.domain.errors import ValidationError
from nirpilot.ports.outbound import CommandRunner


class AppState:
    """Config and runner shared by every tool call."""

    def __init__(
        self,
        config: Optional[NirPilotConfig] = None,
        runner: Optional[CommandRunner] = None,
    ):
        self.config = config or NirPilotConfig.from_env()
        self.runner = runner or NirCmdRunner(self.config)
        logger.info("nirpilot MCP state initialized (debug={})", self.config.debug)


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState()
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the shared state; ``None`` rebuilds it from the environment on next use."""
    global _state
    _state = state


def exit_result(exit_code: int) -> dict:
    return {"success": exit_code == 0, "exit_code": exit_code}


async def run_tool(action) -> dict:
    """Await ``action()`` and turn its exit code, or a failure, into a tool result."""
    try:
        return exit_result(await action())
    except ValidationError as e:
        return {"success": False, "error": f"Invalid request: {e}"}
    except NirCmdError as e:
        logger.error("nircmd failed: {}", e)
        return {"success": False, "error": str(e)}

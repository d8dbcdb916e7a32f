"""Clipboard text."""

from typing import Optional

from nirpilot.adapters.nircmd import run_nircmd
from nirpilot.ports.outbound import CommandRunner


async def set_text(text: str, runner: Optional[CommandRunner] = None) -> int:
    return await run_nircmd(["clipboard", "set", text], runner)


async def clear(runner: Optional[CommandRunner] = None) -> int:
    return await run_nircmd(["clipboard", "clear"], runner)

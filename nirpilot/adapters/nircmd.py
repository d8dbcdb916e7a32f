"""NirCmd process runner."""

import asyncio
import contextlib
import shutil
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from nirpilot.config import NirPilotConfig

NOT_SUPPORTED_EXIT_CODE = -1
_BINARY_NAMES = ("nircmd.exe", "nircmdc.exe", "nircmd")


class NirCmdError(Exception):
    """Raised when nircmd cannot be run."""


class NirCmdNotFoundError(NirCmdError):
    pass


class NirCmdTimeoutError(NirCmdError):
    pass


def _is_windows() -> bool:
    return sys.platform == "win32"


async def _run_subprocess(cmd_args):
    """Run a subprocess command and return process/stdout/stderr."""
    proc = await asyncio.create_subprocess_exec(
        *cmd_args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await proc.communicate()
    except asyncio.CancelledError:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
        raise
    return proc, stdout, stderr


def find_nircmd(config: NirPilotConfig) -> str:
    """Locate the nircmd executable.

    Order: ``NIRCMD_PATH``, then ``PATH``, then ``<home_dir>/nircmd.exe``.
    """
    if config.nircmd_path:
        if Path(config.nircmd_path).is_file():
            return config.nircmd_path
        raise NirCmdNotFoundError(f"NIRCMD_PATH does not exist: {config.nircmd_path}")

    for name in _BINARY_NAMES:
        found = shutil.which(name)
        if found:
            return found

    if config.home_dir:
        candidate = Path(config.home_dir) / "nircmd.exe"
        if candidate.is_file():
            return str(candidate)

    raise NirCmdNotFoundError(
        "nircmd not found. Install it on PATH or set NIRCMD_PATH."
    )


class NirCmdRunner:
    """Spawns nircmd with a finished argument vector."""

    def __init__(self, config: Optional[NirPilotConfig] = None):
        self.config = config or NirPilotConfig.from_env()
        self._binary: Optional[str] = None

    @property
    def binary(self) -> str:
        if self._binary is None:
            self._binary = find_nircmd(self.config)
        return self._binary

    async def run(self, args: Sequence[str]) -> int:
        """Run nircmd and return its exit code (-1 on non-Windows hosts)."""
        if not _is_windows():
            logger.error("nircmd requires Windows; current platform is {}", sys.platform)
            return NOT_SUPPORTED_EXIT_CODE

        cmd: List[str] = [self.binary, *args]
        if self.config.debug:
            logger.debug("Running {}", cmd)

        timeout = self.config.timeout_seconds
        try:
            proc, _stdout, stderr = await asyncio.wait_for(
                _run_subprocess(cmd),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            raise NirCmdTimeoutError(
                f"Timeout ({timeout:g}s): {args[0] if args else ''}"
            ) from None

        if proc.returncode != 0 and stderr:
            logger.warning(
                "nircmd exited with {}: {}",
                proc.returncode,
                stderr.decode(errors="replace").strip(),
            )
        return proc.returncode


_default_runner: Optional[NirCmdRunner] = None


def get_runner() -> NirCmdRunner:
    """Process-wide runner built from the environment on first use."""
    global _default_runner
    if _default_runner is None:
        _default_runner = NirCmdRunner()
    return _default_runner


def reset_runner() -> None:
    global _default_runner
    _default_runner = None


async def run_nircmd(args: Sequence[str], runner=None) -> int:
    """Run ``args`` with ``runner``, or the default runner when omitted."""
    return await (runner or get_runner()).run(list(args))

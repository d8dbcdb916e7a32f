"""Configuration loaded from the environment (and an optional .env file)."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")
DEFAULT_TIMEOUT_SECONDS = 30.0


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid {}={!r}, falling back to {}", name, raw, default)
        return default
    if value <= 0:
        logger.warning("{} must be positive, falling back to {}", name, default)
        return default
    return value


def default_home_dir() -> str:
    """Where a manually installed nircmd.exe is looked up last."""
    if sys.platform == "win32":
        base = os.getenv("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
        return str(Path(base) / "nirpilot")
    return str(Path.home() / ".cache" / "nirpilot")


@dataclass
class NirPilotConfig:
    nircmd_path: str = ""
    home_dir: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "NirPilotConfig":
        """Create NirPilotConfig from environment variables."""
        debug = _env_flag("NIRPILOT_DEBUG")
        return cls(
            nircmd_path=os.getenv("NIRCMD_PATH", "").strip(),
            home_dir=os.getenv("NIRPILOT_HOME", "").strip() or default_home_dir(),
            timeout_seconds=_env_float("NIRCMD_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
            debug=debug,
            log_level=os.getenv(
                "NIRPILOT_LOG_LEVEL", "DEBUG" if debug else "INFO"
            ).strip().upper(),
        )

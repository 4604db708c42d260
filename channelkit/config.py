"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _env_page_size(name: str, default: int) -> int:
    """Read a 1-100 page size, falling back to default on garbage."""
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    if not 1 <= value <= 100:
        clamped = min(max(value, 1), 100)
        _stderr_print(f"{name}={value} out of range 1-100, clamping to {clamped}")
        return clamped
    return value


CONFIG = {
    # Deliver an explicit error instead of silently dropping voice-channel messaging calls
    "strict_capabilities": _env_flag("CHANNELKIT_STRICT_CAPABILITIES", "false"),
    # Page sizes used by the Discord owner when the caller leaves them open
    "history_limit": _env_page_size("CHANNELKIT_HISTORY_LIMIT", 50),
    "reaction_limit": _env_page_size("CHANNELKIT_REACTION_LIMIT", 100),
    "log_drops": _env_flag("CHANNELKIT_LOG_DROPS", "true"),
    "discord_token": os.getenv("DISCORD_BOT_TOKEN", ""),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class AppConfig:
    """Typed view over CONFIG."""

    strict_capabilities: bool = False
    history_limit: int = 50
    reaction_limit: int = 100
    log_drops: bool = True
    discord_token: str = ""

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            strict_capabilities=CONFIG["strict_capabilities"],
            history_limit=CONFIG["history_limit"],
            reaction_limit=CONFIG["reaction_limit"],
            log_drops=CONFIG["log_drops"],
            discord_token=CONFIG["discord_token"],
        )

"""
Centralized configuration for the beautification manager.

Configuration sources (priority order):
1. Environment variables (BEAUTIFY_*)
2. Default values

Environment variables:
- BEAUTIFY_LOG_LEVEL: Log level (default: WARNING)
- BEAUTIFY_LOG_JSON: Render log lines as JSON (default: false)
- BEAUTIFY_PROVIDER_TIMEOUT: Seconds to wait for a single provider, 0 = no limit (default: 0)
- BEAUTIFY_PROVIDERS: Comma-separated provider entry points, e.g. "pkg.mod:Provider"
"""

import os
from dataclasses import dataclass, field

__all__ = ["ALL_LANGUAGES", "BeautificationConfig", "config"]

# Registering under this id makes a provider eligible for every language
ALL_LANGUAGES = "all"


def _get_env(key: str, default: str) -> str:
    """Get environment variable with BEAUTIFY_ prefix."""
    return os.environ.get(f"BEAUTIFY_{key}", default)


def _get_env_float(key: str, default: float) -> float:
    """Get float environment variable."""
    return float(_get_env(key, str(default)))


def _get_env_bool(key: str, default: bool) -> bool:
    """Get boolean environment variable."""
    val = os.environ.get(f"BEAUTIFY_{key}")
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes", "on")


def _get_env_list(key: str) -> tuple[str, ...]:
    """Get comma-separated environment variable as a tuple."""
    val = os.environ.get(f"BEAUTIFY_{key}", "")
    return tuple(item.strip() for item in val.split(",") if item.strip())


@dataclass(frozen=True)
class BeautificationConfig:
    """Immutable beautification configuration."""

    log_level: str = _get_env("LOG_LEVEL", "WARNING")
    log_json: bool = _get_env_bool("LOG_JSON", False)

    # 0 disables the per-provider deadline
    provider_timeout: float = _get_env_float("PROVIDER_TIMEOUT", 0)

    providers: tuple[str, ...] = field(default_factory=lambda: _get_env_list("PROVIDERS"))

    @property
    def effective_provider_timeout(self) -> float | None:
        """Provider timeout in seconds, or None when providers may take forever."""
        if self.provider_timeout <= 0:
            return None
        return self.provider_timeout


# Global singleton
config = BeautificationConfig()

"""
Runtime configuration for analytics_provider
============================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.
The provider factory is the one exception: it reads ANALYTICS_PROVIDERS
(comma-separated names, default "memory") at call time so tests can switch
backends without reloading modules.

Logging provider
----------------
- ANALYTICS_LOG_LEVEL   : level name used for each tracked call (default "INFO")
- ANALYTICS_LOGGER_NAME : logger the provider writes to (default "analytics_provider.events")
"""

import logging
import os


def _get_level(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


class _Settings:
    # -------- Logging provider --------
    LOG_LEVEL: int = _get_level("ANALYTICS_LOG_LEVEL", logging.INFO)
    LOGGER_NAME: str = os.getenv("ANALYTICS_LOGGER_NAME", "analytics_provider.events")


settings = _Settings()

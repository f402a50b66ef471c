"""
Provider factory – build analytics providers from config (lazy env version)
==========================================================================

This module centralizes selection of analytics providers so the app factory
can stay ignorant of which destinations are wired in.

Behavior
--------
- Reads ANALYTICS_PROVIDERS **at call time** to avoid stale values in tests.
- Preserves the configured order; that order becomes the dispatch order.
- Unknown names fail fast with ValueError instead of being skipped silently.

Environment variables
---------------------
- ANALYTICS_PROVIDERS: comma-separated names, e.g. "memory,logging" (default "memory")

LLM Prompt
----------
You are adding a vendor provider. Register its name in `_PROVIDERS`, keep the
default safe ("memory"), and import heavy vendor SDKs inside the builder only.
"""

import logging
import os
from typing import Callable, Dict, List, Optional, Sequence

from ..analytics.base import BaseAnalyticsProvider
from .logging_provider import LoggingProvider
from .memory import InMemoryProvider

__all__ = ["get_provider", "get_providers"]

logger = logging.getLogger(__name__)

_PROVIDERS: Dict[str, Callable[..., BaseAnalyticsProvider]] = {
    "memory": InMemoryProvider,
    "logging": LoggingProvider,
}


def _configured_names() -> List[str]:
    raw = os.getenv("ANALYTICS_PROVIDERS", "memory")
    return [name.strip().lower() for name in raw.split(",") if name.strip()]


def get_provider(name: Optional[str] = None, **kwargs) -> BaseAnalyticsProvider:
    """
    Return one analytics provider by name.

    Parameters
    ----------
    name : str, optional
        "memory" or "logging". If omitted, the first entry of ANALYTICS_PROVIDERS.
    kwargs : dict
        Extra args passed to the provider constructor (e.g. logger_name="..." for logging).

    Raises
    ------
    ValueError
        If the name is unknown or nothing is configured.
    """
    if name is None:
        names = _configured_names()
        if not names:
            raise ValueError("No analytics provider configured (env ANALYTICS_PROVIDERS)")
        name = names[0]

    key = name.strip().lower()
    builder = _PROVIDERS.get(key)
    if builder is None:
        raise ValueError(f"Unknown analytics provider: {name!r}")

    logger.info("Selected analytics provider: %r", key)
    return builder(**kwargs)


def get_providers(names: Optional[Sequence[str]] = None) -> List[BaseAnalyticsProvider]:
    """
    Return providers for every configured name, in order.

    An empty ANALYTICS_PROVIDERS (or an empty `names`) yields an empty list,
    which gives a dispatcher that accepts calls and does nothing.
    """
    selected = _configured_names() if names is None else list(names)
    return [get_provider(name) for name in selected]

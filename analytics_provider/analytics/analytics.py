"""
Analytics dispatcher for analytics_provider.

Responsibilities:
    - Keep an ordered registry of analytics providers
    - Forward every view, event, purchase and user property to each provider
    - Keep one misbehaving provider from starving the others

Design notes:
    - Registration only appends. Order of registration is the order of dispatch,
      and registering the same provider twice means it receives every call twice.
    - Dispatch is synchronous and runs on the caller's thread over a snapshot of the
      registry taken when the call starts.
    - No locking: use one dispatcher from one execution context (e.g. one event loop
      or one request worker). Guard it externally if you need to share it. The HTTP
      app (main.py) only dispatches from `async def` routes, i.e. on its event loop.
    - Providers own their failures. If one raises anyway, the error is logged here
      and the fan-out continues; nothing is re-raised to the caller.

LLM Prompt Example:
    "Explain how a broadcast dispatcher can forward analytics calls to several vendor
    SDKs in order, while isolating each vendor's exceptions from the others."
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from .base import BaseAnalyticsProvider
from .descriptors import EventType, PurchaseType, ViewType

__all__ = ["Analytics"]

logger = logging.getLogger(__name__)


class Analytics:
    def __init__(self, providers: Optional[Iterable[BaseAnalyticsProvider]] = None):
        """
        Create a dispatcher, optionally registering an initial set of providers.

        Args:
            providers (Iterable[BaseAnalyticsProvider], optional): Providers to register
                in the given order.
        """
        self._providers: List[BaseAnalyticsProvider] = []
        if providers is not None:
            self.register(providers)

    @property
    def providers(self) -> Tuple[BaseAnalyticsProvider, ...]:
        """Snapshot of registered providers in dispatch order."""
        return tuple(self._providers)

    def register(self, providers: Iterable[BaseAnalyticsProvider]) -> None:
        """
        Append providers to the end of the registry.

        Args:
            providers (Iterable[BaseAnalyticsProvider]): Providers in the order they
                should receive calls. An empty iterable is a no-op.

        Notes:
            - No deduplication: a provider registered twice is called twice.
            - The dispatcher keeps a strong reference for its whole lifetime.
        """
        added = list(providers)
        self._providers.extend(added)
        logger.debug(
            "Registered %d analytics provider(s): %s (total=%d)",
            len(added),
            ", ".join(type(p).__name__ for p in added),
            len(self._providers),
        )

    def log_view(self, view: ViewType) -> None:
        """Forward a screen view to every provider."""
        self._fan_out("log_view", view)

    def log_event(self, event: EventType) -> None:
        """Forward a user action to every provider."""
        self._fan_out("log_event", event)

    def log_purchase(self, purchase: PurchaseType) -> None:
        """Forward a purchase to every provider."""
        self._fan_out("log_purchase", purchase)

    def set_user_property(self, value: Optional[str], key: str) -> None:
        """
        Forward a user property to every provider.

        Args:
            value (Optional[str]): New value, or None to clear the property. Passed
                through verbatim; what "cleared" means is up to each provider.
            key (str): Property name.
        """
        self._fan_out("set_user_property", value, key)

    def _fan_out(self, method: str, *args: Any) -> None:
        for provider in tuple(self._providers):
            try:
                getattr(provider, method)(*args)
            except Exception:
                logger.exception(
                    "Analytics provider %s failed in %s; continuing with remaining providers",
                    type(provider).__name__,
                    method,
                )

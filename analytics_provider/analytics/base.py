"""
Abstract Base Class for analytics providers.

Responsibilities:
    - Define the four operations every analytics backend must support
    - Support easy substitution (in-memory, logging, external vendors)

Contract:
    - Every method returns None.
    - A provider handles its own failures (log, swallow, retry). There is no error
      channel back through the dispatcher; an exception that does escape is logged
      by the dispatcher and the remaining providers still run.

Testing & Coverage:
    The abstract bodies are annotated with `# pragma: no cover`; a pass-through subclass
    in tests/unit/test_analytics_base.py executes them through super().

LLM Prompt Example:
    "Create an abstract base class for analytics vendors with log_view, log_event,
    log_purchase and set_user_property, and explain why none of them return a value."
"""

from abc import ABC, abstractmethod
from typing import Optional

from .descriptors import EventType, PurchaseType, ViewType

__all__ = ["BaseAnalyticsProvider"]


class BaseAnalyticsProvider(ABC):
    """Abstract base for pluggable analytics providers."""

    @abstractmethod
    def log_view(self, view: ViewType) -> None:  # pragma: no cover
        """
        Record that a screen/page was shown.

        Args:
            view (ViewType): Name and optional parameters of the view.
        """
        raise NotImplementedError

    @abstractmethod
    def log_event(self, event: EventType) -> None:  # pragma: no cover
        """
        Record a user action.

        Args:
            event (EventType): Name and optional parameters of the event.
        """
        raise NotImplementedError

    @abstractmethod
    def log_purchase(self, purchase: PurchaseType) -> None:  # pragma: no cover
        """
        Record a purchase.

        Args:
            purchase (PurchaseType): Commerce fields of the transaction.
        """
        raise NotImplementedError

    @abstractmethod
    def set_user_property(self, value: Optional[str], key: str) -> None:  # pragma: no cover
        """
        Set or clear a user property.

        Args:
            value (Optional[str]): New value; None asks the provider to clear it.
            key (str): Property name.
        """
        raise NotImplementedError

"""
In-memory analytics provider.

Responsibilities:
    - Record every view, event, purchase and user property it receives
    - Provide lookups by name and summary statistics

Design:
    - Reference implementation of BaseAnalyticsProvider, kept simple so tests and
      local development are fast and deterministic.
    - Descriptors are stored as received (no copying), so a test can assert that a
      provider saw the exact object that was dispatched.
    - `set_user_property(None, key)` stores an explicit None entry: "cleared" is
      distinguishable from "never set" (`key in provider.user_properties`).

LLM Prompt Example:
    "Explain how an in-memory recording provider can replace a real analytics vendor
    in tests without changing the dispatcher or the calling code."
"""

from typing import Dict, List, Optional

from ..analytics.base import BaseAnalyticsProvider
from ..analytics.descriptors import EventType, PurchaseType, ViewType

__all__ = ["InMemoryProvider"]


class InMemoryProvider(BaseAnalyticsProvider):
    def __init__(self):
        """
        Initialize empty recording buffers.

        Internal state:
            views:           [ViewType, ...] in arrival order
            events:          [EventType, ...] in arrival order
            purchases:       [PurchaseType, ...] in arrival order
            user_properties: { key: Optional[str] }
        """
        self.views: List[ViewType] = []
        self.events: List[EventType] = []
        self.purchases: List[PurchaseType] = []
        self.user_properties: Dict[str, Optional[str]] = {}

    def log_view(self, view: ViewType) -> None:
        self.views.append(view)

    def log_event(self, event: EventType) -> None:
        self.events.append(event)

    def log_purchase(self, purchase: PurchaseType) -> None:
        self.purchases.append(purchase)

    def set_user_property(self, value: Optional[str], key: str) -> None:
        self.user_properties[key] = value

    def get_views(self, name: Optional[str] = None) -> List[ViewType]:
        """
        Get recorded views, optionally filtered by name.

        Returns:
            List[ViewType]: Matching views in arrival order, empty if none.
        """
        if name is None:
            return list(self.views)
        return [view for view in self.views if view.name == name]

    def get_events(self, name: Optional[str] = None) -> List[EventType]:
        """
        Get recorded events, optionally filtered by name.

        Returns:
            List[EventType]: Matching events in arrival order, empty if none.
        """
        if name is None:
            return list(self.events)
        return [event for event in self.events if event.name == name]

    def summary(self) -> Dict[str, Dict]:
        """
        Summarize everything recorded so far.

        Returns:
            Dict[str, Dict]: Dictionary with:
                - views: dict name -> count
                - events: dict name -> count
                - purchases: dict with total, successful, revenue (currency -> sum
                  of prices of successful purchases)
                - user_properties: copy of the current properties

        Example:
            {
                "views": {"home": 2},
                "events": {"signup": 1},
                "purchases": {"total": 2, "successful": 1, "revenue": {"USD": 9.99}},
                "user_properties": {"tier": "premium", "temp_flag": None}
            }

        LLM Prompt Example:
            "Suggest ways to extend this summary with per-day funnels."
        """
        view_counts: Dict[str, int] = {}
        for view in self.views:
            view_counts[view.name] = view_counts.get(view.name, 0) + 1

        event_counts: Dict[str, int] = {}
        for event in self.events:
            event_counts[event.name] = event_counts.get(event.name, 0) + 1

        revenue: Dict[str, float] = {}
        successful = 0
        for purchase in self.purchases:
            if not purchase.success:
                continue
            successful += 1
            revenue[purchase.currency] = revenue.get(purchase.currency, 0.0) + purchase.price

        return {
            "views": view_counts,
            "events": event_counts,
            "purchases": {
                "total": len(self.purchases),
                "successful": successful,
                "revenue": revenue,
            },
            "user_properties": dict(self.user_properties),
        }

    def reset(self) -> None:
        """Drop everything recorded so far."""
        self.views.clear()
        self.events.clear()
        self.purchases.clear()
        self.user_properties.clear()

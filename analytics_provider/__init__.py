"""
analytics_provider package initializer.
"""

from . import analytics
from . import providers
from .analytics.analytics import Analytics
from .analytics.base import BaseAnalyticsProvider
from .analytics.descriptors import Event, Purchase, View

__all__ = [
    "analytics",
    "providers",
    "Analytics",
    "BaseAnalyticsProvider",
    "Event",
    "Purchase",
    "View",
]

"""
Logging analytics provider.

Writes one log record per tracked call through the standard `logging` module.
Useful as a development sink, or as an audit trail next to a real vendor.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ..analytics.base import BaseAnalyticsProvider
from ..analytics.descriptors import EventType, PurchaseType, ViewType
from ..config import settings

__all__ = ["LoggingProvider"]


def _plain(parameters: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    return None if parameters is None else dict(parameters)


class LoggingProvider(BaseAnalyticsProvider):
    """Provider that logs every call instead of sending it anywhere."""

    def __init__(self, logger_name: Optional[str] = None, level: Optional[int] = None):
        self.logger = logging.getLogger(logger_name or settings.LOGGER_NAME)
        self.level = settings.LOG_LEVEL if level is None else level

    def log_view(self, view: ViewType) -> None:
        self.logger.log(self.level, "view name=%s parameters=%s", view.name, _plain(view.parameters))

    def log_event(self, event: EventType) -> None:
        self.logger.log(self.level, "event name=%s parameters=%s", event.name, _plain(event.parameters))

    def log_purchase(self, purchase: PurchaseType) -> None:
        self.logger.log(
            self.level,
            "purchase transaction_id=%s name=%s price=%s currency=%s category=%s sku=%s "
            "success=%s coupon=%s",
            purchase.transaction_id,
            purchase.name,
            purchase.price,
            purchase.currency,
            purchase.category,
            purchase.sku,
            purchase.success,
            purchase.coupon,
        )

    def set_user_property(self, value: Optional[str], key: str) -> None:
        if value is None:
            self.logger.log(self.level, "user_property key=%s cleared", key)
        else:
            self.logger.log(self.level, "user_property key=%s value=%s", key, value)

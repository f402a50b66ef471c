"""
Main API module for analytics_provider.

Responsibilities:
    - Expose REST endpoints that feed views, events, purchases and user properties
      into one Analytics dispatcher
    - Fan every call out to the configured providers (memory, logging, ...)
    - Provide a summary of what the in-memory provider recorded

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The dispatcher is installed on app.state and reached through FastAPI
      dependencies (analytics_provider.bindings), never through a global.
    - Every route that touches the dispatcher is `async def`, so all dispatch runs on
      the event loop. FastAPI would run sync routes on its threadpool, and the
      dispatcher and in-memory provider are not thread-safe.
    - Providers come from the provider factory (ANALYTICS_PROVIDERS) unless a
      ready-made dispatcher is injected.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory,
    an injected analytics dispatcher, and declarative route tracking."
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from analytics_provider.analytics.analytics import Analytics
from analytics_provider.analytics.descriptors import Event, Purchase, View
from analytics_provider.bindings import get_analytics, install_analytics, track_view
from analytics_provider.providers.memory import InMemoryProvider
from analytics_provider.providers.provider_factory import get_providers

HOME_VIEW = View(name="home")


class UserPropertyRequest(BaseModel):
    """Request payload for setting (or clearing, with null) a user property."""
    value: Optional[str] = None


def create_app(analytics: Optional[Analytics] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        analytics (Analytics, optional): Dispatcher to use. When omitted, a new one
            is built from the providers named in ANALYTICS_PROVIDERS.

    Returns:
        FastAPI: A configured application with its own dispatcher.

    Why an app factory?
        - Enables per-test isolation in pytest.
        - Lets tests inject a dispatcher wired to recording providers.
    """
    app = FastAPI(
        title="Analytics Provider",
        description="Fan-out analytics ingest: one call site, many providers",
        docs_url="/docs",
    )
    log = logging.getLogger("analytics_provider")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)

    if analytics is None:
        analytics = Analytics(get_providers())
    install_analytics(app, analytics)

    log.info(
        "Analytics providers: %s",
        ", ".join(type(p).__name__ for p in analytics.providers) or "none",
    )

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/", dependencies=[Depends(track_view(HOME_VIEW))])
    async def home() -> Dict[str, Any]:
        return {"message": "Analytics Provider", "docs": "/docs"}

    @app.post("/views")
    async def log_view(view: View, dispatcher: Analytics = Depends(get_analytics)) -> Dict[str, Any]:
        """
        Fan a screen view out to every provider.

        Returns:
            dict: Confirmation with the view name.
        """
        dispatcher.log_view(view)
        return {"message": "View logged", "name": view.name}

    @app.post("/events")
    async def log_event(event: Event, dispatcher: Analytics = Depends(get_analytics)) -> Dict[str, Any]:
        """Fan a user action out to every provider."""
        dispatcher.log_event(event)
        return {"message": "Event logged", "name": event.name}

    @app.post("/purchases")
    async def log_purchase(
        purchase: Purchase, dispatcher: Analytics = Depends(get_analytics)
    ) -> Dict[str, Any]:
        """
        Fan a purchase out to every provider.

        Returns:
            dict: Confirmation with the effective transaction_id (generated when the
                  payload omits it).
        """
        dispatcher.log_purchase(purchase)
        return {"message": "Purchase logged", "transaction_id": purchase.transaction_id}

    @app.put("/user-properties/{key}")
    async def set_user_property(
        key: str,
        req: UserPropertyRequest,
        dispatcher: Analytics = Depends(get_analytics),
    ) -> Dict[str, Any]:
        """Set or clear a user property on every provider."""
        dispatcher.set_user_property(req.value, key)
        return {"message": "User property set", "key": key, "value": req.value}

    @app.get("/analytics/summary")
    async def analytics_summary(dispatcher: Analytics = Depends(get_analytics)) -> Dict[str, Any]:
        """
        Summary of the first registered in-memory provider.

        Raises:
            HTTPException: 404 if no InMemoryProvider is registered.
        """
        for provider in dispatcher.providers:
            if isinstance(provider, InMemoryProvider):
                return provider.summary()
        raise HTTPException(status_code=404, detail="No in-memory provider registered")

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()

"""
FastAPI bindings for analytics_provider.

Responsibilities:
    - Make one Analytics dispatcher reachable from any route of an app
    - Log a fixed view whenever a route is served
    - Log a fixed set of events whenever an action route is invoked

Design:
    - The dispatcher lives on `app.state`, set explicitly via `install_analytics`.
      No module-level instance: two apps in one process never share analytics.
    - Both trackers are FastAPI dependencies, so they compose with `Depends(...)`
      and `dependencies=[...]` like any other route dependency.
    - With no dispatcher installed, trackers do nothing.
    - Trackers are `async def`, so FastAPI runs them on the event loop rather than
      its threadpool: every dispatch for an app happens on one thread.

Usage:
    app = FastAPI()
    install_analytics(app, analytics)

    @app.get("/", dependencies=[Depends(track_view(View(name="home")))])
    def home(): ...

    @app.post("/signup", dependencies=[Depends(track_on_call(Event(name="signup")))])
    def signup(): ...

LLM Prompt Example:
    "Show how to expose a per-app service through FastAPI dependencies instead of a
    global, and how to attach tracking to routes declaratively."
"""

from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request

from .analytics.analytics import Analytics
from .analytics.descriptors import EventType, ViewType

__all__ = ["install_analytics", "get_analytics", "track_view", "track_on_call"]


def install_analytics(app: FastAPI, analytics: Analytics) -> None:
    """Attach `analytics` to `app` so routes can reach it via `get_analytics`."""
    app.state.analytics = analytics


def get_analytics(request: Request) -> Optional[Analytics]:
    """
    FastAPI dependency returning the app's dispatcher.

    Returns:
        Optional[Analytics]: The installed dispatcher, or None if none was installed.
    """
    return getattr(request.app.state, "analytics", None)


def track_view(view: ViewType) -> Callable[[Request], Awaitable[None]]:
    """
    Build a dependency that logs `view` every time the guarded route is served.

    Args:
        view (ViewType): The view to log.
    """

    async def _track(request: Request) -> None:
        analytics = get_analytics(request)
        if analytics is not None:
            analytics.log_view(view)

    return _track


def track_on_call(*events: EventType) -> Callable[[Request], Awaitable[None]]:
    """
    Build a dependency that logs `events`, in order, every time the guarded route runs.

    Args:
        *events (EventType): One or more events to log per invocation.
    """

    async def _track(request: Request) -> None:
        analytics = get_analytics(request)
        if analytics is None:
            return
        for event in events:
            analytics.log_event(event)

    return _track

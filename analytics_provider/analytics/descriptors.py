"""
Trackable descriptors for analytics_provider.

Responsibilities:
    - Describe one trackable occurrence (screen view, user action, purchase)
    - Define the structural contracts backends rely on (ViewType, EventType, PurchaseType)
    - Provide immutable, ready-to-use value types (View, Event, Purchase)

Design:
    - Contracts are `typing.Protocol`s: any object exposing the attributes is accepted,
      no inheritance required. Apps can keep their own catalog classes.
    - The concrete types are frozen pydantic models so they double as request bodies
      in the HTTP layer. `parameters` is stored as a read-only mapping, so the object
      every provider receives is the object the caller built.
    - Defaults (absent parameters, absent coupon, fresh transaction id) are produced
      explicitly at construction time.

LLM Prompt Example:
    "Show how to model analytics events as structural Protocols plus frozen pydantic
    models so that both ad-hoc values and fixed catalogs can be tracked."
"""

import uuid
from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

__all__ = [
    "Scalar",
    "Parameters",
    "ViewType",
    "EventType",
    "PurchaseType",
    "View",
    "Event",
    "Purchase",
    "new_transaction_id",
]

Scalar = Union[str, int, float, bool]
Parameters = Mapping[str, Optional[Scalar]]


def new_transaction_id() -> str:
    """Return a fresh, non-empty transaction identifier (uuid4)."""
    return str(uuid.uuid4())


def _freeze(value: Mapping[str, Any]) -> Mapping[str, Any]:
    # Private copy, read-only view: neither the caller nor a provider can change it.
    return MappingProxyType(dict(value))


def _thaw(value: Mapping[str, Any]) -> Dict[str, Any]:
    return dict(value)


FrozenParameters = Annotated[
    Parameters,
    AfterValidator(_freeze),
    PlainSerializer(_thaw, return_type=Dict[str, Any]),
]


@runtime_checkable
class ViewType(Protocol):
    """A screen/page shown to the user."""

    name: str
    parameters: Optional[Parameters]


@runtime_checkable
class EventType(Protocol):
    """A discrete user action."""

    name: str
    parameters: Optional[Parameters]


@runtime_checkable
class PurchaseType(Protocol):
    """A commerce transaction."""

    transaction_id: str
    price: float
    name: str
    currency: str
    category: str
    sku: str
    success: bool
    coupon: Optional[str]


class View(BaseModel):
    """
    Immutable screen view.

    Example:
        View(name="checkout", parameters={"step": 2})
    """

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: Optional[FrozenParameters] = None


class Event(BaseModel):
    """Immutable user action."""

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: Optional[FrozenParameters] = None


class Purchase(BaseModel):
    """
    Immutable purchase.

    Notes:
        - `transaction_id` is generated once per instance when not supplied,
          so two default purchases never share an id.
        - `coupon` defaults to None (no coupon applied).
    """

    model_config = ConfigDict(frozen=True)

    price: float
    name: str
    currency: str
    category: str
    sku: str
    success: bool
    transaction_id: str = Field(default_factory=new_transaction_id)
    coupon: Optional[str] = None

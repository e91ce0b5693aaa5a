# app/events.py
from dataclasses import dataclass
from typing import Literal

from campus_nav.domain.entities.geography import Point
from campus_nav.sim.event import BaseEvent

NoRouteReason = Literal["unreachable", "node_not_found"]
RejectReason = Literal["unknown_node", "not_selectable"]


# Inputs
@dataclass(order=True)
class GpsFix(BaseEvent):
    lat: float
    lng: float
    accuracy_m: float | None = None


@dataclass(order=True)
class DestinationSelected(BaseEvent):
    node_id: str


@dataclass(order=True)
class NavigationReset(BaseEvent):
    pass


# Outcomes (consumed by rendering collaborators)
@dataclass(order=True)
class LocationResolved(BaseEvent):
    node_id: str
    distance_m: float
    previous_id: str | None = None
    accuracy_m: float | None = None  # as reported by the fix


@dataclass(order=True)
class AwaitingLocation(BaseEvent):
    destination_id: str


@dataclass(order=True)
class AlreadyAtDestination(BaseEvent):
    node_id: str


@dataclass(order=True)
class SameBuilding(BaseEvent):
    start_id: str
    destination_id: str
    floor: str | None = None


@dataclass(order=True)
class RouteFound(BaseEvent):
    start_id: str
    destination_id: str
    nodes: tuple[str, ...]
    segments: tuple[str, ...]
    coordinates: tuple[Point, ...]
    cost: float
    length_m: float
    eta_s: float


@dataclass(order=True)
class NoRoute(BaseEvent):
    start_id: str
    destination_id: str
    reason: NoRouteReason = "unreachable"


@dataclass(order=True)
class SelectionRejected(BaseEvent):
    node_id: str
    reason: RejectReason


@dataclass(order=True)
class RouteCleared(BaseEvent):
    location_id: str | None = None


OUTCOMES = (
    LocationResolved,
    AwaitingLocation,
    AlreadyAtDestination,
    SameBuilding,
    RouteFound,
    NoRoute,
    SelectionRejected,
    RouteCleared,
)

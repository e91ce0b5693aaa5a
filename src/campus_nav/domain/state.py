# campus_nav/domain/state.py
from dataclasses import dataclass
from enum import Enum

from campus_nav.domain.entities.geography import Route


class NavState(Enum):
    IDLE = "idle"  # no location (a destination may be waiting)
    LOCATION_KNOWN = "location_known"
    ROUTED = "routed"


@dataclass
class RouteSession:
    """Per-session navigation record, owned by the controller that builds it."""

    current_location: str | None = None
    selected_destination: str | None = None
    active_route: Route | None = None
    last_fix_distance_m: float | None = None

    @property
    def state(self) -> NavState:
        if self.current_location is None:
            return NavState.IDLE
        if self.active_route is None:
            return NavState.LOCATION_KNOWN
        return NavState.ROUTED

    @property
    def has_endpoints(self) -> bool:
        return (
            self.current_location is not None
            and self.selected_destination is not None
            and self.current_location != self.selected_destination
        )

    def clear_route(self) -> None:
        self.active_route = None

    def reset(self) -> None:
        self.selected_destination = None
        self.active_route = None

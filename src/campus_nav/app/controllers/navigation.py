# campus_nav/app/controllers/navigation.py
from campus_nav.app.events import (
    AlreadyAtDestination,
    AwaitingLocation,
    DestinationSelected,
    GpsFix,
    LocationResolved,
    NavigationReset,
    NoRoute,
    RouteCleared,
    RouteFound,
    SameBuilding,
    SelectionRejected,
)
from campus_nav.domain.entities.geography import Node
from campus_nav.domain.errors import NodeNotFoundError
from campus_nav.domain.mechanics.mechanics_core import Mechanics
from campus_nav.domain.state import RouteSession
from campus_nav.sim.event import BaseEvent


def same_building(a: Node, b: Node) -> bool:
    """b inside a, a inside b, or both inside the same parent."""
    if b.parent == a.id or a.parent == b.id:
        return True
    return a.parent is not None and a.parent == b.parent


class NavigationHandler:
    """
    Navigation state machine for one session.

    Reacts to GPS fixes, destination selections and resets; every reaction returns
    outcome events for the rendering side. Unknown ids and missing routes come back
    as outcomes, never as exceptions.
    """

    def __init__(
        self,
        session: RouteSession,
        mechanics: Mechanics,
        walking_speed_mps: float = 1.4,
    ):
        self.session = session
        self.mechanics = mechanics
        self.graph = mechanics.graph
        self.walking_speed_mps = walking_speed_mps

    def on_gps_fix(self, ev: GpsFix) -> list[BaseEvent]:
        s = self.session
        near = self.mechanics.find_nearest(ev.lat, ev.lng)
        s.last_fix_distance_m = near.distance_m
        if near.node_id == s.current_location:
            return []

        prev, s.current_location = s.current_location, near.node_id
        out: list[BaseEvent] = [
            LocationResolved(
                t=ev.t,
                node_id=near.node_id,
                distance_m=near.distance_m,
                previous_id=prev,
                accuracy_m=ev.accuracy_m,
            )
        ]
        if s.selected_destination == near.node_id:
            s.clear_route()
            out.append(AlreadyAtDestination(t=ev.t, node_id=near.node_id))
            return out
        if not s.has_endpoints:
            return out
        out.append(self._compute(ev.t))
        return out

    def on_destination_selected(self, ev: DestinationSelected) -> list[BaseEvent]:
        s = self.session
        node = self.graph.get(ev.node_id)
        if node is None:
            return [SelectionRejected(t=ev.t, node_id=ev.node_id, reason="unknown_node")]
        if not node.selectable:
            return [SelectionRejected(t=ev.t, node_id=ev.node_id, reason="not_selectable")]

        if s.current_location is None:
            s.selected_destination = ev.node_id
            s.clear_route()
            return [AwaitingLocation(t=ev.t, destination_id=ev.node_id)]
        # selecting where we stand leaves the previous selection untouched
        if ev.node_id == s.current_location:
            return [AlreadyAtDestination(t=ev.t, node_id=ev.node_id)]

        s.selected_destination = ev.node_id
        return [self._compute(ev.t)]

    def on_reset(self, ev: NavigationReset) -> list[BaseEvent]:
        self.session.reset()
        return [RouteCleared(t=ev.t, location_id=self.session.current_location)]

    def _compute(self, t: float) -> BaseEvent:
        s = self.session
        start_id, dest_id = s.current_location, s.selected_destination
        start, dest = self.graph.get(start_id), self.graph.get(dest_id)

        if start is not None and dest is not None and same_building(start, dest):
            s.clear_route()
            return SameBuilding(t=t, start_id=start_id, destination_id=dest_id, floor=dest.floor)

        try:
            route = self.mechanics.route(start_id, dest_id)
        except NodeNotFoundError:
            s.clear_route()
            return NoRoute(t=t, start_id=start_id, destination_id=dest_id, reason="node_not_found")
        if route is None:
            s.clear_route()
            return NoRoute(t=t, start_id=start_id, destination_id=dest_id, reason="unreachable")

        s.active_route = route
        return RouteFound(
            t=t,
            start_id=start_id,
            destination_id=dest_id,
            nodes=route.nodes,
            segments=route.segments,
            coordinates=route.coordinates,
            cost=route.cost,
            length_m=route.length_m,
            eta_s=self.mechanics.eta_s(route, self.walking_speed_mps),
        )

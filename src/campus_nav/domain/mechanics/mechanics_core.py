# campus_nav/domain/mechanics/mechanics_core.py
from dataclasses import dataclass

from campus_nav.app.protocols import DistanceMetric, Mechanics, NodeLocator, PathSolver
from campus_nav.domain.entities.geography import Nearest, Point, Route
from campus_nav.domain.entities.graph import CampusGraph


@dataclass
class Mechanics(Mechanics):
    graph: CampusGraph
    metric: DistanceMetric
    locator: NodeLocator
    solver: PathSolver

    def nearest(self, p: Point) -> Nearest:
        return self.locator.nearest(p)

    def find_nearest(self, lat: float, lng: float) -> Nearest:
        return self.locator.nearest(Point(lng, lat))

    def route(self, start_id: str, end_id: str) -> Route | None:
        return self.solver.solve(start_id, end_id)

    def eta_s(self, route: Route, speed_mps: float) -> float:
        return route.length_m / max(speed_mps, 0.1)

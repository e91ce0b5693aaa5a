from typing import Protocol, runtime_checkable

import numpy as np

from campus_nav.domain.entities.geography import Nearest, Point, Route


# ------------- Mechanics --------------------
@runtime_checkable
class DistanceMetric(Protocol):
    """
    Responsibilities:
      • Measure the distance in meters between two points of one coordinate system.
      • Measure one point against many (vectorized) for nearest-node scans.
    """

    def distance(self, a: Point, b: Point) -> float: ...
    def many(self, p: Point, xs: np.ndarray, ys: np.ndarray) -> np.ndarray: ...


@runtime_checkable
class NodeLocator(Protocol):
    """
    Responsibilities:
      • Anchor a raw position (GPS fix) onto the closest graph node.
    Ties go to the first node in graph order; an empty graph is a data error.
    """

    def nearest(self, p: Point) -> Nearest: ...


@runtime_checkable
class PathSolver(Protocol):
    """
    Responsibilities:
      • Compute the lowest-cost route between two node ids of one graph.
    Returns None when the endpoints are not connected.
    Raises NodeNotFoundError when an endpoint is not in the graph.
    """

    def solve(self, start_id: str, end_id: str) -> Route | None: ...


@runtime_checkable
class Mechanics(Protocol):
    """
    Convenience façade bundling locator, solver and metric for the controllers.
    """

    metric: DistanceMetric
    locator: NodeLocator
    solver: PathSolver

    def nearest(self, p: Point) -> Nearest:
        return self.locator.nearest(p)

    def route(self, start_id: str, end_id: str) -> Route | None:
        return self.solver.solve(start_id, end_id)

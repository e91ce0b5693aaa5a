import numpy as np

from campus_nav.app.protocols import DistanceMetric, NodeLocator
from campus_nav.domain.entities.geography import Nearest, Point
from campus_nav.domain.entities.graph import CampusGraph
from campus_nav.domain.errors import EmptyGraphError


class NearestNodeLocator(NodeLocator):
    """
    Linear scan over every candidate node, vectorized into one numpy pass.
    argmin returns the first minimum, so ties resolve to graph declaration order.
    """

    def __init__(
        self, *, graph: CampusGraph, metric: DistanceMetric, include_junctions: bool = True
    ):
        self.G, self.metric = graph, metric
        self._candidates = [n for n in graph.nodes if include_junctions or n.selectable]
        if not self._candidates:
            raise EmptyGraphError("cannot locate a position on a graph with no candidate nodes")
        self._xs = np.array([n.point.x for n in self._candidates], dtype=float)
        self._ys = np.array([n.point.y for n in self._candidates], dtype=float)

    def nearest(self, p: Point) -> Nearest:
        d = self.metric.many(p, self._xs, self._ys)
        i = int(np.argmin(d))
        n = self._candidates[i]
        return Nearest(node_id=n.id, node=n, distance_m=float(d[i]))

    def find_nearest(self, lat: float, lng: float) -> Nearest:
        return self.nearest(Point(lng, lat))

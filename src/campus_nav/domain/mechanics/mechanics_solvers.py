import heapq
import math
from collections import deque

from campus_nav.app.protocols import DistanceMetric, PathSolver
from campus_nav.domain.entities.geography import Route
from campus_nav.domain.entities.graph import CampusGraph
from campus_nav.domain.errors import NodeNotFoundError


def _assemble(
    G: CampusGraph, metric: DistanceMetric, nodes: list[str], segments: list[str], cost: float
) -> Route:
    coords = tuple(G.point(n) for n in nodes)
    length = sum(metric.distance(a, b) for a, b in zip(coords, coords[1:]))
    return Route(
        nodes=tuple(nodes),
        segments=tuple(segments),
        coordinates=coords,
        cost=cost,
        length_m=length,
    )


class BfsSolver(PathSolver):
    """
    Fewest-hops route. FIFO frontier, neighbours expanded in declaration order,
    so among equal-hop routes the one through the earlier-declared neighbour wins.
    Segments are concatenated in walk order and never deduplicated.
    """

    def __init__(self, graph: CampusGraph, metric: DistanceMetric):
        self.G, self.metric = graph, metric

    def solve(self, start_id: str, end_id: str) -> Route | None:
        if start_id not in self.G:
            raise NodeNotFoundError(start_id, role="start")
        if start_id == end_id:
            return _assemble(self.G, self.metric, [start_id], [], 0)
        if end_id not in self.G:
            # NavigationHandler turns this into NoRoute(reason="node_not_found")
            raise NodeNotFoundError(end_id, role="end")

        queue = deque([(start_id, [], [start_id])])
        visited = {start_id}
        while queue:
            u, segs, walked = queue.popleft()
            if u == end_id:
                return _assemble(self.G, self.metric, walked, segs, len(walked) - 1)
            for v, edge in self.G.neighbors(u).items():
                if v in visited:
                    continue
                visited.add(v)
                queue.append((v, segs + list(edge.segments), walked + [v]))
        return None


class DijkstraSolver(PathSolver):
    """
    Weighted shortest route. Edges without a weight cost their geometric length.
    Stops as soon as the destination is popped from the frontier.
    """

    def __init__(self, graph: CampusGraph, metric: DistanceMetric):
        self.G, self.metric = graph, metric

    def solve(self, start_id: str, end_id: str) -> Route | None:
        for role, node_id in (("start", start_id), ("end", end_id)):
            if node_id not in self.G:
                raise NodeNotFoundError(node_id, role=role)

        dist = {n: math.inf for n in self.G}
        prev: dict[str, str | None] = {n: None for n in self.G}
        visited: set[str] = set()
        dist[start_id] = 0.0
        seq = 0  # discovery order breaks cost ties
        heap = [(0.0, seq, start_id)]

        while heap:
            d, _, u = heapq.heappop(heap)
            if u in visited:
                continue
            visited.add(u)
            if u == end_id:
                break
            for v, edge in self.G.neighbors(u).items():
                if v in visited:
                    continue
                nd = d + self.G.edge_cost(edge, self.metric)
                if nd < dist[v]:
                    dist[v], prev[v] = nd, u
                    seq += 1
                    heapq.heappush(heap, (nd, seq, v))

        path: list[str] = []
        cur: str | None = end_id
        while cur is not None:
            path.append(cur)
            cur = prev[cur]
        path.reverse()
        if path[0] != start_id:
            return None

        segs: list[str] = []
        for u, v in zip(path, path[1:]):
            segs.extend(self.G.edge(u, v).segments)
        return _assemble(self.G, self.metric, path, segs, dist[end_id])

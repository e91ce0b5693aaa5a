# domain/entities/graph.py
import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Literal

from campus_nav.domain.entities.geography import Edge, Node, Point
from campus_nav.domain.errors import GraphDataError, NodeNotFoundError

logger = logging.getLogger(__name__)

Crs = Literal["geographic", "planar"]

_NO_NEIGHBORS: Mapping[str, Edge] = MappingProxyType({})


class CampusGraph:
    """
    Immutable campus graph: nodes in declaration order plus a bidirectional adjacency.

    Every directed declaration A->B without an explicit B->A twin gets a derived
    reverse edge at construction (same weight, segment tuple reversed). Explicit
    declarations in both directions are kept as declared.
    Neighbour order: explicit declarations first, then derived reverses, each in
    declaration order.
    """

    def __init__(
        self,
        nodes: Iterable[Node],
        edges: Iterable[Edge] = (),
        *,
        crs: Crs = "geographic",
        strict: bool = True,
    ):
        self.crs = crs
        self._nodes: dict[str, Node] = {}
        for n in nodes:
            if n.id in self._nodes:
                raise GraphDataError(f"duplicate node id {n.id!r}")
            self._nodes[n.id] = n

        declared: dict[tuple[str, str], Edge] = {}
        for e in edges:
            _check_edge(e)
            missing = next((i for i in (e.source, e.target) if i not in self._nodes), None)
            if missing is not None:
                if strict:
                    raise GraphDataError(
                        f"edge {e.source!r}->{e.target!r} references undeclared node {missing!r}"
                    )
                logger.warning(
                    "dropping edge %s->%s: undeclared node %r", e.source, e.target, missing
                )
                continue
            if (e.source, e.target) in declared:
                raise GraphDataError(f"duplicate edge {e.source!r}->{e.target!r}")
            declared[(e.source, e.target)] = e

        adj: dict[str, dict[str, Edge]] = {}
        for (u, v), e in declared.items():
            adj.setdefault(u, {})[v] = e
        for (u, v), e in declared.items():
            if (v, u) not in declared:
                adj.setdefault(v, {})[u] = e.reversed()

        self._declared = tuple(declared.values())
        self._adj = {u: MappingProxyType(nbrs) for u, nbrs in adj.items()}

    # ---------------- nodes ----------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes.values())

    def node(self, node_id: str) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def get(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def point(self, node_id: str) -> Point:
        return self.node(node_id).point

    # ---------------- edges ----------------

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Edges as declared by the source data (no derived reverses)."""
        return self._declared

    def neighbors(self, node_id: str) -> Mapping[str, Edge]:
        """Neighbour id -> edge walked from node_id. Empty for unknown or isolated nodes."""
        return self._adj.get(node_id, _NO_NEIGHBORS)

    def edge(self, source: str, target: str) -> Edge | None:
        return self.neighbors(source).get(target)

    def edge_cost(self, edge: Edge, metric) -> float:
        if edge.weight is not None:
            return edge.weight
        return metric.distance(self.point(edge.source), self.point(edge.target))

    def without_node_edges(self, node_id: str) -> "CampusGraph":
        """Copy of the graph with every edge touching node_id removed (the node stays)."""
        kept = [e for e in self._declared if node_id not in (e.source, e.target)]
        return CampusGraph(self._nodes.values(), kept, crs=self.crs)

    def __repr__(self) -> str:
        return f"CampusGraph(nodes={len(self._nodes)}, edges={len(self._declared)}, crs={self.crs!r})"


def _check_edge(e: Edge) -> None:
    if e.source == e.target:
        raise GraphDataError(f"self loop on {e.source!r}")
    if e.weight is not None and (not math.isfinite(e.weight) or e.weight < 0):
        raise GraphDataError(f"edge {e.source!r}->{e.target!r} has invalid weight {e.weight!r}")

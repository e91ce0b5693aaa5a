# domain/entities/geography.py
from dataclasses import dataclass
from enum import Enum


# Core geometry types used by mechanics
@dataclass(frozen=True)
class Point:
    x: float  # longitude for geographic graphs, planar x otherwise
    y: float  # latitude for geographic graphs


class NodeCategory(Enum):
    ACADEMIC = "academic"
    HOSTEL = "hostel"
    FOOD = "food"
    EMERGENCY = "emergency"
    SERVICE = "service"
    LANDMARK = "landmark"
    JUNCTION = "junction"  # routing-only waypoint, never selectable


@dataclass(frozen=True)
class Node:
    id: str
    name: str
    point: Point
    category: NodeCategory = NodeCategory.LANDMARK
    floor: str | None = None
    facts: tuple[str, ...] = ()
    parent: str | None = None  # contained-by node id ("same building" detection)

    @property
    def selectable(self) -> bool:
        return self.category is not NodeCategory.JUNCTION


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float | None = None  # physical distance; None => derive from geometry
    segments: tuple[str, ...] = ()  # ordered sub-path ids as walked source -> target
    derived: bool = False  # True for reverse edges materialized at load time

    def reversed(self) -> "Edge":
        return Edge(
            source=self.target,
            target=self.source,
            weight=self.weight,
            segments=tuple(reversed(self.segments)),
            derived=True,
        )


@dataclass(frozen=True)
class Route:
    nodes: tuple[str, ...]
    segments: tuple[str, ...] = ()
    coordinates: tuple[Point, ...] = ()
    cost: float = 0.0  # hops for BFS, summed edge cost for Dijkstra
    length_m: float = 0.0

    @property
    def start(self) -> str:
        return self.nodes[0]

    @property
    def end(self) -> str:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        return len(self.nodes) - 1


@dataclass(frozen=True)
class Nearest:
    node_id: str
    node: Node
    distance_m: float

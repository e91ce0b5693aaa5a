# campus_nav/io/graph_records.py
"""
On-disk / over-the-wire schema for campus graphs.

    {
      "crs": "geographic",
      "nodes": [{"id", "name", "lat", "lng" | "x", "y", "type", "floor"?, "facts"?, "parent"?}],
      "edges": [{"from", "to", "weight"?, "segments"?}],
      "adjacency": {"node_id": {"neighbor_id": ["segment_id", ...]}}
    }

`edges` and `adjacency` are both optional and may be combined; adjacency entries
are directed, segment-only declarations. Reverse directions are derived by the graph.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator

from campus_nav.domain.entities.geography import Edge, Node, NodeCategory, Point
from campus_nav.domain.entities.graph import CampusGraph
from campus_nav.domain.errors import GraphDataError

# labels found in campus datasets -> closed category set
CATEGORY_ALIASES = {
    "admin": NodeCategory.SERVICE,
    "administration": NodeCategory.SERVICE,
    "services": NodeCategory.SERVICE,
    "facility": NodeCategory.SERVICE,
    "auditorium": NodeCategory.LANDMARK,
    "sports": NodeCategory.LANDMARK,
    "building": NodeCategory.LANDMARK,
    "entrance": NodeCategory.LANDMARK,
}


class NodeRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str
    name: str | None = None
    lat: float | None = None
    lng: float | None = None
    x: float | None = None
    y: float | None = None
    category: str = Field("landmark", validation_alias=AliasChoices("category", "type"))
    floor: str | None = None
    facts: list[str] = Field(default_factory=list)
    parent: str | None = Field(None, validation_alias=AliasChoices("parent", "blockId"))

    @model_validator(mode="after")
    def _one_coordinate_pair(self):
        if (self.lat is None) != (self.lng is None) or (self.x is None) != (self.y is None):
            raise ValueError(f"node {self.id!r}: incomplete coordinate pair")
        if self.lat is None and self.x is None:
            raise ValueError(f"node {self.id!r}: needs lat/lng or x/y")
        return self

    def to_node(self) -> Node:
        p = Point(self.lng, self.lat) if self.lat is not None else Point(self.x, self.y)
        return Node(
            id=self.id,
            name=self.name or self.id,
            point=p,
            category=parse_category(self.category),
            floor=self.floor,
            facts=tuple(self.facts),
            parent=self.parent or None,
        )


class EdgeRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")
    source: str = Field(validation_alias=AliasChoices("from", "source"))
    target: str = Field(validation_alias=AliasChoices("to", "target"))
    weight: float | None = None
    segments: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("segments", "roads")
    )

    def to_edge(self) -> Edge:
        return Edge(self.source, self.target, self.weight, tuple(self.segments))


class GraphRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")
    crs: Literal["geographic", "planar"] = "geographic"
    nodes: list[NodeRecord]
    edges: list[EdgeRecord] = Field(default_factory=list)
    adjacency: dict[str, dict[str, list[str]]] = Field(default_factory=dict)

    def iter_edges(self):
        for e in self.edges:
            yield e.to_edge()
        for u, nbrs in self.adjacency.items():
            for v, segs in nbrs.items():
                yield Edge(u, v, None, tuple(segs))


def parse_category(label: str) -> NodeCategory:
    key = label.strip().lower()
    try:
        return NodeCategory(key)
    except ValueError:
        pass
    if key in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[key]
    raise GraphDataError(f"unknown node category {label!r}")


def graph_from_records(data: Mapping[str, Any], *, strict: bool = True) -> CampusGraph:
    try:
        rec = GraphRecord.model_validate(data)
    except ValidationError as e:
        raise GraphDataError(f"invalid graph record: {e}") from e
    nodes = [n.to_node() for n in rec.nodes]
    return CampusGraph(nodes, rec.iter_edges(), crs=rec.crs, strict=strict)


def graph_to_records(graph: CampusGraph) -> dict[str, Any]:
    """Inverse of graph_from_records for declared data (derived reverses are not written)."""
    coord_keys = ("lng", "lat") if graph.crs == "geographic" else ("x", "y")
    nodes = []
    for n in graph.nodes:
        rec: dict[str, Any] = {"id": n.id, "name": n.name, "type": n.category.value}
        rec[coord_keys[0]], rec[coord_keys[1]] = n.point.x, n.point.y
        if n.floor is not None:
            rec["floor"] = n.floor
        if n.facts:
            rec["facts"] = list(n.facts)
        if n.parent is not None:
            rec["parent"] = n.parent
        nodes.append(rec)
    edges = []
    for e in graph.edges:
        rec = {"from": e.source, "to": e.target}
        if e.weight is not None:
            rec["weight"] = e.weight
        if e.segments:
            rec["segments"] = list(e.segments)
        edges.append(rec)
    return {"crs": graph.crs, "nodes": nodes, "edges": edges}

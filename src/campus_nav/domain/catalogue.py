# campus_nav/domain/catalogue.py
from dataclasses import dataclass

from campus_nav.domain.entities.geography import Node, NodeCategory
from campus_nav.domain.entities.graph import CampusGraph


@dataclass(frozen=True)
class CategoryInfo:
    label: str
    color: str  # badge class used by the destination picker


_CATEGORY_INFO = {
    NodeCategory.ACADEMIC: CategoryInfo("Academic", "badge-academic"),
    NodeCategory.HOSTEL: CategoryInfo("Hostel", "badge-hostel"),
    NodeCategory.FOOD: CategoryInfo("Food", "badge-food"),
    NodeCategory.EMERGENCY: CategoryInfo("Emergency", "badge-emergency"),
    NodeCategory.SERVICE: CategoryInfo("Service", "badge-service"),
    NodeCategory.LANDMARK: CategoryInfo("Landmark", "badge-landmark"),
    NodeCategory.JUNCTION: CategoryInfo("Junction", "badge-building"),
}


def category_info(category: NodeCategory) -> CategoryInfo:
    return _CATEGORY_INFO[category]


def selectable_locations(graph: CampusGraph) -> list[Node]:
    """Destinations a user may pick: every node except junctions, in graph order."""
    return [n for n in graph.nodes if n.selectable]


def locations_by_category(graph: CampusGraph) -> dict[NodeCategory, list[Node]]:
    groups: dict[NodeCategory, list[Node]] = {}
    for n in selectable_locations(graph):
        groups.setdefault(n.category, []).append(n)
    return groups


def children_of(graph: CampusGraph, node_id: str) -> list[Node]:
    """Rooms, floors or wings declared as contained by node_id."""
    return [n for n in graph.nodes if n.parent == node_id]

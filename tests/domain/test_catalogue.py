# tests/domain/test_catalogue.py
from campus_nav.domain.catalogue import (
    category_info,
    children_of,
    locations_by_category,
    selectable_locations,
)
from campus_nav.domain.entities.geography import NodeCategory
from campus_nav.io.datasets import VIT_CHENNAI
from campus_nav.io.graph_records import graph_from_records


def test_catalogue_views():
    G = graph_from_records(VIT_CHENNAI)

    ids = [n.id for n in selectable_locations(G)]
    assert "library" in ids
    assert not any(i.startswith("j_") for i in ids)
    assert len(ids) == len(G) - 3

    groups = locations_by_category(G)
    assert NodeCategory.JUNCTION not in groups
    assert {n.id for n in groups[NodeCategory.HOSTEL]} == {"a_hostel", "b_hostel", "c_hostel"}
    assert "health_centre" in {n.id for n in groups[NodeCategory.EMERGENCY]}

    assert [n.id for n in children_of(G, "ab1")] == ["ab1_robotics_lab"]
    assert children_of(G, "gazebo") == []

    assert category_info(NodeCategory.FOOD).label == "Food"
    assert all(category_info(c).color.startswith("badge-") for c in NodeCategory)

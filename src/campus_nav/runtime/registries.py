# runtime/registries.py
from collections.abc import Callable
from typing import Any

from campus_nav.app.protocols import DistanceMetric, NodeLocator, PathSolver
from campus_nav.config.models import (
    GraphByName,
    GraphByPath,
    GraphRef,
    LocatorModel,
    MetricHaversineModel,
    MetricPlanarModel,
    MetricUnion,
    SolverBfsModel,
    SolverDijkstraModel,
    SolverUnion,
)
from campus_nav.domain.entities.graph import CampusGraph
from campus_nav.domain.errors import UnknownComponentError
from campus_nav.domain.mechanics.mechanics_locators import NearestNodeLocator
from campus_nav.domain.mechanics.mechanics_metrics import HaversineMetric, PlanarMetric
from campus_nav.domain.mechanics.mechanics_solvers import BfsSolver, DijkstraSolver
from campus_nav.io.datasets import DATASETS
from campus_nav.io.graph_records import graph_from_records
from campus_nav.runtime.resources import load_graph_from_path

MetricFactory = Callable[[MetricUnion, dict], DistanceMetric]
LocatorFactory = Callable[[LocatorModel, dict], NodeLocator]
SolverFactory = Callable[[SolverUnion, dict], PathSolver]
GraphFactory = Callable[[], CampusGraph]

_metric_registry: dict[str, MetricFactory] = {}
_locator_registry: dict[str, LocatorFactory] = {}
_solver_registry: dict[str, SolverFactory] = {}
_graph_registry: dict[str, GraphFactory] = {}


def _lookup(registry: dict[str, Any], kind: str, what: str):
    try:
        return registry[kind]
    except KeyError:
        raise UnknownComponentError(
            f"Unknown {what} {kind!r} (known: {sorted(registry)})"
        ) from None


# ------------------- Graphs ---------------------------


def register_graph(name: str):
    def deco(fn: GraphFactory):
        _graph_registry[name] = fn
        return fn

    return deco


for _name, _records in DATASETS.items():
    register_graph(_name)(lambda _records=_records: graph_from_records(_records))


def resolve_graph(ref: GraphRef | None, *, deps: dict) -> CampusGraph:
    """
    deps can include:
      - 'graphs': dict[str, CampusGraph]  # prebuilt graphs by name, checked before the registry
      - 'graph': CampusGraph              # a direct fallback/default
    """
    if ref is None:
        if "graph" in deps:
            return deps["graph"]
        raise ValueError("No graph provided")
    if isinstance(ref, GraphByName):
        prebuilt = deps.get("graphs", {})
        if ref.name in prebuilt:
            return prebuilt[ref.name]
        return _lookup(_graph_registry, ref.name, "graph")()
    if isinstance(ref, GraphByPath):
        return load_graph_from_path(ref.file, ref.strict)
    raise TypeError(ref)


# ------------------- Metrics ---------------------------


def register_metric(kind: str):
    def deco(fn: MetricFactory):
        _metric_registry[kind] = fn
        return fn

    return deco


def make_metric(cfg: MetricUnion) -> DistanceMetric:
    return _lookup(_metric_registry, cfg.kind, "metric")(cfg, {})


@register_metric("haversine")
def _make_haversine(cfg: MetricHaversineModel, deps):
    return HaversineMetric()


@register_metric("planar")
def _make_planar(cfg: MetricPlanarModel, deps):
    return PlanarMetric()


# ------------------- Locators ---------------------------


def register_locator(kind: str):
    def deco(fn: LocatorFactory):
        _locator_registry[kind] = fn
        return fn

    return deco


def make_locator(cfg: LocatorModel, *, deps: dict) -> NodeLocator:
    return _lookup(_locator_registry, cfg.kind, "locator")(cfg, deps)


@register_locator("scan")
def _make_scan(cfg: LocatorModel, deps):
    return NearestNodeLocator(
        graph=deps["graph"], metric=deps["metric"], include_junctions=cfg.include_junctions
    )


# --------------------- Solvers  ---------------------


def register_solver(kind: str):
    def deco(fn: SolverFactory):
        _solver_registry[kind] = fn
        return fn

    return deco


def make_solver(cfg: SolverUnion, *, deps: dict) -> PathSolver:
    return _lookup(_solver_registry, cfg.kind, "solver")(cfg, deps)


@register_solver("bfs")
def _make_bfs(cfg: SolverBfsModel, deps):
    return BfsSolver(deps["graph"], deps["metric"])


@register_solver("dijkstra")
def _make_dijkstra(cfg: SolverDijkstraModel, deps):
    return DijkstraSolver(deps["graph"], deps["metric"])

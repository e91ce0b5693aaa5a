# campus_nav/domain/mechanics/mechanics_factory.py
from collections.abc import Mapping

from campus_nav.config.models import MechanicsModel, MetricHaversineModel, MetricPlanarModel
from campus_nav.domain.entities.graph import CampusGraph
from campus_nav.domain.mechanics.mechanics_core import Mechanics
from campus_nav.runtime.registries import make_locator, make_metric, make_solver


def build_mechanics(cfg: MechanicsModel | Mapping, graph: CampusGraph) -> Mechanics:
    model = cfg if isinstance(cfg, MechanicsModel) else MechanicsModel.model_validate(cfg)

    metric_cfg = model.metric
    if metric_cfg is None:
        metric_cfg = MetricPlanarModel() if graph.crs == "planar" else MetricHaversineModel()
    metric = make_metric(metric_cfg)

    deps = {"graph": graph, "metric": metric}
    locator = make_locator(model.locator, deps=deps)
    solver = make_solver(model.solver, deps=deps)

    return Mechanics(graph=graph, metric=metric, locator=locator, solver=solver)

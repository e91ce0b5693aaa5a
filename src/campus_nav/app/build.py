# campus_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from campus_nav.app.controllers.navigation import NavigationHandler
from campus_nav.app.wiring import wire
from campus_nav.config.models import NavigatorModel
from campus_nav.domain.entities.graph import CampusGraph
from campus_nav.domain.mechanics.mechanics_core import Mechanics
from campus_nav.domain.mechanics.mechanics_factory import build_mechanics
from campus_nav.domain.state import RouteSession
from campus_nav.io.recorder import JsonlSink, Recorder, Sink
from campus_nav.io.session_logging import SessionLogging  # JSON logs
from campus_nav.runtime.registries import resolve_graph
from campus_nav.sim.hooks import FanoutHooks, KernelHooks, NoopHooks
from campus_nav.sim.kernel import Kernel


@dataclass
class App:
    kernel: Kernel
    graph: CampusGraph
    mechanics: Mechanics
    session: RouteSession
    navigation: NavigationHandler
    recorder: Recorder


def build(
    cfg: NavigatorModel | Mapping,
    *,
    use_logging: bool = True,
    graphs: dict[str, CampusGraph] | None = None,
    sinks: list[Sink] | None = None,
    hooks: KernelHooks | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, NavigatorModel) else NavigatorModel.model_validate(cfg)

    # 1) Recorder for outcome events
    recorder = Recorder(*(sinks or [JsonlSink()]))

    # 2) Kernel (with hooks)
    base = (
        SessionLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=FanoutHooks(base, hooks) if hooks else base)

    # 3) Graph & mechanics
    graph = resolve_graph(model.graph, deps={"graphs": graphs or {}})
    mechanics = build_mechanics(model.mechanics, graph)

    # 4) Session & handler
    session = RouteSession()
    navigation = NavigationHandler(
        session=session,
        mechanics=mechanics,
        walking_speed_mps=model.walking_speed_mps,
    )

    # 5) Wiring
    wire(kernel, navigation=navigation, recorder=None if use_logging else recorder)

    return App(kernel, graph, mechanics, session, navigation, recorder)

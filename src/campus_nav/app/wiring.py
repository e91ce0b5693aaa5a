# campus_nav/app/wiring.py
from campus_nav.app.controllers.navigation import NavigationHandler
from campus_nav.app.events import OUTCOMES, DestinationSelected, GpsFix, NavigationReset
from campus_nav.io.recorder import Recorder
from campus_nav.sim.kernel import Kernel


def wire(
    kernel: Kernel,
    *,
    navigation: NavigationHandler,
    recorder: Recorder | None = None,
) -> None:
    k = kernel

    # inputs
    k.on(GpsFix, navigation.on_gps_fix)
    k.on(DestinationSelected, navigation.on_destination_selected)
    k.on(NavigationReset, navigation.on_reset)  # keeps the location, drops the route

    # outcomes go straight to the recorder when no logging hooks carry them
    if recorder:
        for etype in OUTCOMES:
            k.on(etype, lambda ev, _r=recorder: _r.emit(ev))

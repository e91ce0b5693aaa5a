# sim/hooks.py
from typing import Protocol

from campus_nav.sim.event import BaseEvent


class KernelHooks(Protocol):
    """Observers of the session loop. They see every event but never change the flow."""

    def run_start(self, *, until, max_events, qsize): ...
    def run_end(self, *, processed, last_t, qsize, wall_ms): ...
    def schedule(self, ev: BaseEvent, *, now, qsize): ...
    def dispatch_start(self, ev: BaseEvent, *, seq, qsize, handlers): ...
    def dispatch_end(self, ev: BaseEvent, *, produced, ms): ...
    def error(self, ev: BaseEvent, *, reason: str, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def schedule(self, *_, **__):
        pass

    def dispatch_start(self, *_, **__):
        pass

    def dispatch_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass


class FanoutHooks:
    """Forwards each callback to several hooks, in the order given."""

    def __init__(self, *hooks: KernelHooks):
        self.hooks = hooks

    def run_start(self, **kw):
        for h in self.hooks:
            h.run_start(**kw)

    def run_end(self, **kw):
        for h in self.hooks:
            h.run_end(**kw)

    def schedule(self, ev, **kw):
        for h in self.hooks:
            h.schedule(ev, **kw)

    def dispatch_start(self, ev, **kw):
        for h in self.hooks:
            h.dispatch_start(ev, **kw)

    def dispatch_end(self, ev, **kw):
        for h in self.hooks:
            h.dispatch_end(ev, **kw)

    def error(self, ev, **kw):
        for h in self.hooks:
            h.error(ev, **kw)

# io/session_logging.py
import json
import logging
import sys

from campus_nav.io.recorder import Recorder
from campus_nav.sim.hooks import NoopHooks


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="campus_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SessionLogging(NoopHooks):
    """
    One place to shape and emit structured logs for a navigation session.
    Outcome events go to INFO (and to the recorder); engine chatter only when debug.
    """

    OUTCOMES = {
        "LocationResolved",
        "AwaitingLocation",
        "AlreadyAtDestination",
        "SameBuilding",
        "RouteFound",
        "NoRoute",
        "SelectionRejected",
        "RouteCleared",
    }

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._processed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _shape_event(self, ev) -> dict:
        base = {"t": getattr(ev, "t", None)}
        for f in ("node_id", "start_id", "destination_id", "reason"):
            if hasattr(ev, f):
                base[f] = getattr(ev, f)
        # route geometry is large; keep counts and totals only
        if hasattr(ev, "nodes"):
            base["hops"] = len(ev.nodes) - 1
            base["segments"] = len(ev.segments)
            base["length_m"] = round(ev.length_m, 1)
        elif hasattr(ev, "distance_m"):
            base["distance_m"] = round(ev.distance_m, 1)
        return base

    # engine lifecycle

    def run_start(self, *, until, max_events, qsize):
        if self.debug:
            self._emit("DEBUG", "run_start", until=until, max_events=max_events, qsize=qsize)

    def run_end(self, *, processed, **extra):
        if self.debug:
            self._emit("DEBUG", "run_end", processed=processed, **extra)

    def schedule(self, ev, *, now, qsize):
        if self.debug:
            self._emit("DEBUG", "schedule", event=type(ev).__name__, now=now, qsize=qsize)

    def dispatch_start(self, ev, *, seq, qsize, handlers):
        self._processed += 1
        name = type(ev).__name__
        if name in self.OUTCOMES:
            self._emit("INFO", name, **self._shape_event(ev), seq=seq)
            if self.recorder:
                self.recorder.emit(ev)
        elif self.debug:
            self._emit("DEBUG", name, **self._shape_event(ev), seq=seq, handlers=handlers)

    def dispatch_end(self, ev, *, produced, ms):
        if self.debug:
            self._emit("DEBUG", "dispatch_done", event=type(ev).__name__, produced=produced, ms=ms)

    def error(self, ev, **extra):
        self._emit("ERROR", "kernel_error", event=type(ev).__name__, **extra)

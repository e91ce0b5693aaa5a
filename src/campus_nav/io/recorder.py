# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, ev) -> None: ...


def event_record(ev) -> dict:
    """Flat JSON-ready dict for an outcome event, tagged with its type name."""
    return {"event": type(ev).__name__, **asdict(ev)}


def _json_default(o):
    if isinstance(o, Enum):
        return o.value
    if is_dataclass(o):
        return asdict(o)
    raise TypeError(f"{type(o).__name__} is not JSON serializable")


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, ev) -> None:
        self.fp.write(json.dumps(event_record(ev), default=_json_default) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except (OSError, TypeError, ValueError):
                # a broken sink must not stop the session
                logger.exception("sink %s failed on %s", type(s).__name__, type(ev).__name__)

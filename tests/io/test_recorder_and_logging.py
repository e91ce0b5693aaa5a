# tests/io/test_recorder_and_logging.py
import io
import json
import logging

from campus_nav.app.events import GpsFix, LocationResolved, RouteFound
from campus_nav.domain.entities.geography import Point
from campus_nav.io.recorder import JsonlSink, MemorySink, Recorder
from campus_nav.io.session_logging import JsonFormatter, SessionLogging


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


def _logger(name):
    lg = logging.getLogger(name)
    lg.handlers.clear()
    h = _ListHandler()
    lg.addHandler(h)
    lg.setLevel(logging.DEBUG)
    lg.propagate = False
    return lg, h


def _route_found():
    return RouteFound(
        t=1.0,
        start_id="A",
        destination_id="C",
        nodes=("A", "B", "C"),
        segments=("path_ab", "path_bc"),
        coordinates=(Point(0, 0), Point(3, 0), Point(3, 4)),
        cost=7.0,
        length_m=7.0,
        eta_s=5.0,
    )


def test_jsonl_sink_writes_one_line_per_event():
    buf = io.StringIO()
    sink = JsonlSink(buf)
    sink.write(_route_found())
    sink.write(LocationResolved(t=0.0, node_id="A", distance_m=0.0))
    lines = buf.getvalue().splitlines()
    assert len(lines) == 2
    rec = json.loads(lines[0])
    assert rec["event"] == "RouteFound"
    assert rec["nodes"] == ["A", "B", "C"]
    assert rec["coordinates"][2] == {"x": 3, "y": 4}
    assert json.loads(lines[1])["previous_id"] is None


class _BrokenSink:
    def write(self, ev):
        raise OSError("disk full")


def test_recorder_survives_broken_sink(caplog):
    mem = MemorySink()
    rec = Recorder(_BrokenSink(), mem)
    ev = LocationResolved(t=0.0, node_id="A", distance_m=0.0)
    with caplog.at_level(logging.ERROR, logger="campus_nav.io.recorder"):
        rec.emit(ev)
    assert mem.events == [ev]
    assert "_BrokenSink failed" in caplog.text


def test_outcomes_logged_and_recorded():
    lg, h = _logger("test.session.outcomes")
    mem = MemorySink()
    hooks = SessionLogging(run_id="r-1", logger=lg, recorder=Recorder(mem))

    hooks.dispatch_start(GpsFix(t=0.0, lat=0.0, lng=0.0), seq=1, qsize=0, handlers=1)
    hooks.dispatch_start(_route_found(), seq=2, qsize=0, handlers=0)

    # inputs stay quiet unless debugging
    assert [r.getMessage() for r in h.records] == ["RouteFound"]
    extra = h.records[0].extra
    assert extra["run_id"] == "r-1"
    assert extra["hops"] == 2 and extra["segments"] == 2
    assert extra["destination_id"] == "C"
    assert [type(e).__name__ for e in mem.events] == ["RouteFound"]


def test_debug_logs_engine_chatter():
    lg, h = _logger("test.session.debug")
    hooks = SessionLogging(logger=lg, debug=True)
    hooks.run_start(until=None, max_events=None, qsize=1)
    hooks.dispatch_start(GpsFix(t=0.0, lat=0.0, lng=0.0), seq=1, qsize=0, handlers=1)
    hooks.dispatch_end(GpsFix(t=0.0, lat=0.0, lng=0.0), produced=2, ms=0.1)
    hooks.error(GpsFix(t=0.0, lat=0.0, lng=0.0), reason="time_backwards")
    msgs = [(r.levelname, r.getMessage()) for r in h.records]
    assert msgs == [
        ("DEBUG", "run_start"),
        ("DEBUG", "GpsFix"),
        ("DEBUG", "dispatch_done"),
        ("ERROR", "kernel_error"),
    ]
    assert h.records[-1].extra["reason"] == "time_backwards"


def test_json_formatter_flattens_extra():
    rec = logging.LogRecord("campus_nav", logging.INFO, __file__, 1, "RouteFound", None, None)
    rec.extra = {"run_id": "r-1", "hops": 2}
    out = json.loads(JsonFormatter().format(rec))
    assert out == {"level": "INFO", "msg": "RouteFound", "logger": "campus_nav", "run_id": "r-1", "hops": 2}

# main.py
import argparse
import json
import sys

from campus_nav.app.build import build
from campus_nav.io.recorder import JsonlSink
from campus_nav.io.trace import parse_trace


def run(cfg: dict, trace_lines, out=None) -> float:
    app = build(cfg, use_logging=False, sinks=[JsonlSink(out or sys.stdout)])
    for ev in parse_trace(trace_lines):
        app.kernel.dispatch(ev)
    return app.kernel.now


def main(argv=None):
    ap = argparse.ArgumentParser(description="Replay a recorded navigation session.")
    ap.add_argument("--config", help="navigator config (JSON); defaults apply when omitted")
    ap.add_argument("--trace", required=True, help="JSONL trace of gps/select/reset records")
    args = ap.parse_args(argv)

    cfg = {}
    if args.config:
        with open(args.config, encoding="utf-8") as f:
            cfg = json.load(f)
    with open(args.trace, encoding="utf-8") as f:
        run(cfg, f)


if __name__ == "__main__":
    main()

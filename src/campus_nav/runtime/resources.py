# campus_nav/runtime/resources.py
import json
from functools import lru_cache
from pathlib import Path

from campus_nav.domain.entities.graph import CampusGraph
from campus_nav.domain.errors import GraphDataError
from campus_nav.io.graph_records import graph_from_records


# graphs are immutable after load, so one instance per file is shared by every session
@lru_cache(maxsize=8)
def load_graph_from_path(file: str, strict: bool = True) -> CampusGraph:
    path = Path(file)
    if not path.exists():
        raise FileNotFoundError(file)
    if path.suffix.lower() != ".json":
        raise ValueError(f"Unsupported graph file {file!r} (expected .json)")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GraphDataError(f"{file}: {e}") from e
    return graph_from_records(data, strict=strict)

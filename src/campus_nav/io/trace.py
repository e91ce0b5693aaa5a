# io/trace.py
"""
Recorded session traces: one JSON object per line, e.g.

    {"type": "gps", "t": 0, "lat": 12.8406, "lng": 80.1534}
    {"type": "select", "t": 5, "node": "library"}
    {"type": "reset", "t": 60}

Blank lines and lines starting with '#' are skipped.
"""

import json
from collections.abc import Iterable, Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from campus_nav.app.events import DestinationSelected, GpsFix, NavigationReset
from campus_nav.sim.event import BaseEvent


class GpsRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")
    type: Literal["gps"] = "gps"
    t: float = Field(ge=0)
    lat: float
    lng: float
    accuracy_m: float | None = None

    def to_event(self) -> GpsFix:
        return GpsFix(t=self.t, lat=self.lat, lng=self.lng, accuracy_m=self.accuracy_m)


class SelectRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")
    type: Literal["select"] = "select"
    t: float = Field(ge=0)
    node: str

    def to_event(self) -> DestinationSelected:
        return DestinationSelected(t=self.t, node_id=self.node)


class ResetRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")
    type: Literal["reset"] = "reset"
    t: float = Field(ge=0)

    def to_event(self) -> NavigationReset:
        return NavigationReset(t=self.t)


TraceRecord = Annotated[GpsRecord | SelectRecord | ResetRecord, Field(discriminator="type")]
_adapter = TypeAdapter(TraceRecord)


def parse_trace(lines: Iterable[str]) -> Iterator[BaseEvent]:
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            rec = _adapter.validate_python(json.loads(line))
        except (json.JSONDecodeError, ValidationError) as e:
            raise ValueError(f"trace line {lineno}: {e}") from e
        yield rec.to_event()

import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- GRAPH SOURCES ---------------------


class GraphByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    strict: bool = True  # False => drop edges naming undeclared nodes (with a warning)

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class GraphByName(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["name"] = "name"
    name: str = "vit_chennai"


GraphRef = Annotated[GraphByPath | GraphByName, Field(discriminator="by")]


# ----------------- METRICS / LOCATOR ---------------------


class MetricHaversineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["haversine"] = "haversine"


class MetricPlanarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["planar"] = "planar"


MetricUnion = Annotated[MetricHaversineModel | MetricPlanarModel, Field(discriminator="kind")]


class LocatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["scan"] = "scan"
    include_junctions: bool = True


# ----------------- SOLVERS ---------------------


class SolverBfsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


class SolverDijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


SolverUnion = Annotated[SolverBfsModel | SolverDijkstraModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class MechanicsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    metric: MetricUnion | None = None  # None => follow the graph crs
    locator: LocatorModel = Field(default_factory=LocatorModel)
    solver: SolverUnion = Field(default_factory=SolverDijkstraModel)


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "campus"
    run_id: str = "local"
    log: LogModel = LogModel()
    graph: GraphRef = Field(default_factory=GraphByName)
    mechanics: MechanicsModel = Field(default_factory=MechanicsModel)
    walking_speed_mps: float = 1.4

    @field_validator("walking_speed_mps")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("walking_speed_mps must be > 0")
        return v

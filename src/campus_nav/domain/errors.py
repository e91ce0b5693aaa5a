# domain/errors.py


class GraphDataError(ValueError):
    """Corrupt static dataset: raised at load time, never retried."""


class EmptyGraphError(GraphDataError):
    pass


class NodeNotFoundError(KeyError):
    def __init__(self, node_id: str, role: str = "node"):
        super().__init__(node_id)
        self.node_id, self.role = node_id, role

    def __str__(self) -> str:
        return f"{self.role} {self.node_id!r} is not in the graph"


class UnknownComponentError(ValueError):
    pass

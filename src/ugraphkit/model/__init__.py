from . import graph
from .graph import (
    Edge,
    Graph,
    GraphError,
    InvalidEndpointError,
    InvalidVertexCountError,
    InvalidVertexIndexError,
    InvalidWeightError,
    SelfLoopError,
    UnknownLabelError,
)

__all__ = [
    "graph",
    "Edge",
    "Graph",
    "GraphError",
    "InvalidEndpointError",
    "InvalidVertexCountError",
    "InvalidVertexIndexError",
    "InvalidWeightError",
    "SelfLoopError",
    "UnknownLabelError",
]

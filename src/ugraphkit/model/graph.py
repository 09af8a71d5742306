from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from frozendict import frozendict
from pydantic import BaseModel, ConfigDict, Field

from ..constants import NO_GRAPH_ID
from ..helpers import get_logger, optional_dependencies, yes_no
from ..typing import Triple, Vertex

__all__ = [
    "GraphError",
    "InvalidVertexCountError",
    "InvalidWeightError",
    "InvalidVertexIndexError",
    "UnknownLabelError",
    "SelfLoopError",
    "InvalidEndpointError",
    "Edge",
    "Graph",
    "SerializedEdge",
    "SerializedGraph",
    "to_dict",
    "from_dict",
    "to_networkx",
    "from_networkx",
]


class GraphError(ValueError):
    """Base class for violations of the graph construction rules."""


class InvalidVertexCountError(GraphError):
    pass


class InvalidWeightError(GraphError):
    pass


class InvalidVertexIndexError(GraphError, IndexError):
    pass


class UnknownLabelError(GraphError, KeyError):
    pass


class SelfLoopError(GraphError):
    pass


class InvalidEndpointError(GraphError):
    pass


class SerializedEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    weight: int


class SerializedGraph(BaseModel):
    id: int = NO_GRAPH_ID
    name: str | None = None
    description: str | None = ""
    nodes: list[str]
    edges: list[SerializedEdge]


@dataclass(slots=True, frozen=True, eq=False)
class Edge:
    """Undirected weighted connection between two vertex indices.

    Two edges are equal when they join the same unordered pair of vertices
    with the same weight, labels are ignored. Edges order by weight.

    Examples:
        >>> Edge(0, 1, 5) == Edge(1, 0, 5)
        True
        >>> str(Edge(0, 1, 5, "A", "B"))
        'A--B (weight: 5)'
        >>> [e.weight for e in sorted([Edge(0, 1, 7), Edge(1, 2, 3)])]
        [3, 7]
    """

    source: int
    destination: int
    weight: int
    source_label: str | None = None
    destination_label: str | None = None

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise InvalidWeightError(f"Edge weight cannot be negative: {self.weight}")

        if self.source_label is None:
            object.__setattr__(self, "source_label", str(self.source))

        if self.destination_label is None:
            object.__setattr__(self, "destination_label", str(self.destination))

    @property
    def key(self) -> tuple[int, int, int]:
        return (
            min(self.source, self.destination),
            max(self.source, self.destination),
            self.weight,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented

        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented

        return self.weight < other.weight

    def __gt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented

        return self.weight > other.weight

    def __str__(self) -> str:
        return f"{self.source_label}--{self.destination_label} (weight: {self.weight})"

    def either(self) -> int:
        return self.source

    def other(self, vertex: int) -> int:
        """Return the endpoint opposite to `vertex`.

        Examples:
            >>> Edge(2, 4, 1).other(2)
            4
        """
        if vertex == self.source:
            return self.destination
        elif vertex == self.destination:
            return self.source

        raise InvalidEndpointError(
            f"Vertex {vertex} is not an endpoint of edge {self.source}--{self.destination}"
        )

    def reversed(self) -> Edge:
        return Edge(
            self.destination,
            self.source,
            self.weight,
            self.destination_label,
            self.source_label,
        )

    def dump(self) -> SerializedEdge:
        return SerializedEdge(
            source=str(self.source_label),
            target=str(self.destination_label),
            weight=self.weight,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.dump().model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.dump().model_dump_json(by_alias=True)


class Graph:
    """Undirected weighted graph over a fixed set of vertices.

    Vertices are addressed by a zero based index and by a string label.
    Every added edge is stored once in the edge list and twice in the
    adjacency lists, oriented outward from each endpoint. Vertex count and
    labels are fixed at construction, edges can only be appended, while
    name, description and id stay mutable.

    Examples:
        >>> g = Graph.from_labels(["A", "B", "C"], name="demo")
        >>> _ = g.add_edge("A", "B", 5)
        >>> g.is_connected(), g.count_components()
        (False, 2)
        >>> [str(e) for e in g.adjacent_edges(1)]
        ['B--A (weight: 5)']
    """

    __slots__ = (
        "_vertex_count",
        "_edges",
        "_adjacency",
        "_labels",
        "_label_index",
        "_name",
        "_description",
        "_graph_id",
    )

    def __init__(
        self,
        vertex_count: int,
        *,
        name: str | None = None,
        description: str | None = None,
        graph_id: int = NO_GRAPH_ID,
    ) -> None:
        if vertex_count <= 0:
            raise InvalidVertexCountError(
                f"Number of vertices must be positive, got {vertex_count}"
            )

        self._vertex_count = vertex_count
        self._edges: list[Edge] = []
        self._adjacency: list[list[Edge]] = [[] for _ in range(vertex_count)]
        self._name = name
        self._description = description
        self._graph_id = graph_id
        self._set_labels([str(i) for i in range(vertex_count)])

    @classmethod
    def from_labels(
        cls,
        labels: Iterable[str],
        name: str | None = None,
        description: str | None = None,
        graph_id: int = NO_GRAPH_ID,
    ) -> Graph:
        labels = list(labels)
        graph = cls(len(labels), name=name, description=description, graph_id=graph_id)
        graph._set_labels(labels)

        return graph

    def _set_labels(self, labels: list[str]) -> None:
        self._labels = labels
        # the last index wins for repeated labels
        self._label_index: frozendict[str, int] = frozendict(
            (label, index) for index, label in enumerate(labels)
        )

        if len(self._label_index) != len(labels):
            duplicates = sorted(
                {label for label in labels if self._labels.count(label) > 1}
            )
            get_logger(self).warning(
                f"Duplicate vertex labels {duplicates}, only the last vertex of each "
                "is reachable by name"
            )

    # metadata

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, value: str | None) -> None:
        self._name = value

    @property
    def description(self) -> str | None:
        return self._description

    @description.setter
    def description(self, value: str | None) -> None:
        self._description = value

    @property
    def graph_id(self) -> int:
        return self._graph_id

    @graph_id.setter
    def graph_id(self, value: int) -> None:
        self._graph_id = value

    @property
    def has_id(self) -> bool:
        return self._graph_id >= 0

    # structure

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    @property
    def node_names(self) -> list[str]:
        return list(self._labels)

    def __len__(self) -> int:
        return self._vertex_count

    def node_name(self, index: int) -> str:
        return self._labels[self._check_index(index)]

    def node_index(self, label: str) -> int | None:
        return self._label_index.get(label)

    def _check_index(self, vertex: int) -> int:
        if not 0 <= vertex < self._vertex_count:
            raise InvalidVertexIndexError(
                f"Invalid vertex index {vertex}, expected 0 <= index < {self._vertex_count}"
            )

        return vertex

    def _resolve(self, vertex: Vertex) -> int:
        if isinstance(vertex, str):
            index = self._label_index.get(vertex)

            if index is None:
                raise UnknownLabelError(f"Node name not found: {vertex}")

            return index

        return vertex

    def add_edge(self, source: Vertex, destination: Vertex, weight: int) -> Edge:
        """Connect two vertices given by index or by label.

        Args:
            source: Index or label of the first endpoint.
            destination: Index or label of the second endpoint.
            weight: Non-negative edge weight.

        Returns:
            The stored edge, oriented from `source` to `destination`.

        Raises:
            UnknownLabelError: A label is not part of the graph.
            InvalidVertexIndexError: An index is out of range.
            InvalidWeightError: The weight is negative.
            SelfLoopError: Both endpoints are the same vertex.
        """
        source_index = self._check_index(self._resolve(source))
        destination_index = self._check_index(self._resolve(destination))

        if weight < 0:
            raise InvalidWeightError(f"Edge weight cannot be negative: {weight}")

        if source_index == destination_index:
            raise SelfLoopError(
                f"Self-loops are not allowed: {self._labels[source_index]}"
            )

        edge = Edge(
            source_index,
            destination_index,
            weight,
            self._labels[source_index],
            self._labels[destination_index],
        )
        self._edges.append(edge)
        self._adjacency[source_index].append(edge)
        self._adjacency[destination_index].append(edge.reversed())

        return edge

    def add_edges(self, triples: Iterable[Triple]) -> None:
        for source, destination, weight in triples:
            self.add_edge(source, destination, weight)

    def adjacent_edges(self, vertex: int) -> list[Edge]:
        return list(self._adjacency[self._check_index(vertex)])

    def neighbors(self, vertex: int) -> list[int]:
        return [edge.destination for edge in self.adjacent_edges(vertex)]

    def degree(self, vertex: int) -> int:
        return len(self._adjacency[self._check_index(vertex)])

    # traversal

    def _traverse(self, start: int, visited: list[bool]) -> list[int]:
        queue = deque([start])
        visited[start] = True
        reached = [start]

        while queue:
            current = queue.popleft()

            for edge in self._adjacency[current]:
                neighbor = edge.destination

                if not visited[neighbor]:
                    visited[neighbor] = True
                    reached.append(neighbor)
                    queue.append(neighbor)

        return reached

    def is_connected(self) -> bool:
        if self._vertex_count <= 1:
            return True

        if not self._edges:
            return False

        visited = [False] * self._vertex_count

        return len(self._traverse(0, visited)) == self._vertex_count

    def components(self) -> list[list[int]]:
        """Group the vertices into connected components.

        Each traversal starts at the lowest unvisited index, so components
        are listed in order of their smallest vertex.

        Examples:
            >>> g = Graph(4)
            >>> _ = g.add_edge(0, 2, 1)
            >>> g.components()
            [[0, 2], [1], [3]]
        """
        visited = [False] * self._vertex_count
        components: list[list[int]] = []

        for vertex in range(self._vertex_count):
            if not visited[vertex]:
                components.append(self._traverse(vertex, visited))

        return components

    def count_components(self) -> int:
        return len(self.components())

    def validate(self) -> bool:
        """Check the stored edges against the graph rules.

        Problems are logged and reported as `False` instead of raised.
        """
        logger = get_logger(self)

        for edge in self._edges:
            if edge.weight < 0:
                logger.warning(f"Invalid graph: negative edge weight found ({edge})")
                return False

        for edge in self._edges:
            if not (
                0 <= edge.source < self._vertex_count
                and 0 <= edge.destination < self._vertex_count
            ):
                logger.warning(f"Invalid graph: vertex index out of bounds ({edge})")
                return False

        return True

    # serialization

    def dump(self) -> SerializedGraph:
        return SerializedGraph(
            id=self._graph_id,
            name=self._name,
            description=self._description,
            nodes=list(self._labels),
            edges=[edge.dump() for edge in self._edges],
        )

    @classmethod
    def load(cls, g: SerializedGraph) -> Graph:
        graph = cls.from_labels(
            g.nodes,
            name=g.name if g.name is not None else f"Graph {g.id}",
            description=g.description,
            graph_id=g.id,
        )

        for edge in g.edges:
            graph.add_edge(edge.source, edge.target, edge.weight)

        return graph

    def __repr__(self) -> str:
        return (
            f"Graph(name={self._name!r}, vertices={self._vertex_count}, "
            f"edges={len(self._edges)})"
        )

    def __str__(self) -> str:
        lines: list[str] = []

        if self._name is not None:
            lines.append(f"Graph: {self._name}")

        if self.has_id:
            lines.append(f"ID: {self._graph_id}")

        if self._description is not None:
            lines.append(f"Description: {self._description}")

        lines.append(f"Nodes: [{', '.join(self._labels)}]")
        lines.append(f"Vertices: {self._vertex_count}, Edges: {len(self._edges)}")
        lines.append(f"Connected: {yes_no(self.is_connected())}")
        lines.append("Edge List:")
        lines.extend(f"  {edge}" for edge in self._edges)

        return "\n".join(lines) + "\n"


def to_dict(g: Graph) -> Mapping[str, Any]:
    """Convert a graph into the single graph document.

    Examples:
        >>> g = Graph.from_labels(["A", "B"], graph_id=3)
        >>> _ = g.add_edge(0, 1, 2)
        >>> to_dict(g)
        {'id': 3, 'nodes': ['A', 'B'], 'edges': [{'from': 'A', 'to': 'B', 'weight': 2}]}
    """
    return g.dump().model_dump(
        by_alias=True,
        exclude_none=True,
        exclude=None if g.has_id else {"id"},
    )


def from_dict(g: Any) -> Graph:
    return Graph.load(SerializedGraph.model_validate(g))


with optional_dependencies():
    import networkx as nx

    def to_networkx(g: Graph) -> nx.Graph:
        """Convert into a `networkx.Graph`; parallel edges collapse into one."""
        ng = nx.Graph(name=g.name, description=g.description, id=g.graph_id)
        ng.add_nodes_from(
            (index, {"label": label}) for index, label in enumerate(g.node_names)
        )
        ng.add_edges_from(
            (edge.source, edge.destination, {"weight": edge.weight})
            for edge in g.edges
        )

        return ng

    def from_networkx(ng: nx.Graph) -> Graph:
        nodes = list(ng.nodes(data=True))
        node_index = {node: index for index, (node, _) in enumerate(nodes)}

        graph = Graph.from_labels(
            [str(data.get("label", node)) for node, data in nodes],
            name=ng.graph.get("name"),
            description=ng.graph.get("description"),
            graph_id=ng.graph.get("id", NO_GRAPH_ID),
        )

        for source, target, data in ng.edges(data=True):
            graph.add_edge(
                node_index[source], node_index[target], int(data.get("weight", 0))
            )

        return graph

"""
This module reads graph documents from JSON, TOML or YAML files and turns them into `Graph` instances.

Three document shapes are understood:

- a single graph object: `{"id": 1, "description": "...", "nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "weight": 3}]}`
- a list of such objects wrapped as `{"graphs": [...]}`
- the legacy integer format `{"datasets": [{"vertices": 3, "name": "...", "edges": [{"source": 0, "destination": 1, "weight": 3}]}]}`

To check a document before building graphs from it, `validate` and `validate_file` are provided.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson
import rtoml
import yaml as yamllib
from pydantic import BaseModel, ValidationError

from .helpers import get_logger
from .model.graph import Graph, SerializedGraph
from .typing import AnyIO, ConversionFunc, FilePath, ReadableType

__all__ = [
    "SerializedDataset",
    "SerializedDatasets",
    "SerializedGraphs",
    "SerializedLegacyEdge",
    "directory",
    "document",
    "file",
    "from_dataset",
    "from_document",
    "json",
    "path",
    "readers",
    "toml",
    "validate",
    "validate_file",
    "yaml",
]

logger = get_logger(__name__)


class SerializedGraphs(BaseModel):
    graphs: list[SerializedGraph]


class SerializedLegacyEdge(BaseModel):
    source: int
    destination: int
    weight: int


class SerializedDataset(BaseModel):
    vertices: int
    name: str = "Unnamed"
    description: str = ""
    edges: list[SerializedLegacyEdge] = []


class SerializedDatasets(BaseModel):
    datasets: list[SerializedDataset]


def read(data: ReadableType) -> str:
    if isinstance(data, str):
        return data

    elif isinstance(data, bytes | bytearray):
        return data.decode("utf-8")

    return read(data.read())  # pyright: ignore


def _ensure_mapping(data: Any) -> dict[str, Any]:
    if isinstance(data, dict):
        return data

    raise TypeError(f"Invalid data type: {type(data)}")


@dataclass(slots=True, frozen=True)
class json(ConversionFunc[ReadableType, dict[str, Any]]):
    """Reads a json document into a dict"""

    def __call__(self, source: ReadableType) -> dict[str, Any]:
        return _ensure_mapping(orjson.loads(read(source)))


@dataclass(slots=True, frozen=True)
class toml(ConversionFunc[ReadableType, dict[str, Any]]):
    """Reads a toml document into a dict"""

    def __call__(self, source: ReadableType) -> dict[str, Any]:
        return rtoml.loads(read(source))


@dataclass(slots=True, frozen=True)
class yaml(ConversionFunc[ReadableType, dict[str, Any]]):
    """Reads a single yaml document into a dict"""

    def __call__(self, source: ReadableType) -> dict[str, Any]:
        return _ensure_mapping(yamllib.safe_load(source))


DocumentReader = Callable[[AnyIO], Mapping[str, Any]]

readers: dict[str, DocumentReader] = {
    ".json": json(),
    ".toml": toml(),
    ".yaml": yaml(),
    ".yml": yaml(),
}


def from_dataset(dataset: SerializedDataset) -> Graph:
    graph = Graph(dataset.vertices)
    graph.name = dataset.name
    graph.description = dataset.description

    for edge in dataset.edges:
        graph.add_edge(edge.source, edge.destination, edge.weight)

    return graph


def from_document(data: Mapping[str, Any]) -> list[Graph]:
    """Builds graphs from any of the supported document shapes.

    Args:
        data: Parsed document.

    Returns:
        The graphs in document order.

    Examples:
        >>> graphs = from_document({"datasets": [{"vertices": 2, "edges": [{"source": 0, "destination": 1, "weight": 4}]}]})
        >>> graphs[0].name, graphs[0].is_connected()
        ('Unnamed', True)
        >>> from_document({"nodes": ["A"], "edges": []})[0].name
        'Graph -1'
    """
    if "graphs" in data:
        graphs = [Graph.load(g) for g in SerializedGraphs.model_validate(data).graphs]
    elif "datasets" in data:
        graphs = [
            from_dataset(dataset)
            for dataset in SerializedDatasets.model_validate(data).datasets
        ]
    else:
        graphs = [Graph.load(SerializedGraph.model_validate(data))]

    logger.debug(f"Loaded {len(graphs)} graph(s)")

    return graphs


def document(path: FilePath, reader: DocumentReader | None = None) -> Mapping[str, Any]:
    """Reads a file into a document mapping, choosing the reader by suffix."""
    if isinstance(path, str):
        path = Path(path)

    if reader is None and path.suffix not in readers:
        raise ValueError(f"Unsupported file type: {path.suffix}")

    if reader is None:
        reader = readers[path.suffix]

    with path.open("rb") as fp:
        return reader(fp)


def file(path: FilePath, reader: DocumentReader | None = None) -> list[Graph]:
    """Loads all graphs contained in a file.

    Args:
        path: Path of the file, one of json, toml, yaml or yml.
        reader: Reader to use instead of the suffix based one.

    Examples:
        >>> graphs = file("./data/graphs.json")
        >>> [g.graph_id for g in graphs]
        [1, 2, 3]
    """
    return from_document(document(path, reader))


def directory(path: FilePath, pattern: str | None = None) -> dict[str, list[Graph]]:
    """Loads the graph files of a directory, keyed by file stem.

    Args:
        path: Path of the directory.
        pattern: Relative pattern for the files.

    Examples:
        >>> result = directory("./data", "*.json")
        >>> "legacy" in result
        True
    """
    result: dict[str, list[Graph]] = {}

    if isinstance(path, str):
        path = Path(path)

    for elem in sorted(path.glob(pattern or "*")):
        if elem.is_file() and elem.suffix in readers:
            result[elem.stem] = file(elem)

    return result


def path(path: FilePath, pattern: str | None = None) -> list[Graph]:
    """Loads graphs from a file or from all graph files of a directory."""
    if isinstance(path, str):
        path = Path(path)

    if path.is_file():
        return file(path)
    elif path.is_dir():
        return [g for graphs in directory(path, pattern).values() for g in graphs]

    raise FileNotFoundError(path)


def _format_error(e: ValidationError) -> str:
    error = e.errors()[0]
    location = ".".join(str(item) for item in error["loc"])

    return f"{location}: {error['msg']}" if location else error["msg"]


def validate(data: Any) -> bool:
    """Checks that a document carries the fields required by its shape.

    Problems are logged, not raised.

    Examples:
        >>> validate({"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "weight": 1}]})
        True
        >>> validate({"graphs": [{"nodes": ["A"]}]})
        False
    """
    if not isinstance(data, Mapping):
        logger.error(f"Invalid graph document: expected an object, got {type(data)}")
        return False

    try:
        if "graphs" in data:
            SerializedGraphs.model_validate(data)
        elif "datasets" in data:
            SerializedDatasets.model_validate(data)
        else:
            SerializedGraph.model_validate(data)

    except ValidationError as e:
        logger.error(f"Invalid graph document: {_format_error(e)}")
        return False

    return True


def validate_file(path: FilePath) -> bool:
    try:
        data = document(path)
    except (OSError, ValueError, TypeError, yamllib.YAMLError) as e:
        logger.error(f"Invalid graph document {path}: {e}")
        return False

    return validate(data)

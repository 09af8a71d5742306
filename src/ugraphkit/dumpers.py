from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson
import rtoml
import yaml as yamllib

from .constants import SUMMARY_WIDTH
from .helpers import yes_no
from .model.graph import Graph, to_dict
from .typing import ConversionFunc, FilePath

__all__ = [
    "file",
    "json",
    "summary",
    "to_document",
    "toml",
    "writers",
    "yaml",
]


def to_document(graphs: Iterable[Graph]) -> dict[str, Any]:
    """Wraps graphs into the multi graph document.

    Examples:
        >>> g = Graph.from_labels(["A", "B"], name="pair")
        >>> _ = g.add_edge("A", "B", 1)
        >>> to_document([g])
        {'graphs': [{'name': 'pair', 'nodes': ['A', 'B'], 'edges': [{'from': 'A', 'to': 'B', 'weight': 1}]}]}
    """
    return {"graphs": [to_dict(g) for g in graphs]}


@dataclass(slots=True, frozen=True)
class json(ConversionFunc[Mapping[str, Any], str]):
    """Writes a document to json."""

    indent: bool = True

    def __call__(self, obj: Mapping[str, Any]) -> str:
        return orjson.dumps(
            obj, option=orjson.OPT_INDENT_2 if self.indent else 0
        ).decode()


@dataclass(slots=True, frozen=True)
class toml(ConversionFunc[Mapping[str, Any], str]):
    """Writes a document to toml."""

    def __call__(self, obj: Mapping[str, Any]) -> str:
        return rtoml.dumps(obj)


@dataclass(slots=True, frozen=True)
class yaml(ConversionFunc[Mapping[str, Any], str]):
    """Writes a document to yaml."""

    def __call__(self, obj: Mapping[str, Any]) -> str:
        return yamllib.safe_dump(obj, sort_keys=False)


writers: dict[str, Callable[[Mapping[str, Any]], str]] = {
    ".json": json(),
    ".toml": toml(),
    ".yaml": yaml(),
    ".yml": yaml(),
}


def file(path: FilePath, graphs: Iterable[Graph]) -> None:
    """Writes graphs as a multi graph document, choosing the format by suffix."""
    if isinstance(path, str):
        path = Path(path)

    if path.suffix not in writers:
        raise ValueError(f"Unsupported file type: {path.suffix}")

    with path.open("w") as fp:
        fp.write(writers[path.suffix](to_document(graphs)))


def summary(graphs: Iterable[Graph], title: str | None = None) -> str:
    graphs = list(graphs)
    rule = "=" * SUMMARY_WIDTH
    lines = [rule]

    if title is not None:
        lines.append(f"GRAPH SUMMARY: {title}")
        lines.append(rule)

    lines.append(f"Total graphs: {len(graphs)}")
    lines.append("")

    for g in graphs:
        lines.append(f"[ID: {g.graph_id}] {g.name}")
        lines.append(f"    Nodes: [{', '.join(g.node_names)}]")
        lines.append(
            f"    Vertices: {g.vertex_count}, Edges: {g.edge_count}, "
            f"Connected: {yes_no(g.is_connected())}"
        )

    lines.append(rule)

    return "\n".join(lines)

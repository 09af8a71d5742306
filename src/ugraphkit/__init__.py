"""
Undirected weighted graphs with named vertices, connectivity queries and
loaders for JSON, TOML and YAML graph documents.

.. include:: ../../README.md
   :start-after: <!-- PDOC_START -->

"""

import logging

from . import (
    constants,
    dumpers,
    helpers,
    loaders,
    model,
    typing,
)
from .model import Edge, Graph, GraphError

__all__ = [
    "constants",
    "dumpers",
    "helpers",
    "loaders",
    "model",
    "typing",
    "Edge",
    "Graph",
    "GraphError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from pathlib import Path
from typing import BinaryIO, Protocol, TextIO, TypeAlias, TypeVar

__all__ = [
    "AnyIO",
    "ConversionFunc",
    "FilePath",
    "ReadableType",
    "Triple",
    "Vertex",
]

FilePath: TypeAlias = str | Path
AnyIO: TypeAlias = TextIO | BinaryIO
ReadableType: TypeAlias = str | bytes | TextIO | BinaryIO
Vertex: TypeAlias = int | str
Triple: TypeAlias = tuple[Vertex, Vertex, int]


U = TypeVar("U", contravariant=True)
V = TypeVar("V", covariant=True)


class ConversionFunc(Protocol[U, V]):
    """Converts a single value from type U to type V."""

    def __call__(
        self,
        batch: U,
        /,
    ) -> V: ...

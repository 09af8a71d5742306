import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Literal

__all__ = [
    "get_logger",
    "optional_dependencies",
    "yes_no",
]


@contextmanager
def optional_dependencies(
    error_handling: Literal["ignore", "warn", "raise"] = "ignore",
    extras_name: str | None = None,
) -> Generator[None, Any, None]:
    try:
        yield None
    except (ImportError, ModuleNotFoundError) as e:
        match error_handling:
            case "raise":
                if extras_name is not None:
                    print(f"Please install `ugraphkit[{extras_name}]`")

                raise e
            case "warn":
                print(f"Missing optional dependency: `{e.name}`")

                if extras_name is not None:
                    print(f"Please install `ugraphkit[{extras_name}]`")
            case "ignore":
                pass


def get_logger(obj: Any) -> logging.Logger:
    """Return the logger for a module name, a class or an instance.

    Examples:
        >>> get_logger("ugraphkit.loaders").name
        'ugraphkit.loaders'
        >>> from ugraphkit.model.graph import Graph
        >>> get_logger(Graph(1)).name
        'ugraphkit.model.graph.Graph'
    """
    if isinstance(obj, str):
        return logging.getLogger(obj)

    if hasattr(obj, "__self__"):
        obj = obj.__self__

    if not isinstance(obj, type):
        obj = obj.__class__

    name = obj.__module__

    if not name.endswith(obj.__qualname__):
        name += f".{obj.__qualname__}"

    return logging.getLogger(name)


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"

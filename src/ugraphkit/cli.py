import logging
from pathlib import Path
from typing import Annotated

import ugraphkit
from ugraphkit.constants import LOG_LEVEL
from ugraphkit.helpers import yes_no

with ugraphkit.helpers.optional_dependencies("raise", "cli"):
    import typer
    from rich import print
    from rich.markup import escape


__all__ = ["app"]

app = typer.Typer(pretty_exceptions_enable=False)


@app.callback()
def app_callback(
    log_level: Annotated[str, typer.Option(help="Logging level")] = LOG_LEVEL,
) -> None:
    logging.basicConfig(level=log_level.upper())


@app.command()
def summary(path: Path, pattern: str | None = None) -> None:
    graphs = ugraphkit.loaders.path(path, pattern)
    print(escape(ugraphkit.dumpers.summary(graphs, str(path))))


@app.command()
def validate(path: Path) -> None:
    if not ugraphkit.loaders.validate_file(path):
        print(f"Structure: invalid ({escape(str(path))})")
        raise typer.Exit(code=1)

    print("Structure: valid")

    try:
        graphs = ugraphkit.loaders.file(path)
    except ugraphkit.model.GraphError as e:
        print(f"Graph: invalid ({escape(str(e))})")
        raise typer.Exit(code=1)

    results = [(g, g.validate()) for g in graphs]

    for g, valid in results:
        print(f"{escape(str(g.name))}: {'ok' if valid else 'invalid'}")

    if not all(valid for _, valid in results):
        raise typer.Exit(code=1)


@app.command()
def components(path: Path, pattern: str | None = None) -> None:
    for g in ugraphkit.loaders.path(path, pattern):
        print(
            f"{escape(str(g.name))}: {g.count_components()} component(s), "
            f"connected: {yes_no(g.is_connected())}"
        )


@app.command()
def convert(path: Path, output_path: Path, pattern: str | None = None) -> None:
    graphs = ugraphkit.loaders.path(path, pattern)
    ugraphkit.dumpers.file(output_path, graphs)
    print(f"Wrote {len(graphs)} graph(s) to {escape(str(output_path))}")


if __name__ == "__main__":
    app()

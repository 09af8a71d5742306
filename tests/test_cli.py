import pytest

import ugraphkit

typer_testing = pytest.importorskip("typer.testing")

from ugraphkit.cli import app  # noqa: E402

runner = typer_testing.CliRunner()


def test_summary(data_dir):
    result = runner.invoke(app, ["summary", str(data_dir / "graphs.json")])

    assert result.exit_code == 0
    assert "Total graphs: 3" in result.stdout
    assert "[ID: 1] Graph 1" in result.stdout


def test_validate(data_dir):
    result = runner.invoke(app, ["validate", str(data_dir / "legacy.json")])

    assert result.exit_code == 0
    assert "Structure: valid" in result.stdout
    assert "Path: ok" in result.stdout


def test_validate_invalid_structure(tmp_path):
    target = tmp_path / "broken.json"
    target.write_text('{"nodes": ["A"]}')

    result = runner.invoke(app, ["validate", str(target)])

    assert result.exit_code == 1
    assert "Structure: invalid" in result.stdout


def test_validate_invalid_graph(tmp_path):
    target = tmp_path / "loop.json"
    target.write_text(
        '{"nodes": ["A"], "edges": [{"from": "A", "to": "A", "weight": 1}]}'
    )

    result = runner.invoke(app, ["validate", str(target)])

    assert result.exit_code == 1
    assert "Graph: invalid" in result.stdout


def test_components(data_dir):
    result = runner.invoke(app, ["components", str(data_dir / "graphs.json")])

    assert result.exit_code == 0
    assert "Graph 2: 3 component(s), connected: No" in result.stdout


def test_convert(data_dir, tmp_path):
    target = tmp_path / "converted.yaml"
    result = runner.invoke(
        app,
        ["--log-level", "debug", "convert", str(data_dir / "legacy.json"), str(target)],
    )

    assert result.exit_code == 0
    assert [g.name for g in ugraphkit.loaders.file(target)] == ["Path", "Unnamed"]

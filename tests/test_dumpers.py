import pytest

import ugraphkit


@pytest.mark.parametrize("suffix", [".json", ".toml", ".yaml", ".yml"])
def test_file_round_trip(sample_graphs, tmp_path, suffix):
    """Test that written documents load back into equivalent graphs."""
    target = tmp_path / f"graphs{suffix}"
    ugraphkit.dumpers.file(target, sample_graphs)
    loaded = ugraphkit.loaders.file(target)

    assert [g.graph_id for g in loaded] == [1, 2, 3]
    assert [g.node_names for g in loaded] == [g.node_names for g in sample_graphs]
    assert [g.edges for g in loaded] == [g.edges for g in sample_graphs]
    assert [g.count_components() for g in loaded] == [1, 3, 2]


def test_legacy_conversion(data_dir):
    """Test that legacy datasets are written in the named node shape."""
    graphs = ugraphkit.loaders.file(data_dir / "legacy.json")
    document = ugraphkit.dumpers.to_document(graphs)

    assert document["graphs"][0] == {
        "name": "Path",
        "description": "Simple path over four vertices",
        "nodes": ["0", "1", "2", "3"],
        "edges": [
            {"from": "0", "to": "1", "weight": 5},
            {"from": "1", "to": "2", "weight": 3},
            {"from": "2", "to": "3", "weight": 0},
        ],
    }
    assert ugraphkit.loaders.validate(document)
    assert ugraphkit.loaders.from_document(document)[0].name == "Path"


def test_json_writer():
    document = {"graphs": []}

    assert ugraphkit.dumpers.json(indent=False)(document) == '{"graphs":[]}'
    assert ugraphkit.dumpers.json()(document) == '{\n  "graphs": []\n}'


def test_unsupported_suffix(sample_graphs, tmp_path):
    with pytest.raises(ValueError, match="Unsupported file type"):
        ugraphkit.dumpers.file(tmp_path / "graphs.xml", sample_graphs)


def test_summary(sample_graphs):
    text = ugraphkit.dumpers.summary(sample_graphs, "graphs.json")
    lines = text.splitlines()

    assert lines[0] == "=" * 60
    assert lines[1] == "GRAPH SUMMARY: graphs.json"
    assert "Total graphs: 3" in lines
    assert "[ID: 2] Graph 2" in lines
    assert "    Nodes: [A, B, C, D, E]" in lines
    assert "    Vertices: 5, Edges: 2, Connected: No" in lines
    assert "    Vertices: 3, Edges: 3, Connected: Yes" in lines
    assert lines[-1] == "=" * 60


def test_summary_without_title():
    text = ugraphkit.dumpers.summary([ugraphkit.Graph(1)])

    assert text.splitlines()[1] == "Total graphs: 1"
    assert "[ID: -1] None" in text

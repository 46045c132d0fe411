import pytest

from sheetcalc.dependencies import build_dependency_graph, dependents, find_cycles


def test_graph_edges_precedent_to_dependent(make_grid):
    G = build_dependency_graph(make_grid("1,A1 2,A1 B1"))
    assert set(G.nodes) == {"A1", "B1", "C1"}
    assert set(G.edges) == {("A1", "B1"), ("A1", "C1"), ("B1", "C1")}
    assert G.nodes["C1"]["text"] == "A1 B1"


def test_out_of_bounds_refs_are_skipped(make_grid):
    G = build_dependency_graph(make_grid("Z9,1"))
    assert list(G.edges) == []


def test_dependents_transitive(make_grid):
    grid = make_grid("1,A1,B1", "C1,7,A2")
    assert dependents(grid, "A1") == ["B1", "C1", "A2", "C2"]
    assert dependents(grid, "B2") == []


def test_dependents_unknown_cell(make_grid):
    with pytest.raises(KeyError):
        dependents(make_grid("1,2"), "C1")


def test_find_cycles(make_grid):
    grid = make_grid("B1,A1,C1", "1,2,3")
    assert find_cycles(grid) == [["A1", "B1"], ["C1"]]


def test_no_cycles(make_grid):
    assert find_cycles(make_grid("1,A1", "B1,A2")) == []


def test_column_past_zzz_is_skipped(make_grid):
    G = build_dependency_graph(make_grid("1,ZZZZ9"))
    assert set(G.nodes) == {"A1", "B1"}
    assert list(G.edges) == []

# dependencies.py

import networkx as nx

from .grid import Grid
from .reference import coordinate, is_reference, resolve


def build_dependency_graph(grid: Grid) -> nx.DiGraph:
    """
    Directed graph over the grid's cells where edges are PRECEDENT -> DEPENDENT.
    Node IDs are coordinates like 'B2'. References outside the grid are skipped.
    """
    G = nx.DiGraph()
    for row, col in grid.positions():
        G.add_node(coordinate(row, col), text=grid[row, col])

    for row, col in grid.positions():
        dst = coordinate(row, col)
        for token in grid[row, col].split(" "):
            if not is_reference(token):
                continue
            r, c = resolve(token)
            if grid.contains(r, c):
                G.add_edge(coordinate(r, c), dst)
    return G


def _row_major(refs):
    return sorted(refs, key=lambda ref: resolve(ref))


def dependents(grid: Grid, ref: str) -> list[str]:
    """Every cell whose value (directly or transitively) depends on `ref`."""
    G = build_dependency_graph(grid)
    if ref not in G:
        raise KeyError(f"{ref} is not a cell of this grid")
    return _row_major(nx.descendants(G, ref))


def find_cycles(grid: Grid) -> list[list[str]]:
    """Reference cycles, each as a row-major sorted list of coordinates."""
    G = build_dependency_graph(grid)
    cycles = [_row_major(cycle) for cycle in nx.simple_cycles(G)]
    return sorted(cycles, key=lambda cycle: [resolve(ref) for ref in cycle])

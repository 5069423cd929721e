import sys
import logging
from pathlib import Path
from string import ascii_uppercase

import pytest

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Add project root to import path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from weightgraph import pyweightgraph, pyvertex, pyedge  # noqa: E402


def build_graph(vertices, edges):
    graph = pyweightgraph()
    for v in vertices:
        graph.add_vertex(v)
    for e in edges:
        graph.add_edge(e)
    return graph


@pytest.fixture
def abcd():
    return [pyvertex(1, "A"), pyvertex(2, "B"), pyvertex(3, "C"), pyvertex(4, "D")]


@pytest.fixture
def path_graph(abcd):
    """A-B(5), B-C(7), A-D(9)."""
    a, b, c, d = abcd
    return build_graph(abcd, [pyedge(a, b, 5), pyedge(b, c, 7), pyedge(a, d, 9)])


@pytest.fixture
def split_graph(abcd):
    """Two components: A-B(5) and C-D(7)."""
    a, b, c, d = abcd
    return build_graph(abcd, [pyedge(a, b, 5), pyedge(c, d, 7)])


@pytest.fixture
def alphabet():
    return {letter: pyvertex(i, letter) for i, letter in enumerate(ascii_uppercase)}


@pytest.fixture
def alphabet_edges(alphabet):
    spec = [
        ("A", "P", 6), ("A", "B", 3), ("A", "F", 9), ("B", "D", 4), ("B", "C", 5),
        ("D", "E", 7), ("D", "V", 15), ("F", "W", 2), ("G", "H", 43), ("H", "I", 8),
        ("J", "W", 1), ("J", "K", 10), ("K", "L", 11), ("L", "M", 13), ("M", "N", 14),
        ("N", "O", 16), ("N", "K", 19), ("O", "X", 18), ("P", "Q", 22), ("Q", "R", 23),
        ("R", "S", 24), ("R", "X", 25), ("S", "U", 26), ("T", "U", 27), ("U", "V", 28),
        ("W", "H", 29), ("X", "Y", 30), ("X", "W", 42), ("Y", "Z", 40),
    ]
    return [pyedge(alphabet[s], alphabet[t], w) for s, t, w in spec]


@pytest.fixture
def alphabet_graph(alphabet, alphabet_edges):
    """26 connected vertices, 29 edges with distinct lengths."""
    return build_graph(list(alphabet.values()), alphabet_edges)

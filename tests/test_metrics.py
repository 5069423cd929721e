import numpy as np

from weightgraph import pyweightgraph, pyvertex, pyedge


def test_diameter_of_path(path_graph):
    assert path_graph.diameter() == 21


def test_diameter_with_shortcuts(abcd):
    a, b, c, d = abcd
    graph = pyweightgraph(abcd, [
        pyedge(a, b, 1), pyedge(b, c, 2), pyedge(a, c, 4), pyedge(b, d, 5), pyedge(c, d, 6),
    ])
    assert graph.path_length(graph.shortest_path(a, c)) == 3
    assert graph.diameter() == 6


def test_diameter_ignores_unreachable_pairs(split_graph):
    assert split_graph.diameter() == 7


def test_diameter_of_larger_graph(alphabet_graph):
    assert alphabet_graph.diameter() == 184


def test_diameter_of_trivial_graphs():
    assert pyweightgraph().diameter() == 0
    assert pyweightgraph([pyvertex(1, "A")]).diameter() == 0
    assert pyweightgraph([pyvertex(1, "A"), pyvertex(2, "B")]).diameter() == 0


def test_distance_matrix(split_graph, abcd):
    vertices, distances = split_graph.distance_matrix()
    assert vertices == abcd
    assert distances.shape == (4, 4)
    assert np.all(np.diag(distances) == 0)
    assert distances[0, 1] == 5
    assert distances[2, 3] == 7
    assert np.isinf(distances[0, 2])
    assert np.array_equal(distances, distances.T)


def test_eccentricity(path_graph, abcd):
    a, b, c, d = abcd
    assert path_graph.eccentricity(a) == 12
    assert path_graph.eccentricity(c) == 21
    assert path_graph.eccentricity(pyvertex(100, "fake")) == 0
    assert path_graph.diameter() == max(path_graph.eccentricity(v) for v in abcd)


def test_diameter_keeps_integer_precision(abcd):
    a, b, c, _ = abcd
    heavy = 2**53 + 1
    graph = pyweightgraph([a, b, c], [pyedge(a, b, heavy), pyedge(b, c, 2)])
    assert graph.diameter() == heavy + 2
    assert graph.eccentricity(b) == heavy
    assert graph.diameter() == graph.shortest_path_length(a, c)


def test_diameter_agrees_with_path_length_for_parallel_edges(abcd):
    a, b, _, _ = abcd
    graph = pyweightgraph([a, b], [pyedge(a, b, 5), pyedge(a, b, 3)])
    assert graph.shortest_path_length(a, b) == 5
    assert graph.eccentricity(a) == 5
    assert graph.diameter() == graph.shortest_path_length(a, b)

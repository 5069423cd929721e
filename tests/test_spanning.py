from weightgraph import pyweightgraph, pyvertex, pyedge


def test_triangle_drops_heaviest_edge(abcd):
    a, b, c, _ = abcd
    graph = pyweightgraph([a, b, c], [pyedge(a, b, 1), pyedge(b, c, 1), pyedge(a, c, 3)])
    assert set(graph.minimum_spanning_tree()) == {pyedge(a, b, 1), pyedge(b, c, 1)}


def test_edges_come_out_in_ascending_length(abcd):
    a, b, c, d = abcd
    e1, e2, e3 = pyedge(a, b, 1), pyedge(a, d, 2), pyedge(a, c, 3)
    graph = pyweightgraph(abcd, [e3, pyedge(c, d, 15), e1, pyedge(b, d, 16), e2])
    assert graph.minimum_spanning_tree() == [e1, e2, e3]
    assert graph.minimum_spanning_tree_weight() == 6


def test_equal_lengths_keep_insertion_order():
    v = [pyvertex(i, str(i)) for i in range(6)]
    e = [
        pyedge(v[0], v[1], 1), pyedge(v[0], v[2], 1), pyedge(v[2], v[3], 1),
        pyedge(v[2], v[4], 1), pyedge(v[2], v[5], 1), pyedge(v[1], v[3], 10),
        pyedge(v[0], v[4], 10), pyedge(v[4], v[5], 10),
    ]
    graph = pyweightgraph(v, e)
    assert graph.minimum_spanning_tree() == e[:5]


def test_disconnected_graph_gives_forest(split_graph, abcd):
    a, b, c, d = abcd
    mst = split_graph.minimum_spanning_tree()
    assert len(mst) == 2
    assert set(mst) == {pyedge(a, b, 5), pyedge(c, d, 7)}


def test_empty_and_edgeless_graphs():
    assert pyweightgraph().minimum_spanning_tree() == []
    assert pyweightgraph([pyvertex(1, "A"), pyvertex(2, "B")]).minimum_spanning_tree() == []


def test_larger_graph(alphabet_graph, alphabet_edges):
    excluded = {alphabet_edges[i] for i in (16, 21, 24, 27)}
    expected = set(alphabet_edges) - excluded
    mst = alphabet_graph.minimum_spanning_tree()
    assert len(mst) == alphabet_graph.get_vertex_count() - 1
    assert set(mst) == expected


def test_tree_follows_mutations(path_graph, abcd):
    a, b, c, d = abcd
    path_graph.add_edge(pyedge(c, d, 1))
    assert pyedge(a, d, 9) not in path_graph.minimum_spanning_tree()
    path_graph.remove_vertex(c)
    assert set(path_graph.minimum_spanning_tree()) == {pyedge(a, b, 5), pyedge(a, d, 9)}

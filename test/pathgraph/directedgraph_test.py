import io
import unittest

from pathgraph.directedgraph import DirectedGraph
from pathgraph.graph import DuplicateVertexError, Edge, Vertex, VertexNotFoundError

class DirectedGraphTest(unittest.TestCase):
    def test_add_vertex_and_vertex_count(self):
        g = DirectedGraph()
        a = g.add_vertex("a")
        self.assertEqual(g.vertex_count(), 1)
        self.assertIs(g.get_vertex("a"), a)
        self.assertEqual((a.x, a.y), (0, 0))

    def test_add_vertex_with_coordinates(self):
        g = DirectedGraph()
        g.add_vertex("a", 3, 4)
        self.assertEqual((g.get_vertex("a").x, g.get_vertex("a").y), (3, 4))

    def test_add_vertex_object(self):
        g = DirectedGraph()
        v = Vertex("b", 1, 2)
        self.assertIs(g.add_vertex(v), v)
        self.assertTrue(g.has_vertex("b"))

    def test_constructor_vertices(self):
        g = DirectedGraph(vertices=[Vertex(0), Vertex(1)])
        self.assertEqual(g.vertex_count(), 2)

    def test_duplicate_vertex_raises_and_leaves_graph_unchanged(self):
        g = DirectedGraph()
        original = g.add_vertex("a", 1, 1)
        with self.assertRaises(DuplicateVertexError):
            g.add_vertex("a", 5, 5)
        with self.assertRaises(ValueError):
            g.add_vertex(Vertex("a"))
        self.assertEqual(g.vertex_count(), 1)
        self.assertIs(g.get_vertex("a"), original)
        self.assertEqual((original.x, original.y), (1, 1))

    def test_get_unknown_vertex_raises(self):
        g = DirectedGraph()
        with self.assertRaises(VertexNotFoundError) as ctx:
            g.get_vertex("missing")
        self.assertEqual(ctx.exception.name, "missing")
        self.assertIsInstance(ctx.exception, LookupError)

    def test_add_edge_and_edge_count(self):
        g = DirectedGraph()
        g.add_vertex("a")
        g.add_vertex("b")
        e = g.add_edge("a", "b", 2.5)
        self.assertEqual(g.edge_count(), 1)
        self.assertEqual(g.get_vertex("a").get_edges(), [e])
        self.assertIs(e.source, g.get_vertex("a"))
        self.assertIs(e.target, g.get_vertex("b"))
        self.assertEqual(e.cost, 2.5)
        self.assertEqual(e.distance, 0.0)
        self.assertEqual(g.get_vertex("b").get_edges(), [])

    def test_add_edge_default_cost(self):
        g = DirectedGraph()
        e = g.add_edge("a", "b")
        self.assertEqual(e.cost, 1.0)

    def test_add_edge_creates_missing_vertices(self):
        g = DirectedGraph()
        g.add_edge("u", "w", 4.0)
        self.assertEqual(g.vertex_count(), 2)
        for name in ("u", "w"):
            v = g.get_vertex(name)
            self.assertEqual((v.x, v.y), (0, 0))

    def test_add_edge_keeps_existing_vertex(self):
        g = DirectedGraph()
        u = g.add_vertex("u", 7, 8)
        g.add_edge("u", "w")
        self.assertIs(g.get_vertex("u"), u)
        self.assertEqual((u.x, u.y), (7, 8))

    def test_parallel_edges_are_permitted(self):
        g = DirectedGraph()
        e1 = g.add_edge("a", "b", 1.0)
        e2 = g.add_edge("a", "b", 1.0)
        self.assertEqual(g.edge_count(), 2)
        self.assertIsNot(e1, e2)
        self.assertNotEqual(e1, e2)

    def test_add_undirected_edge(self):
        g = DirectedGraph()
        forward, backward = g.add_undirected_edge("u", "v", 3.0)
        self.assertEqual(g.edge_count(), 2)
        self.assertEqual((forward.source.name, forward.target.name), ("u", "v"))
        self.assertEqual((backward.source.name, backward.target.name), ("v", "u"))
        self.assertEqual(forward.cost, 3.0)
        self.assertEqual(backward.cost, 3.0)

    def test_get_vertices_is_a_snapshot(self):
        g = DirectedGraph()
        g.add_edge("a", "b")
        vertices = g.get_vertices()
        self.assertEqual({v.name for v in vertices}, {"a", "b"})
        with self.assertRaises((TypeError, AttributeError)):
            vertices.append(Vertex("c"))
        self.assertEqual(g.vertex_count(), 2)

    def test_get_edges(self):
        g = DirectedGraph()
        ab = g.add_edge("a", "b")
        bc = g.add_edge("b", "c")
        edges = g.get_edges()
        self.assertEqual(len(edges), 2)
        self.assertIn(ab, edges)
        self.assertIn(bc, edges)

    def test_contains(self):
        g = DirectedGraph()
        g.add_vertex("a")
        self.assertIn("a", g)
        self.assertNotIn("b", g)

    def test_str_lists_successors(self):
        g = DirectedGraph()
        g.add_edge("a", "b")
        g.add_edge("a", "c")
        lines = str(g).splitlines()
        self.assertIn("a -> [ b c ]", lines)
        self.assertIn("b -> [ ]", lines)
        self.assertIn("c -> [ ]", lines)

    def test_print_adjacency_list(self):
        g = DirectedGraph()
        g.add_edge(1, 2)
        out = io.StringIO()
        g.print_adjacency_list(file=out)
        self.assertEqual(out.getvalue(), "1 -> [ 2 ]\n2 -> [ ]\n")

class VertexTest(unittest.TestCase):
    def test_equality_and_hash_use_name(self):
        a1, a2 = Vertex("a", 0, 0), Vertex("a", 5, 5)
        self.assertEqual(a1, a2)
        self.assertEqual(hash(a1), hash(a2))
        self.assertNotEqual(a1, Vertex("b"))

    def test_hash_is_stable_as_edges_are_added(self):
        g = DirectedGraph()
        a = g.add_vertex("a")
        seen = {a}
        g.add_edge("a", "b")
        self.assertIn(a, seen)

    def test_str_is_name(self):
        self.assertEqual(str(Vertex(42)), "42")

    def test_add_edge_from_other_vertex_raises(self):
        a, b = Vertex("a"), Vertex("b")
        with self.assertRaises(ValueError):
            a.add_edge(Edge(b, a))

    def test_edge_defaults(self):
        e = Edge(Vertex("a"), Vertex("b"))
        self.assertEqual(e.cost, 1.0)
        self.assertEqual(e.distance, 0.0)
        self.assertEqual(str(e), "a --[1.0]--> b")

class AddVertexObjectTest(unittest.TestCase):
    def test_vertex_with_edges_is_rejected(self):
        g = DirectedGraph()
        a = Vertex("a")
        a.add_edge(Edge(a, Vertex("z")))
        with self.assertRaises(ValueError):
            g.add_vertex(a)
        self.assertEqual(g.vertex_count(), 0)

    def test_constructor_rejects_vertex_with_edges(self):
        a, b = Vertex("a"), Vertex("b")
        a.add_edge(Edge(a, b))
        with self.assertRaises(ValueError):
            DirectedGraph(vertices=[b, a])

    def test_vertex_from_other_graph_with_edges_is_rejected(self):
        g1 = DirectedGraph()
        g1.add_edge("a", "b")
        g2 = DirectedGraph()
        with self.assertRaises(ValueError):
            g2.add_vertex(g1.get_vertex("a"))
        self.assertFalse(g2.has_vertex("a"))

    def test_vertex_without_edges_is_accepted(self):
        g = DirectedGraph()
        v = Vertex("a", 2, 3)
        self.assertIs(g.add_vertex(v), v)
        g.add_edge("a", "b")
        self.assertEqual(g.edge_count(), 1)

    def test_coordinates_with_vertex_raise(self):
        g = DirectedGraph()
        with self.assertRaises(TypeError):
            g.add_vertex(Vertex("a"), 3, 4)
        with self.assertRaises(TypeError):
            g.add_vertex(Vertex("a"), y=4)
        self.assertEqual(g.vertex_count(), 0)

    def test_name_with_one_coordinate(self):
        g = DirectedGraph()
        v = g.add_vertex("a", y=4)
        self.assertEqual((v.x, v.y), (0, 4))

if __name__ == "__main__":
    unittest.main()

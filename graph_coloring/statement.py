import json
from networkx.readwrite import json_graph
from graph import Graph
from utils import Color, is_valid_coloring

GRAPH_FILE = '3col-graph.json'
COLOR_FILE = '3col-coloring.json'


def build_graph() -> Graph:
    """
    3-colorable graph equivalent to the statement x + 1 = 2, given
    True = 1 and False = 0.
    """
    g = Graph()

    t = g.add_vertex()
    f = g.add_vertex()
    n = g.add_vertex()
    x = g.add_vertex()

    # The palette: true, false and neutral
    g.make_adjacent(t, f)
    g.make_adjacent(f, n)
    g.make_adjacent(n, t)

    g.color(t, Color.GREEN)
    g.color(f, Color.RED)
    g.color(n, Color.BLUE)

    # x can then only be colored true
    g.make_adjacent(f, x)
    g.make_adjacent(n, x)

    g.color(x, Color.GREEN)

    return g


def load_statement(graph_file: str = GRAPH_FILE, color_file: str = COLOR_FILE) -> Graph:
    with open(graph_file, 'r') as f:
        G = json_graph.adjacency_graph(json.load(f))
    with open(color_file, 'r') as f:
        coloring = json.load(f)
    if not is_valid_coloring(G, coloring):
        raise ValueError(f'{color_file} is not a valid coloring of {graph_file}')
    return Graph.from_networkx(G, [Color(c) for c in coloring])

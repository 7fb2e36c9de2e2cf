import random
import pytest

from graph import Graph
from statement import build_graph
from utils import Color, RandomSource

# Vertex indices of the canonical statement
T, F, N, X = 0, 1, 2, 3


@pytest.fixture
def rng():
    """Deterministic randomness so protocol runs are reproducible."""
    return RandomSource(random.Random(20240611))


@pytest.fixture
def statement():
    return build_graph()


@pytest.fixture
def path_graph():
    """0 - 1 - 2, colored RED, GREEN, RED."""
    g = Graph()
    for _ in range(3):
        g.add_vertex()
    g.make_adjacent(0, 1)
    g.make_adjacent(1, 2)
    g.color(0, Color.RED)
    g.color(1, Color.GREEN)
    g.color(2, Color.RED)
    return g

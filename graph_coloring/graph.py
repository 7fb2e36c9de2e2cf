"""
Labeled undirected graph carried through the rounds of the protocol.

The same topology is labeled with colors, then with full commitments and
finally with public (hash-only) commitments. Every transformation returns
a new graph with its own vertices; adjacency lists are copied in order.
"""

from typing import Generic, List, Optional, Tuple, TypeVar
import networkx as nx
from utils import Color, Commitment, RandomSource, commit, strip
from permutation import ColorPermutation

T = TypeVar('T')


class Vertex(Generic[T]):
    def __init__(self, contents: Optional[T] = None, adjacent: List[int] = None):
        self.contents = contents
        self.adjacent = [] if adjacent is None else list(adjacent)

    def relabel(self, contents) -> 'Vertex':
        return Vertex(contents, self.adjacent)


class Graph(Generic[T]):
    def __init__(self):
        self.vertices: List[Vertex[T]] = []

    def __len__(self) -> int:
        return len(self.vertices)

    def _has(self, v: int) -> bool:
        return 0 <= v < len(self.vertices)

    def add_vertex(self) -> int:
        self.vertices.append(Vertex())
        return len(self.vertices) - 1

    def make_adjacent(self, a: int, b: int):
        if self._has(a) and self._has(b) and a != b:
            if b not in self.vertices[a].adjacent:
                self.vertices[a].adjacent.append(b)
                self.vertices[b].adjacent.append(a)

    def color(self, v: int, label: T):
        if not self._has(v):
            raise IndexError(f'no vertex {v} in a graph of {len(self)} vertices')
        self.vertices[v].contents = label

    def colors_for(self, a: int, b: int) -> Optional[Tuple[T, T]]:
        """Labels of vertices a and b, or None if either is missing or unlabeled."""
        if not (self._has(a) and self._has(b)):
            return None
        label_a = self.vertices[a].contents
        label_b = self.vertices[b].contents
        if label_a is None or label_b is None:
            return None
        return label_a, label_b

    def get_adjacent(self, v: int) -> List[int]:
        if not self._has(v):
            return []
        return list(self.vertices[v].adjacent)

    def labels(self) -> List[Optional[T]]:
        return [vertex.contents for vertex in self.vertices]

    def edges(self) -> List[Tuple[int, int]]:
        return [(u, v) for u, vertex in enumerate(self.vertices)
                for v in vertex.adjacent if u < v]

    def map(self, f) -> 'Graph':
        """New graph with the same topology and every label replaced by f(label)."""
        g = Graph()
        g.vertices = [vertex.relabel(f(vertex.contents)) for vertex in self.vertices]
        return g

    def copy(self) -> 'Graph[T]':
        return self.map(lambda label: label)

    def commit(self, rng: RandomSource = None) -> 'Graph[Commitment]':
        rng = RandomSource() if rng is None else rng
        for v, label in enumerate(self.labels()):
            if not isinstance(label, Color):
                raise ValueError(f'vertex {v} has no color to commit to')
        return self.map(lambda color: commit(color, rng))

    def zk_commit(self) -> 'Graph':
        for v, label in enumerate(self.labels()):
            if not isinstance(label, Commitment):
                raise ValueError(f'vertex {v} holds no commitment')
        return self.map(strip)

    def random_permutation(self, rng: RandomSource = None) -> 'Graph[Color]':
        perm = ColorPermutation.new_random(rng)
        return self.permute(perm)

    def permute(self, perm: ColorPermutation) -> 'Graph[Color]':
        return self.map(lambda color: None if color is None else perm(color))

    def is_valid_coloring(self) -> bool:
        labels = self.labels()
        if any(not isinstance(c, Color) for c in labels):
            return False
        return all(labels[u] != labels[v] for u, v in self.edges())

    def to_networkx(self) -> nx.Graph:
        G = nx.empty_graph(len(self))
        G.add_edges_from(self.edges())
        return G

    @classmethod
    def from_networkx(cls, G: nx.Graph, labels: list = None) -> 'Graph':
        n = G.number_of_nodes()
        if sorted(G.nodes) != list(range(n)):
            raise ValueError('graph vertices must be numbered 0..n-1')
        g = cls()
        for _ in range(n):
            g.add_vertex()
        for u, v in G.edges:
            g.make_adjacent(u, v)
        if labels is not None:
            if len(labels) != n:
                raise ValueError(f'expected {n} labels, got {len(labels)}')
            for v, label in enumerate(labels):
                g.color(v, label)
        return g

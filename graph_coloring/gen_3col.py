import networkx as nx
from networkx.readwrite import json_graph
import json
import sys
from utils import RandomSource

N = 999
C = 10


def gen_3col(n: int, c: int = 10, rng: RandomSource = None) -> (nx.Graph, [int]):
    """
    Random graph on n vertices with a planted 3-coloring.

    Vertices are split into three equal color classes at random, and every
    pair from different classes becomes an edge with probability c / n.
    Vertices left without a neighbor are joined to a vertex of the next
    class, so every challenge finds an edge.
    """
    assert n % 3 == 0 and n > 0
    sr = RandomSource() if rng is None else rng
    t = n // 3
    G = nx.generators.empty_graph(n)
    perm = list(range(n))
    sr.shuffle(perm)
    p = c / n
    for k in range(2):
        for u in range(k * t, (k+1) * t):
            for v in range((k+1) * t, n):
                if sr.random() <= p:
                    G.add_edge(perm[u], perm[v])

    for u in range(n):
        if G.degree(perm[u]) == 0:
            k = (u // t + 1) % 3
            v = k * t + sr.randrange(t)
            G.add_edge(perm[u], perm[v])

    coloring = [0] * n
    for u in range(t, 2*t):
        coloring[perm[u]] = 1
    for u in range(2*t, n):
        coloring[perm[u]] = 2

    return G, coloring


def main(file):
    G, coloring = gen_3col(N, C)

    for (u, v) in G.edges():
        assert coloring[u] != coloring[v], (u, v)

    with open(f'{file}-graph.json', 'w') as f:
        json.dump(json_graph.adjacency_data(G), f)
    with open(f'{file}-coloring.json', 'w') as f:
        json.dump(coloring, f)
    print(f'[+] Wrote {file}-graph.json ({G.number_of_nodes()} nodes, {G.number_of_edges()} edges)')
    print(f'[+] Wrote {file}-coloring.json')


if __name__ == '__main__':
    if len(sys.argv) != 2:
        print(f'usage: {sys.argv[0]} <output-prefix>')
        exit(1)
    main(sys.argv[1])

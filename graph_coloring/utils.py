from dataclasses import dataclass, field
from enum import Enum
from hashlib import sha3_256
from secrets import SystemRandom
import networkx as nx

SECRET_LEN = 32


class Color(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2

    def tag(self) -> bytes:
        return self.value.to_bytes(1, 'big')


PALETTE = [Color.RED, Color.GREEN, Color.BLUE]


class RandomSource:
    """
    Every random choice of the protocol goes through here: commitment
    secrets, palette shuffles and challenge vertices.

    Without an explicit generator a SystemRandom is used, so each draw
    comes straight from the OS entropy pool. Tests pass a seeded
    random.Random instead.
    """

    def __init__(self, rng=None):
        self.rng = SystemRandom() if rng is None else rng

    def secret(self, n: int = SECRET_LEN) -> bytes:
        return self.rng.getrandbits(8 * n).to_bytes(n, 'big')

    def shuffle(self, items: list):
        self.rng.shuffle(items)

    def randrange(self, n: int) -> int:
        return self.rng.randrange(n)

    def random(self) -> float:
        return self.rng.random()


@dataclass(frozen=True)
class ZKCommitment:
    """Public view of a commitment: the hash only."""
    hash: bytes


@dataclass(frozen=True)
class Commitment:
    secret: bytes = field(repr=False)
    hash: bytes

    def strip(self) -> ZKCommitment:
        return ZKCommitment(self.hash)


def _digest(color: Color, secret: bytes) -> bytes:
    h = sha3_256(color.tag())
    h.update(secret)
    return h.digest()


def commit(color: Color, rng: RandomSource = None) -> Commitment:
    rng = RandomSource() if rng is None else rng
    r = rng.secret()
    return Commitment(secret=r, hash=_digest(color, r))


def strip(commitment: Commitment) -> ZKCommitment:
    return commitment.strip()


def matches(commitment, color: Color, secret: bytes) -> bool:
    """
    Check that (color, secret) opens the given commitment.

    Accepts either view of a commitment, only its hash is consulted.
    """
    c_prime = _digest(color, secret)
    return len(secret) == SECRET_LEN and c_prime == commitment.hash


def is_valid_coloring(G: nx.Graph, coloring: [int]) -> bool:
    n = G.number_of_nodes()
    if sorted(G.nodes) != list(range(n)):
        return False
    if len(coloring) != n:
        return False
    if any(c not in [0, 1, 2] for c in coloring):
        return False
    if any(coloring[u] == coloring[v] for u, v in G.edges):
        return False
    return True

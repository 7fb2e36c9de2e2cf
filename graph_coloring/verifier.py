#!/usr/bin/env python3
"""
Verifier for the 3-coloring zero-knowledge proof protocol.

Each round the verifier receives the public commitment graph, challenges one
edge and checks the prover's opening of its two endpoints. Every round that
passes raises the confidence; a single failed round rejects for good.
"""

from enum import Enum
from typing import Optional, Tuple
from graph import Graph
from utils import Color, RandomSource, matches

ACCEPTANCE_CONFIDENCE = 0.9999


class ProtocolError(Exception):
    """A party sent a message the protocol does not allow at this point."""


class Result(Enum):
    UNDECIDED = 'undecided'
    ACCEPTED = 'accepted'
    REJECTED = 'rejected'

    def __str__(self):
        return self.value


class Rejection(Enum):
    STRUCTURAL_VIOLATION = 'adjacent vertices revealed the same color'
    COMMITMENT_MISMATCH = 'opening does not match the commitment'


class Verifier:
    def __init__(self, rng: RandomSource = None):
        self.rng = rng
        self.graph_size = 0
        self.last_requested_vertices: Optional[Tuple[int, int]] = None
        self.last_commitment: Optional[Graph] = None
        self.confidence = 0.0
        self.result = Result.UNDECIDED
        self.reason: Optional[Rejection] = None
        self.rounds = 0

    @property
    def decided(self) -> bool:
        return self.result is not Result.UNDECIDED

    def choose_random_vertices(self, commitment: Graph) -> Optional[Tuple[int, int]]:
        """
        Challenge an edge of the public commitment graph.

        A vertex is drawn uniformly and paired with the first vertex of its
        adjacency list. Returns None once decided, or when the drawn vertex
        has no neighbors (the round is then simply lost).
        """
        if self.decided:
            return None
        if len(commitment) == 0:
            raise ValueError('cannot challenge an empty graph')

        rng = RandomSource() if self.rng is None else self.rng
        vertex = rng.randrange(len(commitment))
        adjacent = commitment.get_adjacent(vertex)
        if not adjacent:
            return None

        self.graph_size = len(commitment)
        self.last_commitment = commitment
        self.last_requested_vertices = (vertex, adjacent[0])
        print(f'[+] Verifier asked for vertices {self.last_requested_vertices}')
        return self.last_requested_vertices

    def verify_coloring(self, color_a: Color, secret_a: bytes,
                        color_b: Color, secret_b: bytes):
        """Check the prover's opening of the last challenged edge."""
        if self.decided:
            return
        if self.last_requested_vertices is None:
            raise ProtocolError('no outstanding challenge to answer')

        vertex_a, vertex_b = self.last_requested_vertices
        self.last_requested_vertices = None
        print(f'[+] Prover shared colors ({color_a.name}, {color_b.name})')

        # Adjacent colors in the graph cannot be equal
        if color_a == color_b:
            self.reject(Rejection.STRUCTURAL_VIOLATION)
            return

        pair = self.last_commitment.colors_for(vertex_a, vertex_b)
        if pair is None:
            raise ProtocolError(f'challenge {(vertex_a, vertex_b)} outside the committed graph')
        commitment_a, commitment_b = pair

        if not (matches(commitment_a, color_a, secret_a)
                and matches(commitment_b, color_b, secret_b)):
            self.reject(Rejection.COMMITMENT_MISMATCH)
            return

        self.increase_confidence()
        self.rounds += 1
        print(f'    ✓ Commitments verified, confidence {self.confidence:.6f}')

        if self.confidence > ACCEPTANCE_CONFIDENCE:
            self.accept()

    def reject(self, reason: Rejection):
        print(f'[!] Rejecting: {reason.value}')
        self.result = Result.REJECTED
        self.reason = reason
        self.confidence = 1.0

    def accept(self):
        self.result = Result.ACCEPTED

    def increase_confidence(self):
        self.confidence += (1.0 - self.confidence) / self.graph_size

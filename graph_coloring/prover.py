#!/usr/bin/env python3
"""
Honest prover and the driver running the interactive protocol.

Every round the prover permutes its coloring with a fresh random bijection,
commits to each permuted color with a fresh secret and sends only the hashes.
The verifier challenges one edge and the prover opens those two commitments.
"""

import sys
from graph import Graph
from statement import build_graph, load_statement
from messages import (encode, decode, commit_message, parse_commit,
                      challenge_message, parse_challenge, reveal_message, parse_reveal)
from utils import RandomSource
from verifier import ProtocolError, Result, Verifier


class Prover:
    def __init__(self, statement: Graph, rng: RandomSource = None):
        self.validate(statement)
        self.statement = statement
        self.rng = rng
        self.round = 0
        self.random_graph = None
        self.commitment = None

    def validate(self, statement: Graph):
        if not statement.is_valid_coloring():
            raise ValueError('the statement graph must carry a valid 3-coloring')

    def commit(self) -> Graph:
        """
        Start a new round and return the public commitment graph.

        The permuted coloring and the full commitments of the round stay
        with the prover until a challenge is opened.
        """
        self.round += 1
        self.random_graph = self.permute()
        self.commitment = self.random_graph.commit(self.rng)
        return self.commitment.zk_commit()

    def permute(self) -> Graph:
        return self.statement.random_permutation(self.rng)

    def open(self, u: int, v: int):
        """
        Open the commitments of u and v for the current round.

        Only one edge is opened per commitment: opening several edges, or
        two vertices that share no edge, would reveal the coloring.
        """
        if self.commitment is None:
            raise ProtocolError('no commitment to open')
        colors = self.random_graph.colors_for(u, v)
        commitments = self.commitment.colors_for(u, v)
        if colors is None or commitments is None:
            raise ProtocolError(f'challenge ({u}, {v}) is out of range')
        if v not in self.commitment.get_adjacent(u):
            raise ProtocolError(f'challenge ({u}, {v}) is not an edge')
        self.random_graph = self.commitment = None

        (color_u, color_v), (c_u, c_v) = colors, commitments
        return color_u, c_u.secret, color_v, c_v.secret


def run_protocol(prover: Prover, verifier: Verifier, max_rounds: int = None):
    """
    Run rounds until the verifier decides, or until max_rounds have passed.

    Without max_rounds a statement with an isolated vertex may never be
    decided, since challenging that vertex produces no edge.
    """
    rnd = 0
    start = prover.round
    while verifier.result is Result.UNDECIDED:
        if max_rounds is not None and rnd >= max_rounds:
            break
        rnd += 1
        print(f'[+] Round {rnd}')

        public = prover.commit()
        got, public = parse_commit(decode(encode(commit_message(prover.round, public))))
        if got != start + rnd:
            raise ProtocolError(f'round mismatch: expected {start + rnd}, got {got}')
        challenge = verifier.choose_random_vertices(public)
        if challenge is None:
            print('- No edge challenged, skipping round')
            continue

        u, v = parse_challenge(decode(encode(challenge_message(*challenge))))
        opening = prover.open(u, v)
        color_u, secret_u, color_v, secret_v = parse_reveal(decode(encode(reveal_message(*opening))))
        verifier.verify_coloring(color_u, secret_u, color_v, secret_v)

    return verifier.result, verifier.confidence


def main(argv):
    if len(argv) == 1:
        statement = build_graph()
    elif len(argv) == 3:
        statement = load_statement(argv[1], argv[2])
    else:
        print(f'usage: {argv[0]} [<graph.json> <coloring.json>]')
        exit(1)

    print('=' * 60)
    print('3-Coloring Zero-Knowledge Proof')
    print('=' * 60)
    print(f'[+] Graph has {len(statement)} nodes and {len(statement.edges())} edges')

    result, confidence = run_protocol(Prover(statement), Verifier())
    print(f'\nThe verifier deems the proof {result} and is {confidence * 100:.4f}% convinced.')


if __name__ == '__main__':
    main(sys.argv)

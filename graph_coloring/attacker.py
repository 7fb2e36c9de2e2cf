#!/usr/bin/env python3
"""
Cheating provers, used to check that the verifier catches them.

- EqualColorProver reveals the same color for both challenged vertices.
- WrongSecretProver reveals the true colors but tampers with a secret.
- InvalidColoringProver follows the protocol honestly with a coloring that
  is not valid, and is caught whenever a monochromatic edge is challenged.
"""

from graph import Graph
from prover import Prover, run_protocol
from statement import build_graph
from utils import Color
from verifier import Verifier


class EqualColorProver(Prover):
    def open(self, u: int, v: int):
        color_u, secret_u, _, secret_v = super().open(u, v)
        return color_u, secret_u, color_u, secret_v


class WrongSecretProver(Prover):
    def open(self, u: int, v: int):
        color_u, secret_u, color_v, secret_v = super().open(u, v)
        tampered = bytes([secret_u[0] ^ 0x01]) + secret_u[1:]
        return color_u, tampered, color_v, secret_v


class InvalidColoringProver(Prover):
    def validate(self, statement: Graph):
        if any(label is None for label in statement.labels()):
            raise ValueError('every vertex needs a color to commit to')


def main():
    print('=' * 60)
    print('Cheating Provers - 3-Coloring Zero-Knowledge Proof')
    print('=' * 60)

    bad = build_graph()
    bad.color(3, Color.RED)
    cheaters = [EqualColorProver(build_graph()),
                WrongSecretProver(build_graph()),
                InvalidColoringProver(bad)]
    for prover in cheaters:
        verifier = Verifier()
        result, confidence = run_protocol(prover, verifier)
        print(f'\n[+] {type(prover).__name__}: {result} after {verifier.rounds} rounds'
              f' ({verifier.reason.value if verifier.reason else "no reason"})\n')


if __name__ == '__main__':
    main()

"""
Verifier state machine tests
"""
import pytest

from graph import Graph
from prover import Prover
from utils import Color
from verifier import ACCEPTANCE_CONFIDENCE, ProtocolError, Rejection, Result, Verifier


@pytest.fixture
def prover(statement, rng):
    return Prover(statement, rng)


@pytest.fixture
def verifier(rng):
    return Verifier(rng)


def honest_round(prover, verifier):
    challenge = verifier.choose_random_vertices(prover.commit())
    verifier.verify_coloring(*prover.open(*challenge))


# =====================================================================
# Challenge selection
# =====================================================================

class TestChooseRandomVertices:
    def test_picks_first_neighbor(self, prover, verifier):
        for _ in range(20):
            public = prover.commit()
            u, v = verifier.choose_random_vertices(public)
            assert v == public.get_adjacent(u)[0]

    def test_records_session_state(self, prover, verifier):
        public = prover.commit()
        pair = verifier.choose_random_vertices(public)
        assert verifier.graph_size == 4
        assert verifier.last_commitment is public
        assert verifier.last_requested_vertices == pair

    def test_isolated_vertex_gives_no_challenge(self, verifier):
        g = Graph()
        g.add_vertex()
        g.color(0, Color.RED)
        public = Prover(g).commit()
        assert verifier.choose_random_vertices(public) is None
        assert verifier.graph_size == 0
        assert verifier.last_commitment is None
        assert verifier.confidence == 0.0
        assert verifier.result is Result.UNDECIDED

    def test_empty_graph(self, verifier):
        with pytest.raises(ValueError):
            verifier.choose_random_vertices(Graph())


# =====================================================================
# Reveal checking
# =====================================================================

class TestVerifyColoring:
    def test_honest_round_raises_confidence(self, prover, verifier):
        honest_round(prover, verifier)
        assert verifier.confidence == pytest.approx(0.25)
        assert verifier.rounds == 1
        assert verifier.result is Result.UNDECIDED

    def test_confidence_strictly_increases(self, prover, verifier):
        previous = verifier.confidence
        while verifier.result is Result.UNDECIDED:
            honest_round(prover, verifier)
            assert verifier.confidence > previous
            assert verifier.confidence < 1.0
            previous = verifier.confidence
        assert verifier.result is Result.ACCEPTED
        assert verifier.confidence > ACCEPTANCE_CONFIDENCE

    def test_equal_colors_reject(self, prover, verifier):
        verifier.choose_random_vertices(prover.commit())
        verifier.verify_coloring(Color.RED, b'\x00' * 32, Color.RED, b'\x00' * 32)
        assert verifier.result is Result.REJECTED
        assert verifier.reason is Rejection.STRUCTURAL_VIOLATION
        assert verifier.confidence == 1.0

    def test_wrong_secret_rejects(self, prover, verifier):
        u, v = verifier.choose_random_vertices(prover.commit())
        color_u, secret_u, color_v, secret_v = prover.open(u, v)
        verifier.verify_coloring(color_u, secret_u, color_v, secret_v[::-1])
        assert verifier.result is Result.REJECTED
        assert verifier.reason is Rejection.COMMITMENT_MISMATCH
        assert verifier.confidence == 1.0

    def test_swapped_colors_reject(self, prover, verifier):
        u, v = verifier.choose_random_vertices(prover.commit())
        color_u, secret_u, color_v, secret_v = prover.open(u, v)
        verifier.verify_coloring(color_v, secret_u, color_u, secret_v)
        assert verifier.result is Result.REJECTED
        assert verifier.reason is Rejection.COMMITMENT_MISMATCH

    def test_reveal_without_challenge(self, verifier):
        with pytest.raises(ProtocolError):
            verifier.verify_coloring(Color.RED, b'\x00' * 32, Color.BLUE, b'\x00' * 32)

    def test_challenge_is_consumed(self, prover, verifier):
        challenge = verifier.choose_random_vertices(prover.commit())
        opening = prover.open(*challenge)
        verifier.verify_coloring(*opening)
        with pytest.raises(ProtocolError):
            verifier.verify_coloring(*opening)


# =====================================================================
# Terminal states
# =====================================================================

class TestTerminalStates:
    def test_rejected_is_final(self, prover, verifier):
        verifier.choose_random_vertices(prover.commit())
        verifier.verify_coloring(Color.RED, b'\x00' * 32, Color.RED, b'\x00' * 32)

        assert verifier.choose_random_vertices(prover.commit()) is None
        verifier.verify_coloring(Color.RED, b'\x00' * 32, Color.BLUE, b'\x00' * 32)
        assert verifier.result is Result.REJECTED
        assert verifier.confidence == 1.0

    def test_accepted_is_final(self, prover, verifier):
        while verifier.result is Result.UNDECIDED:
            honest_round(prover, verifier)
        confidence, rounds = verifier.confidence, verifier.rounds

        assert verifier.choose_random_vertices(prover.commit()) is None
        verifier.verify_coloring(Color.RED, b'\x00' * 32, Color.RED, b'\x00' * 32)
        assert verifier.result is Result.ACCEPTED
        assert verifier.confidence == confidence
        assert verifier.rounds == rounds

    def test_result_str(self):
        assert str(Result.UNDECIDED) == 'undecided'
        assert str(Result.ACCEPTED) == 'accepted'
        assert str(Result.REJECTED) == 'rejected'

"""
Messages exchanged between prover and verifier.

All messages are JSON-compatible dicts, the same shape the socket based
prover and verifier exchange:

    commit     {'round': 3, 'adjacency': [[1, 2], [0], [0]], 'commitments': ['ab..', ...]}
    challenge  {'query': {'u': 13, 'v': 37}}
    reveal     {'opening': {'u': [color, secret_hex], 'v': [color, secret_hex]}}

Decoding checks the shape of everything that crosses the boundary and raises
MessageError for anything malformed.
"""

import json
from graph import Graph, Vertex
from utils import Color, ZKCommitment


class MessageError(ValueError):
    pass


def encode(m: dict) -> bytes:
    return json.dumps(m).encode('utf-8') + b'\n'


def decode(data: bytes) -> dict:
    try:
        m = json.loads(data.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MessageError(f'undecodable message: {e}') from e
    if not isinstance(m, dict):
        raise MessageError('message must be a JSON object')
    return m


def _int(x, what: str) -> int:
    if isinstance(x, bool) or not isinstance(x, int):
        raise MessageError(f'{what} must be an integer, got {x!r}')
    return x


def _hex(x, what: str) -> bytes:
    if not isinstance(x, str):
        raise MessageError(f'{what} must be a hex string')
    try:
        return bytes.fromhex(x)
    except ValueError as e:
        raise MessageError(f'{what} is not valid hex') from e


def _color(x) -> Color:
    try:
        return Color(_int(x, 'color'))
    except ValueError as e:
        raise MessageError(f'unknown color {x!r}') from e


# ==============================================================================
# Commit (prover -> verifier)
# ==============================================================================

def commit_message(rnd: int, commitment: Graph) -> dict:
    return {'round': rnd,
            'adjacency': [v.adjacent for v in commitment.vertices],
            'commitments': [v.contents.hash.hex() for v in commitment.vertices]}


def parse_commit(m: dict) -> (int, Graph):
    try:
        rnd = _int(m['round'], 'round')
        adjacency = m['adjacency']
        commitments = m['commitments']
    except (KeyError, TypeError) as e:
        raise MessageError(f'malformed commit message: {e}') from e
    if not isinstance(adjacency, list) or not isinstance(commitments, list):
        raise MessageError('adjacency and commitments must be lists')
    n = len(commitments)
    if len(adjacency) != n:
        raise MessageError(f'{len(adjacency)} adjacency lists for {n} commitments')

    g = Graph()
    for u, (adjacent, c) in enumerate(zip(adjacency, commitments)):
        if not isinstance(adjacent, list):
            raise MessageError(f'adjacency of vertex {u} must be a list')
        for v in adjacent:
            if not 0 <= _int(v, 'vertex') < n or v == u:
                raise MessageError(f'vertex {u} lists invalid neighbor {v}')
        g.vertices.append(Vertex(ZKCommitment(_hex(c, 'commitment')), adjacent))

    for u, vertex in enumerate(g.vertices):
        for v in vertex.adjacent:
            if u not in g.vertices[v].adjacent:
                raise MessageError(f'edge ({u}, {v}) is not symmetric')
    return rnd, g


# ==============================================================================
# Challenge (verifier -> prover)
# ==============================================================================

def challenge_message(u: int, v: int) -> dict:
    return {'query': {'u': u, 'v': v}}


def parse_challenge(m: dict) -> (int, int):
    try:
        return _int(m['query']['u'], 'u'), _int(m['query']['v'], 'v')
    except (KeyError, TypeError) as e:
        raise MessageError(f'malformed challenge message: {e}') from e


# ==============================================================================
# Reveal (prover -> verifier)
# ==============================================================================

def reveal_message(color_u: Color, secret_u: bytes, color_v: Color, secret_v: bytes) -> dict:
    return {'opening': {'u': [color_u.value, secret_u.hex()],
                        'v': [color_v.value, secret_v.hex()]}}


def parse_reveal(m: dict) -> (Color, bytes, Color, bytes):
    try:
        color_u, secret_u = m['opening']['u']
        color_v, secret_v = m['opening']['v']
    except (KeyError, TypeError, ValueError) as e:
        raise MessageError(f'malformed reveal message: {e}') from e
    return (_color(color_u), _hex(secret_u, 'secret'),
            _color(color_v), _hex(secret_v, 'secret'))

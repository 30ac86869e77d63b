"""Player-side checks once the server seed has been revealed."""

import hmac
from typing import List

from .crypto import DEFAULT_BACKEND, HashBackend, to_bytes
from .fair import crash_sequence as _crash_sequence
from .fair import digest_hex
from .seed import SeedState


def hash_server_seed(server_seed: str | bytes, backend: HashBackend | None = None) -> str:
    backend = backend or DEFAULT_BACKEND
    return backend.sha256(to_bytes(server_seed)).hex()


def verify_server_seed(server_seed: str | bytes, expected_hash: str,
                       backend: HashBackend | None = None) -> bool:
    """Check the revealed seed against the hash published before play."""
    computed = hash_server_seed(server_seed, backend)
    return hmac.compare_digest(computed, expected_hash.strip().lower())


def round_digest(server_seed: str | bytes, client_seed, nonce: int, index: int | None = None,
                 backend: HashBackend | None = None) -> str:
    state = SeedState(client_seed, server_seed, nonce=nonce, index=index, backend=backend,
                      auto_client_seed=False)
    return digest_hex(state)


def crash_sequence(server_seed: str | bytes, client_seed, start_nonce: int, rounds: int,
                   house_edge: float = 1, max_cap: float = 1_000_000) -> List[float]:
    state = SeedState(client_seed, server_seed, nonce=start_nonce, auto_client_seed=False)
    return _crash_sequence(state, rounds, house_edge, max_cap)

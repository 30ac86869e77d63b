"""Seed material and the advancing counter behind every fair draw."""

import enum
import logging
from collections.abc import Iterable
from typing import Optional

from .crypto import DEFAULT_BACKEND, HashBackend, generate_random_hex, to_bytes
from .errors import ConfigurationError, InvalidParameterError

logger = logging.getLogger(__name__)

SEED_HEX_LENGTH = 64


class CounterMode(enum.Enum):
    NONCE = "nonce"
    INDEX = "index"


def normalize_client_seed(seed) -> Optional[str]:
    """Join an iterable of seeds with '|'; None, "" and an empty join mean no seed."""
    if seed is None:
        return None
    if isinstance(seed, bytes):
        seed = seed.decode("utf-8")
    elif isinstance(seed, Iterable) and not isinstance(seed, str):
        seed = "|".join(str(s) for s in seed)
    else:
        seed = str(seed)
    return seed or None


def _check_counter(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidParameterError(f"{name} must be a non-negative integer, got {value!r}")
    return value


class SeedState:
    """Server seed, client seed and the single active counter of one round.

    The counter mode is fixed at construction: passing ``index`` selects
    index mode, in which the nonce stays frozen and only the index moves.
    ``advance()`` is the only way the counter changes.
    """

    def __init__(
        self,
        client_seed: str | Iterable[str] | None = None,
        server_seed: str | bytes | None = None,
        nonce: int = 0,
        index: int | None = None,
        backend: HashBackend | None = None,
        auto_client_seed: bool = True,
    ):
        self._backend = backend or DEFAULT_BACKEND
        self._server_seed = server_seed or generate_random_hex(SEED_HEX_LENGTH)
        self._key = to_bytes(self._server_seed)
        self._server_seed_hash = self._backend.sha256(self._key).hex()
        self._client_seed = normalize_client_seed(client_seed)
        self._auto_client_seed = auto_client_seed

        self._nonce = _check_counter("nonce", nonce)
        if index is None:
            self._mode = CounterMode.NONCE
            self._index = None
        else:
            self._mode = CounterMode.INDEX
            self._index = _check_counter("index", index)

        logger.debug("seed state created: mode=%s server_seed_hash=%s",
                     self._mode.value, self._server_seed_hash)

    @property
    def backend(self) -> HashBackend:
        return self._backend

    @property
    def server_seed(self) -> str | bytes:
        return self._server_seed

    @property
    def key(self) -> bytes:
        return self._key

    @property
    def server_seed_hash(self) -> str:
        return self._server_seed_hash

    @property
    def client_seed(self) -> Optional[str]:
        return self._client_seed

    def set_client_seed(self, seed) -> None:
        self._client_seed = normalize_client_seed(seed)

    @property
    def mode(self) -> CounterMode:
        return self._mode

    @property
    def nonce(self) -> int:
        return self._nonce

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def counter(self) -> int:
        return self._index if self._mode is CounterMode.INDEX else self._nonce

    def advance(self) -> int:
        if self._mode is CounterMode.INDEX:
            self._index += 1
            return self._index
        self._nonce += 1
        return self._nonce

    def current_material(self) -> str:
        if self._client_seed is None:
            if not self._auto_client_seed:
                raise ConfigurationError("no client seed set and auto-generation is disabled")
            self._client_seed = generate_random_hex(SEED_HEX_LENGTH)
            logger.debug("generated client seed %s", self._client_seed)
        if self._mode is CounterMode.INDEX:
            return f"{self._client_seed}-{self._nonce}-{self._index}"
        return f"{self._client_seed}-{self._nonce}"

    def __repr__(self) -> str:
        return (f"SeedState(mode={self._mode.value}, nonce={self._nonce}, "
                f"index={self._index}, server_seed_hash={self._server_seed_hash!r})")

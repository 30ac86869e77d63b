"""One object per round: a SeedState bound to every fair generator."""

from typing import Any, List, MutableSequence, Optional

from . import fair, generators
from .config import Defaults
from .crypto import HashBackend
from .pump import PumpRound, pump, resolve_burst_count
from .seed import CounterMode, SeedState


class FairNumbers:
    """Provably fair number source.

    Peek methods (``random``, ``random_int``, ``random_float``, ``crash``,
    ``high_multiplier``, ``pick``) read the current counter position. The
    ``next*`` methods advance exactly once and then peek. ``random_int`` may
    still advance on its own when a draw is rejected.
    """

    def __init__(self, client_seed=None, server_seed: str | bytes | None = None, nonce: int = 0,
                 index: int | None = None, backend: HashBackend | None = None,
                 defaults: Defaults | None = None):
        self.defaults = defaults or Defaults()
        self.state = SeedState(client_seed, server_seed or self.defaults.server_seed,
                               nonce=nonce, index=index, backend=backend)

    # --- seeds & counter

    @property
    def server_seed(self):
        return self.state.server_seed

    @property
    def server_seed_hash(self) -> str:
        return self.state.server_seed_hash

    @property
    def client_seed(self) -> Optional[str]:
        return self.state.client_seed

    def set_client_seed(self, seed) -> None:
        self.state.set_client_seed(seed)

    @property
    def mode(self) -> CounterMode:
        return self.state.mode

    @property
    def nonce(self) -> int:
        return self.state.nonce

    @property
    def index(self) -> Optional[int]:
        return self.state.index

    def advance(self) -> int:
        return self.state.advance()

    next_index = advance

    # --- uniform layer

    def digest(self) -> bytes:
        return fair.digest(self.state)

    def get_bytes(self, count: int = 4) -> bytes:
        return fair.get_bytes(self.state, count)

    def random_long(self) -> int:
        return fair.random_long(self.state)

    def random(self) -> float:
        return fair.uniform_float(self.state)

    def random_int(self, lo: int = 0, hi: int = 100) -> int:
        return fair.unbiased_int(self.state, lo, hi)

    def random_float(self, lo: float = 0, hi: float = 100, precision: int = 2) -> float:
        return fair.rounded_float(self.state, lo, hi, precision)

    def next(self) -> float:
        self.advance()
        return self.random()

    def next_int(self, lo: int, hi: int) -> int:
        self.advance()
        return self.random_int(lo, hi)

    def next_float(self, lo: float = 0, hi: float = 1, precision: int = 2) -> float:
        self.advance()
        return self.random_float(lo, hi, precision)

    # --- derived generators

    def int_range(self, lo: int, hi: int, size: int = 5, unique: bool = False) -> List[int]:
        return generators.int_range(self.state, lo, hi, size, unique)

    def sample_unique(self, lo: int, hi: int, size: int) -> List[int]:
        return generators.sample_unique(self.state, lo, hi, size)

    def pick(self, weights) -> Optional[Any]:
        return generators.pick(self.state, weights)

    def shuffle(self, items: MutableSequence) -> MutableSequence:
        return generators.shuffle(self.state, items)

    def crash(self, house_edge: float | None = None, max_cap: float | None = None) -> float:
        d = self.defaults
        return fair.crash(self.state,
                          d.house_edge if house_edge is None else house_edge,
                          d.crash_max if max_cap is None else max_cap)

    def crash_sequence(self, rounds: int, house_edge: float | None = None,
                       max_cap: float | None = None) -> List[float]:
        d = self.defaults
        return fair.crash_sequence(self.state, rounds,
                                   d.house_edge if house_edge is None else house_edge,
                                   d.crash_max if max_cap is None else max_cap)

    def high_multiplier(self, house_edge: float | None = None, max_multiplier: float | None = None,
                        precision: int = 2) -> float:
        d = self.defaults
        return fair.high_multiplier(self.state,
                                    d.high_edge if house_edge is None else house_edge,
                                    d.crash_max if max_multiplier is None else max_multiplier,
                                    precision)

    def pump(self, difficulty: str | int = "medium", size: int | None = None,
             edge: float | None = None) -> PumpRound:
        d = self.defaults
        burst_count = resolve_burst_count(difficulty, d.difficulties)
        return pump(self.state, burst_count,
                    d.pump_size if size is None else size,
                    d.pump_edge if edge is None else edge)

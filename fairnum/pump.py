"""Pump (balloon) game.

The player pumps up to ``size`` times; ``burst_count`` of the ``size`` slots
are burst slots and the balloon pops at the first one. Cashing out after
``k`` safe pumps pays ``(1 - edge) / S(k)`` where ``S`` is the hypergeometric
survival probability.
"""

import logging
import math
from dataclasses import dataclass

from .errors import InvalidParameterError
from .generators import next_int
from .seed import SeedState

logger = logging.getLogger(__name__)

DIFFICULTIES = {"easy": 1, "medium": 3, "hard": 5, "expert": 10}


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def resolve_burst_count(difficulty, presets: dict | None = None) -> int:
    if _is_int(difficulty):
        return difficulty
    presets = DIFFICULTIES if presets is None else presets
    try:
        return presets[difficulty]
    except KeyError:
        raise InvalidParameterError(
            f"unknown difficulty {difficulty!r}; expected one of {sorted(presets)} or an int"
        ) from None


@dataclass(frozen=True)
class PumpRound:
    size: int
    burst_count: int
    edge: float
    pop_point: int

    def survival_probability(self, k: int) -> float:
        if k <= 0:
            return 1.0
        if k > self.size - self.burst_count:
            return 0.0
        s = 1.0
        for t in range(k):
            s *= (self.size - self.burst_count - t) / (self.size - t)
        return s

    def payout_multiplier(self, k: int) -> float:
        if not _is_int(k) or k < 0 or k >= self.pop_point:
            return 0.0
        s = self.survival_probability(k)
        # hundredths fixed point on 4-decimal operands
        num = _round_half_up((1 - self.edge) * 10000)
        den = _round_half_up(s * 10000)
        if den <= 0:
            return 0.0
        return (num * 100 // den) / 100

    def is_burst_at(self, k: int) -> bool:
        return _is_int(k) and k == self.pop_point

    def can_continue_at(self, k: int) -> bool:
        return _is_int(k) and 0 <= k < self.pop_point

    def will_burst_next(self, k: int) -> bool:
        return _is_int(k) and k + 1 == self.pop_point


def pump(state: SeedState, burst_count: int = 3, size: int = 25, edge: float = 0.02) -> PumpRound:
    if not (_is_int(size) and size >= 2):
        raise InvalidParameterError(f"pump: size must be an integer >= 2, got {size!r}")
    if not (_is_int(burst_count) and 1 <= burst_count <= size):
        raise InvalidParameterError(
            f"pump: burst count must be an integer in [1, {size}], got {burst_count!r}"
        )

    # partial Fisher-Yates over slot indices
    positions = list(range(size))
    remaining = size
    first_burst = size
    for _ in range(burst_count):
        j = next_int(state, 0, remaining - 1)
        first_burst = min(first_burst, positions[j])
        remaining -= 1
        positions[j] = positions[remaining]

    pop_point = first_burst + 1
    logger.debug("pump size=%d bursts=%d pop_point=%d", size, burst_count, pop_point)
    return PumpRound(size=size, burst_count=burst_count, edge=edge, pop_point=pop_point)

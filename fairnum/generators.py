"""Collection-level draws: integer lists, weighted picks and shuffles."""

import math
from collections.abc import Mapping
from typing import Any, Iterable, List, MutableSequence, Optional, Tuple

from .errors import RangeError
from .fair import uniform_float, unbiased_int
from .seed import SeedState


def next_int(state: SeedState, lo: int, hi: int) -> int:
    state.advance()
    return unbiased_int(state, lo, hi)


def int_range(state: SeedState, lo: int, hi: int, size: int = 5, unique: bool = False) -> List[int]:
    if hi < lo:
        raise RangeError(f"int_range: max < min ({hi} < {lo})")
    if size < 0:
        size = 0
    if unique:
        return sample_unique(state, lo, hi, size)
    return [next_int(state, lo, hi) for _ in range(size)]


def sample_unique(state: SeedState, lo: int, hi: int, size: int) -> List[int]:
    """``size`` distinct integers from [lo, hi] in draw order."""
    if hi < lo:
        raise RangeError(f"sample_unique: max < min ({hi} < {lo})")
    size = min(max(size, 0), hi - lo + 1)
    seen = set()
    out: List[int] = []
    while len(out) < size:
        n = next_int(state, lo, hi)
        if n not in seen:
            seen.add(n)
            out.append(n)
    return out


def _valid_weights(weights) -> List[Tuple[Any, float]]:
    pairs = weights.items() if isinstance(weights, Mapping) else weights
    valid = []
    for label, raw in pairs:
        try:
            w = float(raw)
        except (TypeError, ValueError):
            continue
        if math.isfinite(w) and w > 0:
            valid.append((label, w))
    return valid


def pick(state: SeedState, weights: Mapping | Iterable[Tuple[Any, float]]) -> Optional[Any]:
    """Weighted choice over (label, weight) pairs in the given order.

    Returns None when no entry has a positive finite weight.
    """
    entries = _valid_weights(weights)
    if not entries:
        return None
    total = sum(w for _, w in entries)
    t = uniform_float(state) * total
    for label, w in entries:
        t -= w
        if t < 0:
            return label
    # float drift
    return entries[-1][0]


def shuffle(state: SeedState, items: MutableSequence) -> MutableSequence:
    """Fisher-Yates in place; advances the counter once per element."""
    m = len(items)
    while m:
        m -= 1
        i = next_int(state, 0, m)
        items[m], items[i] = items[i], items[m]
    return items

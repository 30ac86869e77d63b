import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List

from .errors import InvalidParameterError, RangeError
from .seed import SeedState

logger = logging.getLogger(__name__)

TWO_32 = 2 ** 32
TWO_52 = 2 ** 52
TWO_256 = 2 ** 256
BELOW_ONE = math.nextafter(1.0, 0.0)


def digest(state: SeedState) -> bytes:
    msg = state.current_material().encode("utf-8")
    return state.backend.hmac_sha256(state.key, msg)


def digest_hex(state: SeedState) -> str:
    return digest(state).hex()


def get_bytes(state: SeedState, count: int = 4) -> bytes:
    buf = digest(state)
    return buf[:min(max(count, 0), len(buf))]


def bytes_to_float(data: bytes) -> float:
    if not data:
        return 0.0
    result = 0.0
    for i, b in enumerate(data):
        result += b / 256 ** (i + 1)
    return result


def random_long(state: SeedState) -> int:
    """The full digest as a 256-bit big-endian unsigned integer."""
    return int.from_bytes(digest(state), "big")


def uniform_float(state: SeedState) -> float:
    # Top 52 of the first 56 bits fill a double mantissa exactly
    head = int.from_bytes(digest(state)[:7], "big") >> 4
    r = head / TWO_52
    return BELOW_ONE if r >= 1.0 else r


def round_half_away(value: float, precision: int = 2) -> float:
    """Round the exact binary value of ``value``, ties away from zero."""
    exact = Decimal(value)
    # Enough digits for the integer part plus the requested decimals
    ctx = Context(prec=max(28, exact.adjusted() + precision + 2))
    quantum = Decimal(1).scaleb(-precision)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=ctx))


def unbiased_int(state: SeedState, lo: int = 0, hi: int = 100) -> int:
    """Uniform integer in [lo, hi] by rejection sampling.

    A rejected draw advances the counter and redraws; an accepted first draw
    leaves the counter untouched. Spans wider than 32 bits sample from the
    256-bit digest integer instead of the float path.
    """
    for name, bound in (("min", lo), ("max", hi)):
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise InvalidParameterError(f"unbiased_int: {name} must be an integer, got {bound!r}")
    if hi < lo:
        raise RangeError(f"unbiased_int: max < min ({hi} < {lo})")
    span = hi - lo + 1
    if span > TWO_256:
        raise RangeError(f"unbiased_int: span {span} exceeds 256 bits")

    if span <= TWO_32:
        limit = (TWO_32 // span) * span
        draw = lambda: math.floor(uniform_float(state) * TWO_32)
    else:
        limit = (TWO_256 // span) * span
        draw = lambda: random_long(state)

    x = draw()
    redraws = 0
    while x >= limit:
        state.advance()
        redraws += 1
        x = draw()
    if redraws:
        logger.debug("unbiased_int(%d, %d) redrew %d time(s)", lo, hi, redraws)
    return x % span + lo


def rounded_float(state: SeedState, lo: float = 0, hi: float = 100, precision: int = 2) -> float:
    if hi < lo:
        raise RangeError(f"rounded_float: max < min ({hi} < {lo})")
    v = lo + uniform_float(state) * (hi - lo)
    return round_half_away(v, precision)


def house_edge_fraction(house_edge: float) -> float:
    # 1 and above are percentages, below 1 already a fraction
    return house_edge / 100 if house_edge >= 1 else house_edge


def crash(state: SeedState, house_edge: float = 1, max_cap: float = 1_000_000) -> float:
    eps = house_edge_fraction(house_edge)
    r = uniform_float(state)
    if r >= 1:
        r = BELOW_ONE
    raw = (1 - eps) / (1 - r)
    down2 = math.floor(raw * 100) / 100
    return min(max(1.0, down2), max_cap)


def high_multiplier(state: SeedState, house_edge: float = 0.01, max_multiplier: float = 1_000_000,
                    precision: int = 2) -> float:
    """Limbo style multiplier from the first 4 digest bytes."""
    value = math.floor(bytes_to_float(get_bytes(state, 4)) * 2 ** 24)
    eps = house_edge_fraction(house_edge)
    m = min(max(1.0, 2 ** 24 / (value + 1) * (1 - eps)), max_multiplier)
    return round_half_away(m, precision)


def crash_sequence(state: SeedState, rounds: int, house_edge: float = 1,
                   max_cap: float = 1_000_000) -> List[float]:
    """Crash points for ``rounds`` consecutive counter values, starting at the current one."""
    out: List[float] = []
    for k in range(rounds):
        if k:
            state.advance()
        out.append(crash(state, house_edge, max_cap))
    return out

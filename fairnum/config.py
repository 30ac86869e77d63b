import os
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional

from .errors import ConfigurationError
from .pump import DIFFICULTIES


@dataclass(frozen=True)
class Defaults:
    """Game defaults used by the engine facade and the CLI."""

    house_edge: float = 1.0  # percent; values below 1 are fractions
    crash_max: float = 1_000_000.0
    high_edge: float = 0.01
    pump_size: int = 25
    pump_edge: float = 0.02
    difficulties: Dict[str, int] = field(default_factory=lambda: dict(DIFFICULTIES))
    server_seed: Optional[str] = None


_ENV = {
    "FAIRNUM_HOUSE_EDGE": ("house_edge", float),
    "FAIRNUM_CRASH_MAX": ("crash_max", float),
    "FAIRNUM_HIGH_EDGE": ("high_edge", float),
    "FAIRNUM_PUMP_SIZE": ("pump_size", int),
    "FAIRNUM_PUMP_EDGE": ("pump_edge", float),
    "FAIRNUM_SERVER_SEED": ("server_seed", str),
}


def load_defaults(environ: Mapping[str, str] | None = None) -> Defaults:
    env = os.environ if environ is None else environ
    overrides = {}
    for var, (name, cast) in _ENV.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        try:
            overrides[name] = cast(raw)
        except ValueError as exc:
            raise ConfigurationError(f"{var}={raw!r} is not a valid {cast.__name__}") from exc
    return replace(Defaults(), **overrides)

"""Public package surface for the fairnum provably fair number engine."""

from .engine import FairNumbers
from .errors import ConfigurationError, FairnumError, InvalidParameterError, RangeError
from .pump import PumpRound
from .seed import CounterMode, SeedState
from .verify import hash_server_seed, round_digest, verify_server_seed

__all__ = [
    "ConfigurationError",
    "CounterMode",
    "FairNumbers",
    "FairnumError",
    "InvalidParameterError",
    "PumpRound",
    "RangeError",
    "SeedState",
    "hash_server_seed",
    "round_digest",
    "verify_server_seed",
]

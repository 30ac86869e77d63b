class FairnumError(Exception):
    """Base class for every error raised by fairnum."""


class RangeError(FairnumError, ValueError):
    """A ranged operation received max < min (or a range too wide to sample)."""


class InvalidParameterError(FairnumError, ValueError):
    """Structurally invalid generator or seed configuration."""


class ConfigurationError(FairnumError, RuntimeError):
    """Missing seed material or malformed configuration."""

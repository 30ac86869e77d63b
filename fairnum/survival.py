import numpy as np

from .fair import house_edge_fraction


def empirical_survival(x):
    """S(t) = P(X >= t) at the distinct observed crash points (all >= 1)."""
    x = np.asarray(x, dtype=float)
    x = x[~np.isnan(x)]
    x = np.sort(x[x >= 1])
    n = x.size
    uniq = np.unique(x)
    # count of samples >= t for each distinct t
    at_least = n - np.searchsorted(x, uniq, side="left")
    S = at_least / n if n else np.zeros(0)
    return {"t": uniq, "S": S, "n": n}


def theoretical_crash_survival(t, house_edge: float = 1):
    """P(crash >= t) for the fair crash model, ignoring the hundredths floor."""
    eps = house_edge_fraction(house_edge)
    t = np.asarray(t, dtype=float)
    with np.errstate(divide="ignore"):
        S = np.where(t <= 1, 1.0, (1 - eps) / t)
    return np.minimum(S, 1.0)

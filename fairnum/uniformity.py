import numpy as np
from scipy import stats

from .errors import RangeError


def uniformity_test(values, lo: int, hi: int):
    """Chi-square goodness of fit of integer draws against uniform [lo, hi]."""
    if hi < lo:
        raise RangeError(f"uniformity_test: max < min ({hi} < {lo})")
    v = np.asarray(values, dtype=np.int64)
    if v.size == 0:
        raise ValueError("uniformity_test needs at least one value")
    if (v < lo).any() or (v > hi).any():
        raise ValueError(f"values outside [{lo}, {hi}]")
    counts = np.bincount(v - lo, minlength=hi - lo + 1)
    res = stats.chisquare(counts)
    return {
        "statistic": float(res.statistic),
        "pvalue": float(res.pvalue),
        "dof": int(counts.size - 1),
        "counts": counts,
        "n": int(v.size),
    }

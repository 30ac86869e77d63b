import numpy as np


def summarize_fit(fits, best, house_edge=None):
    lines = []
    lines.append("Crash tail fits (lower AIC is better):")
    for f in sorted(fits, key=lambda d: d["aic"]):
        lines.append(f"- {f['name']}: AIC={f['aic']:.2f}, ll={f['ll']:.2f}, params={f['params']}")
    lines.append("")
    lines.append(f"Best: {best['name']} with params {best['params']}")
    if house_edge is not None:
        lines.append(f"Expected for a fair game: pareto_xm1 with alpha ~ 1 (edge {house_edge})")
    return "\n".join(lines)


def summarize_uniformity(result, alpha: float = 0.01):
    verdict = "uniform" if result["pvalue"] >= alpha else "NOT uniform"
    return (f"chi2={result['statistic']:.3f} dof={result['dof']} "
            f"p={result['pvalue']:.4f} n={result['n']} -> {verdict} at alpha={alpha}")


def prob_ge_thresholds(best, xs):
    xs = np.asarray(xs)
    S = best["survival"]
    return np.array([float(S(x)) for x in xs])

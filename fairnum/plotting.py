import matplotlib.pyplot as plt
import numpy as np

from .survival import theoretical_crash_survival


def plot_survival(emp, fits, house_edge=None, path=None):
    t = emp["t"]
    S = emp["S"]
    if t.size == 0:
        raise ValueError("plot_survival: no crash points to plot")
    plt.figure(figsize=(7,5))
    plt.step(t, S, where='post', label='Empirical S(x)')
    grid_t = np.linspace(1, max(t.max(), 1.01), 300)
    for f in fits:
        plt.plot(grid_t, f["survival"](grid_t), label=f["name"])
    if house_edge is not None:
        plt.plot(grid_t, theoretical_crash_survival(grid_t, house_edge), 'k--',
                 label=f'fair (edge {house_edge})')
    plt.xscale('log')
    plt.yscale('log')
    plt.xlabel('crash point x')
    plt.ylabel('S(x)=P(X>=x)')
    plt.title('Crash survival function (log-log)')
    plt.legend()
    plt.tight_layout()
    if path:
        plt.savefig(path)
        plt.close()
    else:
        plt.show()

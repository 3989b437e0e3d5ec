# gps_lab/plots/plotting.py
# Side-by-side bars comparing SearchResults from different strategies on one problem.
# Failed runs are drawn hatched with a zero cost bar so they stay visible in every panel.
from __future__ import annotations
from pathlib import Path
import matplotlib.pyplot as plt

PANELS = [
    ("nodes_expanded", "Nodes Expanded"),
    ("cost", "Path Cost"),
    ("time_s", "Time (s)"),
    ("peak_kb", "Peak Memory (KB)"),
]

def _value(r, attr):
    if attr == "cost" and not r.success:
        return 0
    return getattr(r, attr) or 0

def bar_compare(results, title="Search Comparison"):
    names = [r.algo for r in results]
    hatches = ["" if r.success else "//" for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    for ax, (attr, panel_title) in zip(axs.ravel(), PANELS):
        bars = ax.bar(names, [_value(r, attr) for r in results])
        for bar, hatch in zip(bars, hatches):
            bar.set_hatch(hatch)
        ax.set_title(panel_title)
        ax.tick_params(axis='x', rotation=45)
    if any(not r.success for r in results):
        title = f"{title} (hatched = no solution)"
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig

def save_comparison(results, path: Path, title="Search Comparison", dpi=160) -> Path:
    fig = bar_compare(results, title=title)
    fig.savefig(path, dpi=dpi)
    plt.close(fig)
    return path

# gps_lab/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
import matplotlib.pyplot as plt

from ..config import results_dir_from_env

def _load_rows(results_json: Path):
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: python -m gps_lab.benchmarks.run_all")
    data = json.loads(results_json.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) for r in rows]
    top = max((v for v in vals if v is not None), default=0) or 1

    x = list(range(len(algos)))
    ax.bar(x, [v or 0 for v in vals])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    # value labels on top of bars
    for xi, v in zip(x, vals):
        if v is None:
            label, y = "n/a", 0
        elif isinstance(v, float) and v < 0.01:
            label, y = f"{v:.4f}", v
        elif isinstance(v, float):
            label, y = f"{v:.3f}", v
        else:
            label, y = f"{v}", v
        ax.text(xi, y + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Strategy | Cost | Steps | Nodes Expanded | Passes | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('steps'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('passes'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

CHARTS = [
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
    ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ("cost", "Path Cost (lower is better)", "cost", "cost.png"),
]

def main(argv=None):
    parser = argparse.ArgumentParser(description="Turn results.json into a markdown table and bar charts.")
    parser.add_argument("--dir", type=Path, default=results_dir_from_env(),
                        help="directory holding results.json; outputs are written next to it")
    args = parser.parse_args(argv)

    rows = _load_rows(args.dir / "results.json")

    md_path = args.dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    print(f"Wrote {md_path}")

    written = [md_path]
    for metric, title, ylabel, filename in CHARTS:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        out = args.dir / filename
        out.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {out}")
        written.append(out)
    return written

if __name__ == "__main__":
    main()

# statesearch/benchmarks/plot_results.py
# Turn benchmarks/results.json into a markdown table and three bar charts.
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .. import config

Row = Dict[str, Any]

CHARTS = (
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
    ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ("path_length", "Path Length (lower is better)", "states", "path_length.png"),
)


def load_rows(results_path: Path) -> List[Row]:
    if not results_path.exists():
        raise SystemExit(f"Missing {results_path}. Run: python -m statesearch.benchmarks.run_all")
    data = json.loads(results_path.read_text())
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _sorted(rows: List[Row], key: str) -> List[Row]:
    return sorted(rows, key=lambda r: math.inf if r.get(key) is None else r[key])


def _label(v: Any) -> str:
    if v is None:
        return "n/a"
    if isinstance(v, float):
        return f"{v:.4f}" if v < 0.01 else f"{v:.3f}"
    return f"{v}"


def bar_chart(rows: List[Row], metric: str, title: str, ylabel: str):
    rows = _sorted(rows, metric)
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]
    x = list(range(len(algos)))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")
    offset = 0.01 * (max(vals) or 1)
    for xi, r, v in zip(x, rows, vals):
        ax.text(xi, v + offset, _label(r.get(metric)), ha="center", va="bottom", fontsize=8)
    fig.tight_layout()
    return fig


def fmt_table(rows: List[Row]) -> str:
    lines = [
        "| Algorithm | Path Length | Nodes Expanded | Nodes Generated | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    for r in rows:
        def fnum(x):
            if isinstance(x, float):
                return f"{x:.6f}"
            return f"{x}" if isinstance(x, int) else "n/a"
        lines.append(
            f"| {r['algo']} | {fnum(r.get('path_length'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('nodes_generated'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    plt.close(fig)
    return buf.getvalue()


def main(argv: Optional[List[str]] = None) -> List[Path]:
    ap = argparse.ArgumentParser(description="Plot benchmark results.")
    ap.add_argument("--results", type=Path, default=config.RESULTS_PATH)
    ap.add_argument("--out-dir", type=Path, default=None)
    args = ap.parse_args(argv)
    out_dir = args.out_dir or args.results.parent
    out_dir.mkdir(parents=True, exist_ok=True)

    rows = load_rows(args.results)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    written.append(md_path)
    print(f"Wrote {md_path}")

    for metric, title, ylabel, filename in CHARTS:
        path = out_dir / filename
        path.write_bytes(fig_to_png_bytes(bar_chart(rows, metric, title, ylabel)))
        written.append(path)
        print(f"Wrote {path}")
    return written


if __name__ == "__main__":
    main()

from __future__ import annotations

from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt
import pandas as pd

CLASS_COLORS = {
    "normal": "#4C78A8",
    "vegan": "#54A24B",
    "vip": "#E45756",
}


def plot_bars(metric_by_class: Dict[str, float], title: str, out: Path) -> None:
    names = list(metric_by_class.keys())
    values = [metric_by_class[k] for k in names]
    x = list(range(len(names)))
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(x, values, color=[CLASS_COLORS.get(n, "#4C78A8") for n in names])
    ax.set_title(title)
    ax.set_ylabel("tempo")
    ax.set_xticks(x)
    ax.set_xticklabels(names)
    for i, v in enumerate(values):
        ax.text(i, v, f"{v:.2f}", ha="center", va="bottom", fontsize=8)
    plt.subplots_adjust(bottom=0.2, top=0.9)
    fig.savefig(out, dpi=150, bbox_inches="tight", pad_inches=0.1)
    plt.close(fig)


def plot_gantt(df: pd.DataFrame, title: str, out: Path, max_orders: int = 60) -> None:
    # Uma faixa por chef; a cor indica a classe final do pedido
    d = df.sort_values("start_time").head(max_orders)
    chef_ids = sorted(d["chef_id"].dropna().unique())
    lane = {chef_id: i for i, chef_id in enumerate(chef_ids)}
    fig, ax = plt.subplots(figsize=(10, 1 + 0.6 * max(1, len(chef_ids))))
    for _, row in d.iterrows():
        ax.broken_barh(
            [(row["start_time"], row["service_time"])],
            (lane[row["chef_id"]] * 10, 8),
            facecolors=CLASS_COLORS.get(row["order_class"], "#999999"),
            edgecolor="white",
        )
        if row["promoted"]:
            ax.text(row["start_time"] + 0.1, lane[row["chef_id"]] * 10 + 4, "*", va="center", fontsize=8)
    ax.set_yticks([lane[c] * 10 + 4 for c in chef_ids])
    ax.set_yticklabels([f"chef {int(c)}" for c in chef_ids])
    ax.set_xlabel("tempo")
    ax.set_title(title)
    plt.subplots_adjust(bottom=0.2, top=0.9)
    fig.savefig(out, dpi=150, bbox_inches="tight", pad_inches=0.1)
    plt.close(fig)

# simplicial_persistence/viz/diagram_vis.py
from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

import numpy as np

from ..persistence.diagrams import PersistenceDiagram

__all__ = ["plot_persistence_diagram"]


def plot_persistence_diagram(
    diagrams: Union[PersistenceDiagram, Sequence[PersistenceDiagram]],
    *,
    figsize: Tuple[float, float] = (5, 5),
    dpi: int = 150,
    save_path: Optional[str] = None,
    ax=None,
    clear_ax: bool = True,
    show: bool = True,
    point_s: float = 20.0,
    point_alpha: float = 0.8,
):
    """
    Scatter plot of one or more persistence diagrams.

    Finite points are drawn at ``(birth, death)``; essential points sit on a
    dashed line just above the largest finite value. The diagonal is drawn for
    reference. If ``ax`` is provided, the function draws into it and does not
    create a new figure.

    Returns
    -------
    fig, ax
    """
    import matplotlib.pyplot as plt

    if isinstance(diagrams, PersistenceDiagram):
        diagrams = [diagrams]

    finite = [D.points[np.isfinite(D.points).all(axis=1)] for D in diagrams]
    values = np.concatenate([f.reshape(-1) for f in finite]) if finite else np.zeros(0)
    births = np.concatenate([D.births for D in diagrams]) if diagrams else np.zeros(0)
    values = np.concatenate([values, births[np.isfinite(births)]])

    lo = float(values.min()) if values.size else 0.0
    hi = float(values.max()) if values.size else 1.0
    pad = 0.1 * (hi - lo) if hi > lo else 1.0
    inf_level = hi + pad

    # ---- figure / axes ----
    created_fig = False
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, dpi=int(dpi))
        created_fig = True
    else:
        fig = ax.figure

    if clear_ax:
        ax.cla()

    # ---- draw ----
    ax.plot([lo - pad, inf_level], [lo - pad, inf_level], color="gray", linewidth=1.0, zorder=1)
    ax.axhline(inf_level, color="gray", linestyle="--", linewidth=0.8, zorder=1)

    for D in diagrams:
        pts = D.points.copy()
        pts[~np.isfinite(pts[:, 1]), 1] = inf_level
        ax.scatter(
            pts[:, 0],
            pts[:, 1],
            s=float(point_s),
            alpha=float(point_alpha),
            label=f"$H_{{{D.dimension}}}$",
            zorder=2,
        )

    ax.set_xlabel("birth")
    ax.set_ylabel("death")
    ax.set_xlim(lo - pad, inf_level + 0.5 * pad)
    ax.set_ylim(lo - pad, inf_level + 0.5 * pad)
    ax.legend(loc="lower right")

    # ---- save / show ----
    if save_path is not None:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")

    if created_fig:
        plt.tight_layout()
        if show:
            plt.show()

    return fig, ax

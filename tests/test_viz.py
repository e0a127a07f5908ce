# tests/test_viz.py
from __future__ import annotations

import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from simplicial_persistence.persistence.diagrams import PersistenceDiagram, calculate_persistence_diagrams  # noqa: E402
from simplicial_persistence.viz import plot_persistence_diagram  # noqa: E402


class TestPlotPersistenceDiagram:
    def test_returns_figure_and_axes(self, triangle):
        fig, ax = plot_persistence_diagram(calculate_persistence_diagrams(triangle), show=False)
        assert ax.get_xlabel() == "birth"
        assert len(ax.collections) == 3
        plt.close(fig)

    def test_draws_into_given_axes(self, tmp_path):
        fig, ax = plt.subplots()
        D = PersistenceDiagram(0, [[0.0, 1.0], [0.0, math.inf]])
        out_fig, out_ax = plot_persistence_diagram(D, ax=ax, save_path=str(tmp_path / "dgm.png"))
        assert out_fig is fig and out_ax is ax
        assert (tmp_path / "dgm.png").exists()
        plt.close(fig)

    def test_empty_diagram(self):
        fig, ax = plot_persistence_diagram(PersistenceDiagram(1), show=False)
        plt.close(fig)

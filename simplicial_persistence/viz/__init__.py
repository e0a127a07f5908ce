"""
Visualization utilities for simplicial_persistence.

Notes
-----
matplotlib is imported inside the plotting functions, so importing this module
does not start a GUI backend.
"""

from __future__ import annotations

from . import diagram_vis

from .diagram_vis import (
    plot_persistence_diagram,
)

__all__ = ["plot_persistence_diagram"]

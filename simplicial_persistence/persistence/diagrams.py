# simplicial_persistence/persistence/diagrams.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..config import PersistenceConfig
from ..topology.boundary_matrix import BoundaryMatrix, make_boundary_matrix
from ..topology.simplicial_complex import SimplicialComplex
from .pairing import PersistencePairing, calculate_persistence_pairing

logger = logging.getLogger(__name__)

__all__ = [
    "PersistenceDiagram",
    "make_persistence_diagram",
    "make_persistence_diagrams",
    "calculate_persistence_diagram",
    "calculate_persistence_diagrams",
]


@dataclass
class PersistenceDiagram:
    """
    Birth/death points of one homology dimension.

    ``points`` is an ``(n, 2)`` float array; essential classes die at ``inf``.
    """
    dimension: int = 0
    points: np.ndarray = field(default_factory=lambda: np.zeros((0, 2), dtype=float))

    def __post_init__(self):
        pts = np.asarray(self.points, dtype=float)
        if pts.size == 0:
            pts = pts.reshape(0, 2)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"points must have shape (n, 2). Got {pts.shape}.")
        self.points = pts

    def __len__(self) -> int:
        return int(self.points.shape[0])

    @property
    def births(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def deaths(self) -> np.ndarray:
        return self.points[:, 1]

    def persistence(self) -> np.ndarray:
        """Lifetimes ``death - birth`` (``inf`` for essential points)."""
        return self.deaths - self.births

    def betti_number(self) -> int:
        """Number of essential points."""
        return int(np.isinf(self.deaths).sum())

    def remove_diagonal(self) -> "PersistenceDiagram":
        """Drop zero-persistence points in place. Returns ``self``."""
        keep = self.births != self.deaths
        self.points = self.points[keep]
        return self

    def sorted(self) -> "PersistenceDiagram":
        order = np.lexsort((self.deaths, self.births))
        return PersistenceDiagram(self.dimension, self.points[order])

    def to_text(self) -> str:
        lines = [f"# dimension {self.dimension}"]
        for b, d in self.points:
            lines.append(f"{b:g}\t{d:g}")
        return "\n".join(lines)


def make_persistence_diagrams(
    pairing: PersistencePairing,
    K: SimplicialComplex,
) -> List[PersistenceDiagram]:
    """
    Turn a pairing into one diagram per dimension ``0..dim(K)``, using the data
    values of ``K`` as birth and death coordinates. A point's dimension is the
    dimension of its creator.
    """
    top = K.dimension
    buckets: Dict[int, List[List[float]]] = {d: [] for d in range(top + 1)}
    for c, d in pairing:
        creator = K[c]
        death = float("inf") if d is None else K[d].data
        buckets[creator.dimension].append([creator.data, death])

    return [PersistenceDiagram(d, np.asarray(buckets[d], dtype=float)) for d in range(top + 1)]


def make_persistence_diagram(
    pairing: PersistencePairing,
    function_values: Sequence[float],
    *,
    dimension: int = 0,
) -> PersistenceDiagram:
    """Single diagram whose coordinates are looked up in ``function_values``."""
    values = np.asarray(function_values, dtype=float)
    points: List[List[float]] = []
    for c, d in pairing:
        if c >= len(values) or (d is not None and d >= len(values)):
            raise ValueError(
                f"function_values has {len(values)} entries but the pairing refers to index {max(c, d or 0)}."
            )
        points.append([values[c], float("inf") if d is None else values[d]])
    return PersistenceDiagram(dimension, np.asarray(points, dtype=float))


def calculate_persistence_diagrams(
    K: SimplicialComplex,
    *,
    dualize: Optional[bool] = None,
    include_all_unpaired_creators: Optional[bool] = None,
    reduction=None,
    representation=None,
    config: Optional[PersistenceConfig] = None,
) -> List[PersistenceDiagram]:
    """
    Persistence diagrams of a filtered complex, one per dimension.

    ``K`` must be in filtration order (e.g. ``K.sort_by_data()``). Keyword
    arguments override the corresponding fields of ``config``.
    """
    cfg = (config or PersistenceConfig()).replace(
        dualize=dualize,
        include_all_unpaired_creators=include_all_unpaired_creators,
        reduction=reduction,
        representation=representation,
    )

    M = make_boundary_matrix(K, representation=cfg.make_representation())
    if cfg.dualize:
        M = M.dualize()

    pairing = calculate_persistence_pairing(
        M,
        cfg.include_all_unpaired_creators,
        reduction=cfg.make_reduction(),
    )
    diagrams = make_persistence_diagrams(pairing, K)
    logger.debug("Diagram sizes per dimension: %s", [len(D) for D in diagrams])
    return diagrams


def calculate_persistence_diagram(
    M: BoundaryMatrix,
    function_values: Sequence[float],
    *,
    reduction=None,
) -> PersistenceDiagram:
    pairing = calculate_persistence_pairing(M, reduction=reduction)
    return make_persistence_diagram(pairing, function_values)

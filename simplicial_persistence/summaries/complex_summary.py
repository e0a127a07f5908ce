# simplicial_persistence/summaries/complex_summary.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..topology.simplicial_complex import SimplicialComplex

__all__ = ["ComplexSummary"]


# ----------------------------
# Summary data container
# ----------------------------

@dataclass
class ComplexSummary:
    """Simplex counts per dimension and the weight range of a filtered complex."""
    n_simplices: int
    counts: Tuple[int, ...]
    min_weight: float
    max_weight: float
    is_closed: bool

    @classmethod
    def from_complex(cls, K: SimplicialComplex) -> "ComplexSummary":
        counts = [0] * (K.dimension + 1)
        for s in K:
            counts[s.dimension] += 1
        weights = [s.data for s in K]
        return cls(
            n_simplices=len(K),
            counts=tuple(counts) if len(K) else (),
            min_weight=min(weights, default=0.0),
            max_weight=max(weights, default=0.0),
            is_closed=K.is_closed(),
        )

    @property
    def dimension(self) -> int:
        return max(len(self.counts) - 1, 0)

    # ----------------------------
    # formatting
    # ----------------------------

    def to_text(self) -> str:
        lines: List[str] = []
        lines.append("Simplicial Complex Summary")
        lines.append(f"  n_simplices = {self.n_simplices}, dimension = {self.dimension}")

        lines.append("")
        lines.append("  simplex counts:")
        if not self.counts:
            lines.append("    (empty complex)")
        for d, c in enumerate(self.counts):
            lines.append(f"    #( {d}-simplices ) = {c}")

        lines.append("")
        lines.append(f"  weights in [{self.min_weight:g}, {self.max_weight:g}]")

        if not self.is_closed:
            lines.append("")
            lines.append("  WARNING: complex is not closed under taking faces")

        return "\n".join(lines)

# simplicial_persistence/config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Union

__all__ = ["PersistenceConfig"]


@dataclass(frozen=True)
class PersistenceConfig:
    """
    Settings for computing persistence diagrams of a filtered complex.

    Notes
    -----
    - ``dualize`` computes the pairing on the anti-transposed boundary matrix
      (cohomology); the resulting pairs are identical, but reduction is usually
      much cheaper.
    - ``reduction`` and ``representation`` are names, classes or instances;
      names are resolved by :meth:`make_reduction` / :meth:`make_representation`.
    """
    reduction: Union[str, Any] = "standard"
    representation: Union[str, Any] = "sorted_list"
    dualize: bool = True
    include_all_unpaired_creators: bool = False

    def replace(self, **overrides: Any) -> "PersistenceConfig":
        """Copy with the non-None ``overrides`` applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def make_reduction(self):
        from .persistence.reduction import resolve_reduction
        return resolve_reduction(self.reduction)

    def make_representation(self):
        from .topology.representations import REPRESENTATIONS, ColumnRepresentation

        rep = self.representation
        if isinstance(rep, str):
            if rep not in REPRESENTATIONS:
                raise ValueError(f"Unknown representation {rep!r}; expected one of {sorted(REPRESENTATIONS)}.")
            return REPRESENTATIONS[rep]
        if isinstance(rep, ColumnRepresentation):
            return type(rep)
        return rep

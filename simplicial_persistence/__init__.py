# simplicial_persistence/__init__.py
from __future__ import annotations

"""
simplicial_persistence: persistent homology of filtered simplicial complexes and
clique complexes of weighted graphs.

Recommended usage:
    import simplicial_persistence as sp

Public API:
    - Curated user-facing symbols are re-exported from :mod:`simplicial_persistence.api`.
    - Subpackages are available as namespaces (``sp.geometry``, ``sp.viz``, ``sp.tools``)
      and are imported lazily so that matplotlib is only loaded when plotting.
"""

import importlib
from typing import Any

# ------------------------------------------------------------
# Version
# ------------------------------------------------------------
from ._version import __version__

# ------------------------------------------------------------
# Curated public API re-export
# ------------------------------------------------------------
from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all

# ------------------------------------------------------------
# Lazily imported subpackages
# ------------------------------------------------------------
_SUBPACKAGES = ("geometry", "io", "persistence", "summaries", "tools", "topology", "viz")

__all__ = ["__version__", *_api_all, *_SUBPACKAGES]


def __getattr__(name: str) -> Any:
    if name in _SUBPACKAGES:
        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    names = set(globals().keys())
    names.update(_SUBPACKAGES)
    return sorted(names)

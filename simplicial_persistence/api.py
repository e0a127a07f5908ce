from __future__ import annotations

"""
Public API re-exports for simplicial_persistence.

Import style:
    from simplicial_persistence.api import SimplicialComplex, make_boundary_matrix, calculate_persistence_diagrams, ...

Notes
-----
- Curated; helpers that only make sense inside a module stay there.
- Plotting lives in :mod:`simplicial_persistence.viz` and is not re-exported here.
"""

# ----------------------------
# Errors / configuration
# ----------------------------
from .errors import MissingFaceError, UnknownElementError
from .config import PersistenceConfig

# ----------------------------
# Complexes
# ----------------------------
from .topology.simplex import Simplex, data_order_key, lexicographic_order_key
from .topology.simplicial_complex import SimplicialComplex
from .topology.boundary_matrix import BoundaryMatrix, make_boundary_matrix
from .topology.representations import ColumnRepresentation, DenseZ2Columns, SortedListColumns

# ----------------------------
# Graph tools
# ----------------------------
from .topology.union_find import UnionFind, calculate_connected_components
from .topology.clique_graph import get_clique_graph
from .topology.maximal_cliques import (
    degeneracy_ordering,
    maximal_cliques_bron_kerbosch,
    maximal_cliques_koch,
)
from .topology.graphs import adjacency_from_complex, complex_from_graph, complex_to_graph

# ----------------------------
# Persistence
# ----------------------------
from .persistence.reduction import (
    ReductionAlgorithm,
    StandardReduction,
    TwistReduction,
    is_reduced,
)
from .persistence.pairing import PersistencePairing, calculate_persistence_pairing, remap_dualized
from .persistence.diagrams import (
    PersistenceDiagram,
    calculate_persistence_diagram,
    calculate_persistence_diagrams,
    make_persistence_diagram,
    make_persistence_diagrams,
)
from .persistence.connected_components import (
    calculate_zero_dimensional_persistence,
    zero_dimensional_pairing,
)

# ----------------------------
# Geometry
# ----------------------------
from .geometry.rips_expander import (
    RipsExpander,
    RipsExpanderTopDown,
    assign_maximum_weight,
    expand_flag_complex,
)
from .geometry.nearest_neighbours import BruteForce, KDTreeNeighbours, NearestNeighbours
from .geometry.vietoris_rips import build_vietoris_rips_complex, build_vietoris_rips_skeleton

# ----------------------------
# I/O / summaries
# ----------------------------
from .io.graphs import load_complex, load_graph
from .summaries.complex_summary import ComplexSummary

__all__ = [
    # errors / config
    "MissingFaceError",
    "UnknownElementError",
    "PersistenceConfig",
    # complexes
    "Simplex",
    "data_order_key",
    "lexicographic_order_key",
    "SimplicialComplex",
    "BoundaryMatrix",
    "make_boundary_matrix",
    "ColumnRepresentation",
    "SortedListColumns",
    "DenseZ2Columns",
    # graph tools
    "UnionFind",
    "calculate_connected_components",
    "get_clique_graph",
    "degeneracy_ordering",
    "maximal_cliques_bron_kerbosch",
    "maximal_cliques_koch",
    "complex_from_graph",
    "complex_to_graph",
    "adjacency_from_complex",
    # persistence
    "ReductionAlgorithm",
    "StandardReduction",
    "TwistReduction",
    "is_reduced",
    "PersistencePairing",
    "calculate_persistence_pairing",
    "remap_dualized",
    "PersistenceDiagram",
    "make_persistence_diagram",
    "make_persistence_diagrams",
    "calculate_persistence_diagram",
    "calculate_persistence_diagrams",
    "zero_dimensional_pairing",
    "calculate_zero_dimensional_persistence",
    # geometry
    "RipsExpander",
    "RipsExpanderTopDown",
    "assign_maximum_weight",
    "expand_flag_complex",
    "NearestNeighbours",
    "BruteForce",
    "KDTreeNeighbours",
    "build_vietoris_rips_skeleton",
    "build_vietoris_rips_complex",
    # io / summaries
    "load_graph",
    "load_complex",
    "ComplexSummary",
]

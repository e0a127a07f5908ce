# simplicial_persistence/io/graphs.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import networkx as nx

from ..topology.graphs import complex_from_graph
from ..topology.simplicial_complex import SimplicialComplex

logger = logging.getLogger(__name__)

__all__ = ["load_graph", "load_complex"]

PathLike = Union[str, Path]


def load_graph(path: PathLike) -> nx.Graph:
    """
    Read a weighted graph.

    ``.gml`` files are parsed with :func:`networkx.read_gml` using the numeric
    node ids; everything else is read as a whitespace-separated edge list
    ``u v weight`` with ``#`` comments.

    Raises FileNotFoundError for a missing file and ValueError when node ids
    or weights cannot be parsed.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: '{path}'")

    if path.suffix.lower() == ".gml":
        G = nx.read_gml(path, label="id")
    else:
        try:
            G = nx.read_weighted_edgelist(path, nodetype=int, comments="#")
        except TypeError as e:
            raise ValueError(f"Malformed edge list '{path}': {e}") from e

    logger.debug("Read '%s': %d nodes, %d edges", path, G.number_of_nodes(), G.number_of_edges())
    return nx.Graph(G)


def load_complex(path: PathLike) -> SimplicialComplex:
    """Weighted 1-skeleton of the graph stored at ``path``."""
    return complex_from_graph(load_graph(path))

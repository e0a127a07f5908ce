# simplicial_persistence/tools/clique_communities.py
"""
Extract clique communities from a weighted graph.

Usage:
    clique-communities FILE THRESHOLD K

Edges heavier than THRESHOLD are ignored. K is the maximum simplex dimension
used for the clique graphs, so K=2 yields 3-clique communities (2-simplices
have 3 vertices). Every community of the k-clique graph, k = 1..K, is printed
as one line ``[{a,b,c},{a,b,d},...]``; dimensions are separated by a blank line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

import networkx as nx

from ..geometry.rips_expander import RipsExpander
from ..io.graphs import load_complex
from ..summaries.complex_summary import ComplexSummary
from ..topology.clique_graph import get_clique_graph
from ..topology.simplex import Simplex
from ..topology.simplicial_complex import SimplicialComplex
from ..topology.union_find import calculate_connected_components

logger = logging.getLogger(__name__)

__all__ = ["clique_communities", "format_community", "main"]


def format_community(simplices: Sequence[Simplex]) -> str:
    return "[" + ",".join(s.format() for s in sorted(simplices)) + "]"


def clique_communities(K: SimplicialComplex, threshold: float, max_k: int) -> List[List[List[Simplex]]]:
    """
    Communities per dimension ``k = 1..max_k``.

    ``K`` is the weighted 1-skeleton. Returns a list (index ``k - 1``) of
    communities, each a sorted list of ``k``-simplices of the expanded complex.
    """
    K = K.filter(lambda s: s.data <= threshold)

    expander = RipsExpander()
    K = expander(K, max_k)
    K = expander.assign_maximum_weight(K)
    K.sort_by_data()

    out: List[List[List[Simplex]]] = []
    for k in range(1, max_k + 1):
        logger.info("* Extracting %d-cliques graph...", k)
        C = get_clique_graph(K, k)
        C.sort_by_data()
        logger.info("* %d-cliques graph has %d simplices", k, len(C))

        uf = calculate_connected_components(C)
        components = uf.components()
        logger.info("* %d-cliques graph has %d connected components", k, len(components))

        # union-find ids are indices into K
        out.append([sorted(K[v] for v in members) for members in components.values()])
    return out


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clique-communities",
        description=(
            "Extracts clique communities from FILE, which is supposed to be a weighted graph "
            "(edge list or GML). An edge whose weight is larger than THRESHOLD will be ignored. "
            "K denotes the maximum dimension of a simplex for the clique graph extraction, so "
            "K=2 results in 3-clique communities."
        ),
    )
    parser.add_argument("file", metavar="FILE", help="weighted graph (edge list or .gml)")
    parser.add_argument("threshold", metavar="THRESHOLD", type=float, help="maximum edge weight")
    parser.add_argument("k", metavar="K", type=int, help="maximum simplex dimension")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    if args.k < 1:
        parser.error(f"K must be >= 1, got {args.k}")
    return args


def main(argv: Optional[Sequence[str]] = None, *, stdout: Optional[TextIO] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )
    out = stdout or sys.stdout

    logger.info("* Reading '%s'...", args.file)
    try:
        K = load_complex(args.file)
    except (OSError, ValueError, nx.NetworkXError) as e:
        logger.error("Unable to read '%s': %s", args.file, e)
        return 1
    logger.debug("%s", ComplexSummary.from_complex(K).to_text())

    logger.info("* Filtering input data to threshold epsilon=%g", args.threshold)
    communities = clique_communities(K, args.threshold, args.k)

    for k, comms in enumerate(communities, start=1):
        if k > 1:
            out.write("\n")
        for community in comms:
            out.write(format_community(community) + "\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())

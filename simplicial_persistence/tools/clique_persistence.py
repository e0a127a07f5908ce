# simplicial_persistence/tools/clique_persistence.py
"""
Persistence diagrams of the clique (flag) complex of a weighted graph.

Usage:
    clique-persistence FILE K [--reduction {standard,twist}] [--no-dualize]

The graph is expanded up to dimension K, every simplex is weighted by its
heaviest edge, and one diagram per dimension is printed as ``birth<TAB>death``
lines under a ``# dimension d`` header; diagrams are separated by a blank line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

import networkx as nx

from ..config import PersistenceConfig
from ..geometry.rips_expander import EXPANDERS, expand_flag_complex
from ..io.graphs import load_complex
from ..persistence.diagrams import calculate_persistence_diagrams
from ..persistence.reduction import REDUCTIONS
from ..summaries.complex_summary import ComplexSummary

logger = logging.getLogger(__name__)

__all__ = ["main"]


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clique-persistence",
        description="Calculates persistence diagrams of the clique complex of the weighted graph in FILE.",
    )
    parser.add_argument("file", metavar="FILE", help="weighted graph (edge list or .gml)")
    parser.add_argument("k", metavar="K", type=int, help="maximum simplex dimension of the expansion")
    parser.add_argument("--reduction", choices=sorted(REDUCTIONS), default="standard")
    parser.add_argument("--expansion", choices=sorted(EXPANDERS), default="bottom_up")
    parser.add_argument("--no-dualize", dest="dualize", action="store_false", help="reduce the boundary matrix directly")
    parser.add_argument("--keep-diagonal", action="store_true", help="keep zero-persistence points")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    if args.k < 0:
        parser.error(f"K must be >= 0, got {args.k}")
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

    logger.info("* Expanding to dimension %d...", args.k)
    K = expand_flag_complex(K, args.k, strategy=args.expansion).sort_by_data()
    logger.debug("%s", ComplexSummary.from_complex(K).to_text())

    config = PersistenceConfig(reduction=args.reduction, dualize=args.dualize)
    diagrams = calculate_persistence_diagrams(K, config=config)

    for i, D in enumerate(diagrams):
        if not args.keep_diagonal:
            D.remove_diagonal()
        if i > 0:
            out.write("\n")
        out.write(D.sorted().to_text() + "\n")
        logger.info("* Dimension %d: %d points, Betti number %d", D.dimension, len(D), D.betti_number())
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())

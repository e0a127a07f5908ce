"""Command line entry points (``clique-communities``, ``clique-persistence``)."""

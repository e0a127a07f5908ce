"""Flag complex expansion and Vietoris-Rips complexes of point clouds."""

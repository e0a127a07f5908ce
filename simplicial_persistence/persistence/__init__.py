"""Boundary matrix reduction, persistence pairings and persistence diagrams."""

"""Simplices, filtered complexes, boundary matrices and graph tools on complexes."""

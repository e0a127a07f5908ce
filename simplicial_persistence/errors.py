# simplicial_persistence/errors.py
from __future__ import annotations

__all__ = ["MissingFaceError", "UnknownElementError"]


class MissingFaceError(KeyError):
    """A boundary face could not be found in the complex (the complex is not closed)."""

    def __init__(self, face, simplex):
        self.face = face
        self.simplex = simplex
        super().__init__(f"Face {face} of simplex {simplex} not found in complex; include all faces.")


class UnknownElementError(KeyError):
    """A Union-Find operation referenced an element that was never inserted."""

    def __init__(self, element):
        self.element = element
        super().__init__(f"Unknown element {element!r}.")

# tests/test_geometry.py
from __future__ import annotations

import numpy as np
import pytest

from simplicial_persistence.geometry.nearest_neighbours import BruteForce, KDTreeNeighbours, NearestNeighbours
from simplicial_persistence.geometry.vietoris_rips import build_vietoris_rips_complex, build_vietoris_rips_skeleton

LINE = np.array([0.0, 1.0, 3.0, 7.0])


@pytest.fixture(params=[BruteForce, KDTreeNeighbours])
def nn(request) -> NearestNeighbours:
    return request.param(LINE)


class TestNearestNeighbours:
    def test_protocol(self, nn):
        assert isinstance(nn, NearestNeighbours)
        assert nn.size() == 4

    def test_radius_search(self, nn):
        indices, distances = nn.radius_search(2.5)
        assert indices == [[1], [0, 2], [1], []]
        assert distances == [[1.0], [1.0, 2.0], [2.0], []]

    def test_neighbour_search(self, nn):
        indices, distances = nn.neighbour_search(2)
        assert indices == [[1, 2], [0, 2], [1, 0], [2, 1]]
        assert distances == [[1.0, 3.0], [1.0, 2.0], [2.0, 3.0], [4.0, 6.0]]
        assert nn.neighbour_search(0)[0] == [[], [], [], []]
        with pytest.raises(ValueError):
            nn.neighbour_search(-1)

    def test_implementations_agree(self):
        rng = np.random.default_rng(0)
        X = rng.normal(size=(40, 3))
        a = BruteForce(X).radius_search(0.8)[0]
        b = KDTreeNeighbours(X).radius_search(0.8)[0]
        assert a == b

    def test_rejects_bad_shapes(self):
        with pytest.raises(ValueError):
            BruteForce(np.zeros((2, 2, 2)))


class TestVietorisRips:
    def test_skeleton(self, nn):
        K = build_vietoris_rips_skeleton(nn, 2.5)
        assert [s.vertices for s in K] == [(0,), (1,), (2,), (3,), (0, 1), (1, 2)]
        assert K.find([1, 2]).data == 2.0
        with pytest.raises(ValueError):
            build_vietoris_rips_skeleton(nn, -1.0)

    def test_complex_is_filtration(self):
        rng = np.random.default_rng(3)
        X = rng.uniform(size=(15, 2))
        K = build_vietoris_rips_complex(X, epsilon=0.4, max_dim=2)
        assert K.dimension <= 2
        for j, s in enumerate(K):
            for face in s.boundary():
                assert K.index(face) < j
                assert K.find(face).data <= s.data

    def test_strategies_agree(self):
        rng = np.random.default_rng(5)
        X = rng.uniform(size=(12, 2))
        a = build_vietoris_rips_complex(X, 0.5, 3, strategy="bottom_up")
        b = build_vietoris_rips_complex(X, 0.5, 3, strategy="top_down")
        assert sorted(a.items()) == sorted(b.items())

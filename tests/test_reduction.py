# tests/test_reduction.py
from __future__ import annotations

import pytest

from simplicial_persistence.persistence.pairing import calculate_persistence_pairing
from simplicial_persistence.persistence.reduction import (
    StandardReduction,
    TwistReduction,
    is_reduced,
    resolve_reduction,
)
from simplicial_persistence.topology.boundary_matrix import BoundaryMatrix, make_boundary_matrix

from conftest import random_flag_complex


@pytest.mark.parametrize("algorithm", [StandardReduction, TwistReduction])
@pytest.mark.parametrize("representation", ["sorted_list", "dense_z2"])
class TestPostCondition:
    def test_lows_are_unique(self, algorithm, representation, triangle, square):
        for K in (triangle, square, random_flag_complex(3)):
            M = make_boundary_matrix(K, representation=representation)
            algorithm().reduce(M)
            assert is_reduced(M)

    def test_dualized_matrix(self, algorithm, representation):
        M = make_boundary_matrix(random_flag_complex(5), representation=representation).dualize()
        algorithm()(M)
        assert is_reduced(M)


class TestStandardReduction:
    def test_triangle(self, triangle):
        M = make_boundary_matrix(triangle)
        reducer = StandardReduction()
        reducer.reduce(M)
        assert M.columns() == [[], [], [], [0, 1], [0, 2], [], [3, 4, 5]]
        assert reducer.column_operations == 2

    def test_unreduced_matrix_is_detected(self):
        M = BoundaryMatrix.from_columns([[], [], [], [0, 1], [0, 1]])
        assert not is_reduced(M)


class TestTwistReduction:
    def test_clearing_skips_work(self, triangle):
        M = make_boundary_matrix(triangle)
        reducer = TwistReduction()
        reducer.reduce(M)
        assert reducer.column_operations == 0
        assert is_reduced(M)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_same_pairing_as_standard(self, seed):
        M = make_boundary_matrix(random_flag_complex(seed))
        assert calculate_persistence_pairing(M, reduction=TwistReduction()) == calculate_persistence_pairing(
            M, reduction=StandardReduction()
        )


class TestResolveReduction:
    def test_names_classes_and_instances(self):
        assert isinstance(resolve_reduction(None), StandardReduction)
        assert isinstance(resolve_reduction("twist"), TwistReduction)
        assert isinstance(resolve_reduction(TwistReduction), TwistReduction)
        reducer = StandardReduction()
        assert resolve_reduction(reducer) is reducer

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            resolve_reduction("chunk")

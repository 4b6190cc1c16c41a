"""Tests for algograph/core/validation.py"""

import math

import numpy as np
import pytest

from algograph import InvalidVertexError, InvalidWeightError
from algograph.core.validation import check_count, check_vertex, check_weight, is_integer


class TestIsInteger:
    @pytest.mark.parametrize("value", [0, 7, -3, np.int64(4)])
    def test_accepts_integers(self, value):
        assert is_integer(value)

    @pytest.mark.parametrize("value", [True, False, 1.0, "1", None])
    def test_rejects_other_values(self, value):
        assert not is_integer(value)


class TestCheckVertex:
    def test_returns_plain_int(self):
        vertex = check_vertex(np.int64(2), 3)
        assert vertex == 2
        assert type(vertex) is int

    @pytest.mark.parametrize("vertex", [-1, 3, 100])
    def test_out_of_range(self, vertex):
        with pytest.raises(InvalidVertexError) as excinfo:
            check_vertex(vertex, 3)
        assert excinfo.value.vertex == vertex
        assert excinfo.value.vertex_count == 3

    def test_empty_range(self):
        with pytest.raises(InvalidVertexError):
            check_vertex(0, 0)


class TestCheckCount:
    def test_names_the_count(self):
        with pytest.raises(ValueError, match="Element count"):
            check_count(-1, "Element count")

    def test_zero_is_allowed(self):
        assert check_count(0) == 0


class TestCheckWeight:
    @pytest.mark.parametrize("weight", [0, 3, 2.5, -1, math.inf, np.float64(1.5)])
    def test_accepts_real_numbers(self, weight):
        assert check_weight(weight) == weight

    @pytest.mark.parametrize("weight", [math.nan, np.float64("nan")])
    def test_rejects_nan(self, weight):
        with pytest.raises(InvalidWeightError):
            check_weight(weight)

    @pytest.mark.parametrize("weight", [True, "2", None, 1j])
    def test_rejects_non_real(self, weight):
        with pytest.raises(TypeError):
            check_weight(weight)

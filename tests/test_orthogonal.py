"""Tests for Gram-Schmidt orthogonalization."""

import itertools
import logging

import numpy as np
import pytest

from linkern.core.exceptions import DimensionError
from linkern.kernels.orthogonal import gram_schmidt
from linkern.kernels.product import dot_product


def test_gram_schmidt_two_vectors():
    """Test the hand-computed 3D example."""
    vectors = [np.array([1.0, 1.0, 0.0]), np.array([2.0, 0.0, 1.0])]

    result = gram_schmidt(vectors)

    assert len(result) == 2
    np.testing.assert_array_equal(result[0], [1.0, 1.0, 0.0])
    np.testing.assert_array_equal(result[1], [1.0, -1.0, 1.0])


def test_gram_schmidt_pairwise_orthogonal():
    """Test every pair of outputs has zero inner product."""
    rng = np.random.default_rng(9)
    vectors = list(rng.standard_normal((4, 6)))

    result = gram_schmidt(vectors)

    for i, j in itertools.combinations(range(len(result)), 2):
        assert abs(dot_product(result[i], result[j])) < 1e-10


def test_gram_schmidt_not_normalized():
    """Test the first vector is kept at its original length."""
    result = gram_schmidt([[3.0, 4.0], [1.0, 0.0]])

    np.testing.assert_array_equal(result[0], [3.0, 4.0])
    assert np.isclose(np.linalg.norm(result[0]), 5.0)


def test_gram_schmidt_empty():
    """Test empty input gives empty output."""
    assert gram_schmidt([]) == []


def test_gram_schmidt_dependent_input(caplog):
    """Test a dependent vector becomes zero and later ones stay finite."""
    vectors = [[1.0, 0.0, 0.0], [2.0, 0.0, 0.0], [1.0, 1.0, 0.0]]

    with caplog.at_level(logging.DEBUG, logger="linkern.kernels.orthogonal"):
        result = gram_schmidt(vectors)

    np.testing.assert_array_equal(result[1], [0.0, 0.0, 0.0])
    np.testing.assert_array_equal(result[2], [0.0, 1.0, 0.0])
    assert "linearly dependent" in caplog.text


def test_gram_schmidt_does_not_modify_inputs():
    """Test input vectors are left untouched."""
    v0 = np.array([1.0, 1.0, 0.0])
    v1 = np.array([2.0, 0.0, 1.0])

    gram_schmidt([v0, v1])

    np.testing.assert_array_equal(v1, [2.0, 0.0, 1.0])


def test_gram_schmidt_length_mismatch():
    """Test vectors of different lengths are rejected."""
    with pytest.raises(DimensionError):
        gram_schmidt([[1.0, 0.0], [1.0, 0.0, 0.0]])

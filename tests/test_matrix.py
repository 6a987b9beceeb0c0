"""Unit tests for the 4x4 matrix module.

Tests cover:
- Construction, indexing and approximate equality
- Multiplication by matrices and tuples
- Transpose, submatrix, minor, cofactor and determinant
- Inversion, including the singular-matrix error
"""

import math

import numpy as np
import pytest

from src.whitted.core.matrix import Mat4
from src.whitted.core.transforms import rotation_y, scaling, shearing, translation
from src.whitted.core.tup import Tup


@pytest.fixture
def matrix_a() -> Mat4:
    return Mat4(
        [
            [-5, 2, 6, -8],
            [1, -5, 1, 8],
            [7, 7, -6, -7],
            [1, -3, 7, 4],
        ]
    )


class TestConstruction:
    """Tests for building and reading matrices."""

    def test_cells_are_indexed_row_column(self):
        """Test element access by (row, col)."""
        m = Mat4(
            [
                [1, 2, 3, 4],
                [5.5, 6.5, 7.5, 8.5],
                [9, 10, 11, 12],
                [13.5, 14.5, 15.5, 16.5],
            ]
        )
        assert m[0, 0] == 1
        assert m[0, 3] == 4
        assert m[1, 0] == 5.5
        assert m[1, 2] == 7.5
        assert m[3, 2] == 15.5

    def test_default_is_identity(self):
        """Test Mat4() with no rows is the identity."""
        assert Mat4() == Mat4.identity()
        assert np.array_equal(Mat4().cells, np.identity(4))

    def test_wrong_shape_raises(self):
        """Test non-4x4 input raises ValueError."""
        with pytest.raises(ValueError, match="4x4"):
            Mat4([[1, 2], [3, 4]])

    def test_cells_are_read_only(self):
        """Test the underlying array cannot be mutated."""
        m = Mat4()
        with pytest.raises(ValueError):
            m.cells[0, 0] = 5.0

    def test_approximate_equality(self):
        """Test matrices within EPSILON compare equal."""
        a = Mat4([[1, 2, 3, 4]] * 4)
        b = Mat4([[1.000001, 2, 3, 4]] * 4)
        c = Mat4([[2, 3, 4, 5]] * 4)
        assert a == b
        assert a != c


class TestMultiplication:
    """Tests for matrix products."""

    def test_multiply_two_matrices(self):
        """Test the product of two matrices."""
        a = Mat4([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
        b = Mat4([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])
        expected = Mat4(
            [
                [20, 22, 50, 48],
                [44, 54, 114, 108],
                [40, 58, 110, 102],
                [16, 26, 46, 42],
            ]
        )
        assert a @ b == expected
        assert a * b == expected

    def test_multiply_by_tuple(self):
        """Test a matrix times a tuple treats the tuple as a column."""
        a = Mat4([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
        assert a @ Tup(1, 2, 3, 1) == Tup(18, 24, 33, 1)

    def test_identity_is_neutral(self, matrix_a):
        """Test multiplying by the identity changes nothing."""
        assert matrix_a @ Mat4.identity() == matrix_a
        t = Tup(1, 2, 3, 4)
        assert Mat4.identity() @ t == t


class TestDeterminant:
    """Tests for transpose, submatrix, minor, cofactor and determinant."""

    def test_transpose(self):
        """Test transposing swaps rows and columns."""
        a = Mat4([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        expected = Mat4([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        assert a.transpose() == expected
        assert Mat4.identity().transpose() == Mat4.identity()

    def test_submatrix(self):
        """Test removing a row and column from a 4x4 matrix."""
        a = Mat4([[-6, 1, 1, 6], [-8, 5, 8, 6], [-1, 0, 8, 2], [-7, 1, -1, 1]])
        expected = np.array([[-6, 1, 6], [-8, 8, 6], [-7, -1, 1]])
        assert np.array_equal(a.submatrix(2, 1), expected)

    def test_determinant_of_4x4(self):
        """Test cofactors and determinant of a 4x4 matrix."""
        a = Mat4([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert a.cofactor(0, 0) == pytest.approx(690)
        assert a.cofactor(0, 1) == pytest.approx(447)
        assert a.cofactor(0, 2) == pytest.approx(210)
        assert a.cofactor(0, 3) == pytest.approx(51)
        assert a.determinant() == pytest.approx(-4071)

    def test_minor_and_cofactor_sign(self):
        """Test the cofactor negates the minor at odd positions."""
        a = Mat4([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert a.cofactor(0, 1) == pytest.approx(-a.minor(0, 1))
        assert a.cofactor(0, 0) == pytest.approx(a.minor(0, 0))


class TestInverse:
    """Tests for matrix inversion."""

    def test_invertible_matrix(self):
        """Test a matrix with non-zero determinant is invertible."""
        a = Mat4([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]])
        assert a.determinant() == pytest.approx(-2120)
        assert a.is_invertible()

    def test_singular_matrix_raises(self):
        """Test inverting a singular matrix raises ValueError."""
        a = Mat4([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        assert not a.is_invertible()
        with pytest.raises(ValueError, match="not invertible"):
            a.inverse()

    def test_inverse_values(self, matrix_a):
        """Test the inverse of a known matrix."""
        assert matrix_a.determinant() == pytest.approx(532)
        assert matrix_a.cofactor(2, 3) == pytest.approx(-160)
        assert matrix_a.cofactor(3, 2) == pytest.approx(105)
        inverse = matrix_a.inverse()
        assert inverse[3, 2] == pytest.approx(-160 / 532)
        assert inverse[2, 3] == pytest.approx(105 / 532)
        expected = Mat4(
            [
                [0.21805, 0.45113, 0.24060, -0.04511],
                [-0.80827, -1.45677, -0.44361, 0.52068],
                [-0.07895, -0.22368, -0.05263, 0.19737],
                [-0.52256, -0.81391, -0.30075, 0.30639],
            ]
        )
        assert np.allclose(inverse.cells, expected.cells, atol=1e-5)

    def test_product_times_inverse_restores_matrix(self):
        """Test C = A * B implies C * inverse(B) = A."""
        a = Mat4([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        b = Mat4([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
        c = a @ b
        assert c @ b.inverse() == a

    def test_inverse_is_cached(self, matrix_a):
        """Test repeated inversion returns the same object."""
        assert matrix_a.inverse() is matrix_a.inverse()
        assert matrix_a.inverse().inverse() is matrix_a

    @pytest.mark.parametrize(
        "rows",
        [
            [[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]],
            [[8, -5, 9, 2], [7, 5, 6, 1], [-6, 0, 9, 6], [-3, 0, -9, -4]],
            [[9, 3, 0, 9], [-5, -2, -6, -3], [-4, 9, 6, 4], [-7, 6, 6, 2]],
            [[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]],
        ],
    )
    def test_double_inverse_restores_matrix(self, rows):
        """Test inverting a freshly built inverse gives back the original."""
        m = Mat4(rows)
        inverse = Mat4(m.inverse().cells)
        assert inverse.inverse() == m
        assert np.allclose(inverse.inverse().cells, rows, atol=1e-9)

    def test_double_inverse_of_transform_chain(self):
        """Test a composed transform survives inverting twice."""
        m = (
            translation(10, 5, 7)
            @ rotation_y(math.pi / 5)
            @ scaling(2, 3, 0.5)
            @ shearing(1, 0, 0.5, 0, 0, 2)
        )
        inverse = Mat4(m.inverse().cells)
        assert inverse.inverse() == m
        assert m @ inverse == Mat4.identity()

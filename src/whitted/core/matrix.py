"""4x4 affine matrices backed by NumPy.

Matrices are immutable row-major 4x4 arrays. Multiplying a ``Mat4`` by a
``Tup`` treats the tuple as a column vector, so ``transform @ point`` moves a
point into the transform's space.

The inverse is computed with cofactor expansion rather than ``np.linalg.inv``
so that singular matrices are detected against the same EPSILON the rest of
the renderer uses. Because a shape's transform is inverted for every ray it
sees, the inverse is computed once and cached on the matrix.

Example:
    >>> from src.whitted.core.matrix import Mat4
    >>> from src.whitted.core.tup import point
    >>> m = Mat4([[1, 0, 0, 5], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
    >>> m @ point(1, 2, 3)
    Tup(x=6.0, y=2.0, z=3.0, w=1.0)
"""

from __future__ import annotations

from typing import overload

import numpy as np
import numpy.typing as npt

from src.whitted.core.tup import EPSILON, Tup


def _determinant(cells: npt.NDArray[np.float64]) -> float:
    """Determinant by cofactor expansion along the first row."""
    if cells.shape == (2, 2):
        return float(cells[0, 0] * cells[1, 1] - cells[0, 1] * cells[1, 0])
    return sum(
        float(cells[0, col]) * _cofactor(cells, 0, col) for col in range(cells.shape[1])
    )


def _submatrix(cells: npt.NDArray[np.float64], row: int, col: int) -> npt.NDArray[np.float64]:
    return np.delete(np.delete(cells, row, axis=0), col, axis=1)


def _cofactor(cells: npt.NDArray[np.float64], row: int, col: int) -> float:
    minor = _determinant(_submatrix(cells, row, col))
    return minor if (row + col) % 2 == 0 else -minor


class Mat4:
    """An immutable 4x4 matrix of float64 values.

    Equality is approximate: two matrices compare equal when every cell
    differs by less than EPSILON.
    """

    __slots__ = ("_cells", "_inverse")

    def __init__(self, rows: npt.ArrayLike | None = None) -> None:
        """Create a matrix from nested rows. Omitting rows gives the identity.

        Raises:
            ValueError: If rows does not describe a 4x4 matrix.
        """
        if rows is None:
            cells = np.identity(4, dtype=np.float64)
        else:
            cells = np.array(rows, dtype=np.float64)
            if cells.shape != (4, 4):
                raise ValueError(f"Mat4 requires a 4x4 array, got shape {cells.shape}")
        cells.setflags(write=False)
        self._cells = cells
        self._inverse: Mat4 | None = None

    @classmethod
    def identity(cls) -> Mat4:
        return cls()

    @property
    def cells(self) -> npt.NDArray[np.float64]:
        """Read-only view of the underlying 4x4 array."""
        return self._cells

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._cells[index])

    def transpose(self) -> Mat4:
        return Mat4(self._cells.T)

    def submatrix(self, row: int, col: int) -> npt.NDArray[np.float64]:
        """Return the 3x3 array left after deleting one row and column."""
        return _submatrix(self._cells, row, col)

    def minor(self, row: int, col: int) -> float:
        return _determinant(self.submatrix(row, col))

    def cofactor(self, row: int, col: int) -> float:
        return _cofactor(self._cells, row, col)

    def determinant(self) -> float:
        return _determinant(self._cells)

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= EPSILON

    def inverse(self) -> Mat4:
        """Return the inverse matrix.

        Each cell of the inverse is ``cofactor(col, row) / det``, the transposed
        cofactor matrix divided by the determinant.

        Raises:
            ValueError: If the matrix is singular (|det| < EPSILON).
        """
        if self._inverse is None:
            det = self.determinant()
            if abs(det) < EPSILON:
                raise ValueError(f"Matrix is not invertible (determinant={det})")
            cells = np.empty((4, 4), dtype=np.float64)
            for row in range(4):
                for col in range(4):
                    cells[col, row] = self.cofactor(row, col) / det
            inverse = Mat4(cells)
            inverse._inverse = self
            self._inverse = inverse
        return self._inverse

    @overload
    def __matmul__(self, other: Mat4) -> Mat4: ...

    @overload
    def __matmul__(self, other: Tup) -> Tup: ...

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(self._cells @ other._cells)
        if isinstance(other, Tup):
            x, y, z, w = self._cells @ np.array((other.x, other.y, other.z, other.w))
            return Tup(float(x), float(y), float(z), float(w))
        return NotImplemented

    __mul__ = __matmul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.all(np.abs(self._cells - other._cells) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join(str(row) for row in self._cells.tolist())
        return f"Mat4([{rows}])"

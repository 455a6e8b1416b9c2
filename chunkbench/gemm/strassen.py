"""Square integer matrices and single-threaded Strassen multiplication."""

from __future__ import annotations

from dataclasses import dataclass

MATRIX_SIZE = 32768
SINGLE_SIZE = 16
THREADS_NUM = 16
BRANCH_NUM = 21


@dataclass
class Matrix:
    """A square matrix stored row-major."""

    row: int
    col: int
    elements: list[int]

    @classmethod
    def filled(cls, row_size: int, element_value: int) -> Matrix:
        return cls(row_size, row_size, [element_value] * (row_size * row_size))

    @classmethod
    def from_vec(cls, elements: list[int], row_size: int) -> Matrix:
        count = row_size * row_size
        if len(elements) < count:
            raise ValueError(f"need {count} elements, got {len(elements)}")
        return cls(row_size, row_size, list(elements[:count]))

    def to_vec(self) -> list[int]:
        return list(self.elements)

    def _check_same_shape(self, b: Matrix) -> None:
        if self.row != b.row or self.col != b.col:
            raise ValueError("Matrix size not match")

    def add(self, b: Matrix) -> Matrix:
        """Add ``b`` in place and return self."""
        self._check_same_shape(b)
        self.elements = [x + y for x, y in zip(self.elements, b.elements)]
        return self

    def sub(self, b: Matrix) -> Matrix:
        """Subtract ``b`` in place and return self."""
        self._check_same_shape(b)
        self.elements = [x - y for x, y in zip(self.elements, b.elements)]
        return self

    def _block_row(self, row: int, col: int, width: int) -> list[int]:
        start = row * self.col + col
        return self.elements[start:start + width]

    def subadd(self, row0: int, col0: int, row1: int, col1: int, width: int) -> Matrix:
        """Sum of two ``width`` square blocks of this matrix."""
        out: list[int] = []
        for i in range(width):
            left = self._block_row(row0 + i, col0, width)
            right = self._block_row(row1 + i, col1, width)
            out.extend(x + y for x, y in zip(left, right))
        return Matrix(width, width, out)

    def subsub(self, row0: int, col0: int, row1: int, col1: int, width: int) -> Matrix:
        """Difference of two ``width`` square blocks of this matrix."""
        out: list[int] = []
        for i in range(width):
            left = self._block_row(row0 + i, col0, width)
            right = self._block_row(row1 + i, col1, width)
            out.extend(x - y for x, y in zip(left, right))
        return Matrix(width, width, out)

    def subcpy(self, row0: int, col0: int, width: int) -> Matrix:
        """Copy of a ``width`` square block of this matrix."""
        out: list[int] = []
        for i in range(width):
            out.extend(self._block_row(row0 + i, col0, width))
        return Matrix(width, width, out)

    @staticmethod
    def constitute(m11: Matrix, m12: Matrix, m21: Matrix, m22: Matrix) -> Matrix:
        """Assemble four equal quadrants into one matrix of twice the size."""
        m0 = m11.row
        out: list[int] = []
        for top, bottom in ((m11, m12), (m21, m22)):
            for i in range(m0):
                out.extend(top.elements[i * m0:(i + 1) * m0])
                out.extend(bottom.elements[i * m0:(i + 1) * m0])
        return Matrix(m0 * 2, m0 * 2, out)


def mul_simple(a: Matrix, b: Matrix, m0: int) -> Matrix:
    """Schoolbook multiplication of two ``m0`` square matrices."""
    columns = [b.elements[j::m0][:m0] for j in range(m0)]
    out: list[int] = []
    for i in range(m0):
        row = a.elements[i * m0:(i + 1) * m0]
        out.extend(sum(x * y for x, y in zip(row, column)) for column in columns)
    return Matrix(m0, m0, out)


def strassen_mul(a: Matrix, b: Matrix, leaf_size: int = SINGLE_SIZE) -> Matrix:
    """Multiply with Strassen's method, falling back to schoolbook at ``leaf_size``."""
    m0 = a.row
    if m0 <= leaf_size or m0 % 2:
        return mul_simple(a, b, m0)

    m = m0 // 2
    tl, tr, bl, br = (0, 0), (0, m), (m, 0), (m, m)

    aa1 = a.subadd(*tl, *br, m)
    aa2 = a.subadd(*bl, *br, m)
    aa3 = a.subcpy(*tl, m)
    aa4 = a.subcpy(*br, m)
    aa5 = a.subadd(*tl, *tr, m)
    aa6 = a.subsub(*bl, *tl, m)
    aa7 = a.subsub(*tr, *br, m)

    bb1 = b.subadd(*tl, *br, m)
    bb2 = b.subcpy(*tl, m)
    bb3 = b.subsub(*tr, *br, m)
    bb4 = b.subsub(*bl, *tl, m)
    bb5 = b.subcpy(*br, m)
    bb6 = b.subadd(*tl, *tr, m)
    bb7 = b.subadd(*bl, *br, m)

    m1 = strassen_mul(aa1, bb1, leaf_size)
    m2 = strassen_mul(aa2, bb2, leaf_size)
    m3 = strassen_mul(aa3, bb3, leaf_size)
    m4 = strassen_mul(aa4, bb4, leaf_size)
    m5 = strassen_mul(aa5, bb5, leaf_size)
    m6 = strassen_mul(aa6, bb6, leaf_size)
    m7 = strassen_mul(aa7, bb7, leaf_size)

    m7.sub(m5).add(m4).add(m1)
    m5.add(m3)
    m4.add(m2)
    m1.sub(m2).add(m3).add(m6)
    return Matrix.constitute(m7, m5, m4, m1)
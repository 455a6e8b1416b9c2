import random

import pytest

from chunkbench.gemm.strassen import Matrix, mul_simple, strassen_mul


def _random_matrix(n, seed):
    rng = random.Random(seed)
    return Matrix.from_vec([rng.randint(-9, 9) for _ in range(n * n)], n)


@pytest.mark.parametrize("n,leaf", [(2, 1), (4, 1), (8, 2), (16, 4), (32, 16)])
def test_strassen_matches_simple(n, leaf):
    a = _random_matrix(n, n)
    b = _random_matrix(n, n + 100)
    expected = mul_simple(a, b, n)
    assert strassen_mul(a, b, leaf).elements == expected.elements


def test_ones_product_equals_size():
    n = 32
    ones = Matrix.filled(n, 1)
    result = strassen_mul(ones, Matrix.filled(n, 1))
    assert set(result.elements) == {n}
    assert result.row == n and result.col == n


def test_identity_multiplication():
    n = 8
    identity = Matrix.from_vec([1 if i == j else 0 for i in range(n) for j in range(n)], n)
    a = _random_matrix(n, 3)
    assert strassen_mul(a, identity, 2).elements == a.elements
    assert mul_simple(identity, a, n).elements == a.elements


def test_quadrants_reassemble():
    a = _random_matrix(6, 5)
    parts = [a.subcpy(0, 0, 3), a.subcpy(0, 3, 3), a.subcpy(3, 0, 3), a.subcpy(3, 3, 3)]
    assert Matrix.constitute(*parts).elements == a.elements


def test_subadd_subsub_consistent_with_copies():
    a = _random_matrix(4, 9)
    tl = a.subcpy(0, 0, 2)
    br = a.subcpy(2, 2, 2)
    summed = a.subadd(0, 0, 2, 2, 2)
    diff = a.subsub(0, 0, 2, 2, 2)
    assert summed.elements == Matrix.from_vec(tl.to_vec(), 2).add(br).elements
    assert diff.elements == Matrix.from_vec(tl.to_vec(), 2).sub(br).elements


def test_add_then_sub_restores():
    a = _random_matrix(4, 11)
    b = _random_matrix(4, 12)
    original = a.to_vec()
    assert a.add(b).sub(b).elements == original


def test_size_mismatch_raises():
    with pytest.raises(ValueError, match="Matrix size not match"):
        Matrix.filled(2, 1).add(Matrix.filled(3, 1))
    with pytest.raises(ValueError, match="Matrix size not match"):
        Matrix.filled(2, 1).sub(Matrix.filled(3, 1))


def test_from_vec_copies_and_checks_length():
    data = [1, 2, 3, 4, 5]
    m = Matrix.from_vec(data, 2)
    assert m.elements == data[:4]
    out = m.to_vec()
    out[0] = 99
    assert m.elements[0] == data[0]
    with pytest.raises(ValueError):
        Matrix.from_vec([1, 2, 3], 2)
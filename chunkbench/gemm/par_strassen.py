"""Strassen multiplication fanned out over threads on flat row-major lists."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from math import isqrt
from typing import Callable

from .resources import ResourceManager
from .strassen import BRANCH_NUM, THREADS_NUM, Matrix, mul_simple, strassen_mul


def subadd(
    a: list[int],
    b: list[int],
    a_row_start: int,
    a_col_start: int,
    b_row_start: int,
    b_col_start: int,
    a_width: int,
    b_width: int,
    m: int,
) -> list[int]:
    """Sum of an ``m`` square block of ``a`` and one of ``b``."""
    out: list[int] = []
    for i in range(m):
        a_start = (i + a_row_start) * a_width + a_col_start
        b_start = (i + b_row_start) * b_width + b_col_start
        out.extend(
            x + y for x, y in zip(a[a_start:a_start + m], b[b_start:b_start + m])
        )
    return out


def subsub(
    a: list[int],
    b: list[int],
    a_row_start: int,
    a_col_start: int,
    b_row_start: int,
    b_col_start: int,
    a_width: int,
    b_width: int,
    m: int,
) -> list[int]:
    """Difference of an ``m`` square block of ``a`` and one of ``b``."""
    out: list[int] = []
    for i in range(m):
        a_start = (i + a_row_start) * a_width + a_col_start
        b_start = (i + b_row_start) * b_width + b_col_start
        out.extend(
            x - y for x, y in zip(a[a_start:a_start + m], b[b_start:b_start + m])
        )
    return out


def subcpy(
    a: list[int], a_row_start: int, a_col_start: int, a_width: int, m: int
) -> list[int]:
    """Copy of an ``m`` square block of ``a``."""
    out: list[int] = []
    for i in range(m):
        start = (i + a_row_start) * a_width + a_col_start
        out.extend(a[start:start + m])
    return out


def constitute(
    m11: list[int], m12: list[int], m21: list[int], m22: list[int]
) -> list[int]:
    """Assemble four equal square quadrants into one matrix of twice the width."""
    m = isqrt(len(m11))
    out: list[int] = []
    for left, right in ((m11, m12), (m21, m22)):
        for i in range(m):
            out.extend(left[i * m:(i + 1) * m])
            out.extend(right[i * m:(i + 1) * m])
    return out


def add(a: list[int], b: list[int]) -> None:
    """Add ``b`` into ``a`` in place."""
    a[:] = [x + y for x, y in zip(a, b)]


def sub(a: list[int], b: list[int]) -> None:
    """Subtract ``b`` from ``a`` in place."""
    a[:] = [x - y for x, y in zip(a, b)]


def single_strassen_mul(
    a: list[int],
    b: list[int],
    m0: int,
    computes: ResourceManager,
    resource: int,
) -> list[int]:
    """Multiply on one thread, then give ``resource`` back to ``computes``."""
    try:
        return strassen_mul(Matrix.from_vec(a, m0), Matrix.from_vec(b, m0)).to_vec()
    finally:
        computes.release_resource(resource)


def _operands(a: list[int], b: list[int], m0: int) -> list[tuple[list[int], list[int]]]:
    m = m0 // 2
    tl, tr, bl, br = (0, 0), (0, m), (m, 0), (m, m)
    aa = [
        subadd(a, a, *tl, *br, m0, m0, m),
        subadd(a, a, *bl, *br, m0, m0, m),
        subcpy(a, *tl, m0, m),
        subcpy(a, *br, m0, m),
        subadd(a, a, *tl, *tr, m0, m0, m),
        subsub(a, a, *bl, *tl, m0, m0, m),
        subsub(a, a, *tr, *br, m0, m0, m),
    ]
    bb = [
        subadd(b, b, *tl, *br, m0, m0, m),
        subcpy(b, *tl, m0, m),
        subsub(b, b, *tr, *br, m0, m0, m),
        subsub(b, b, *bl, *tl, m0, m0, m),
        subcpy(b, *br, m0, m),
        subadd(b, b, *tl, *tr, m0, m0, m),
        subadd(b, b, *bl, *br, m0, m0, m),
    ]
    return list(zip(aa, bb))


def _combine(products: list[list[int]]) -> list[int]:
    m1, m2, m3, m4, m5, m6, m7 = products
    sub(m7, m5)
    add(m7, m4)
    add(m7, m1)
    add(m5, m3)
    add(m4, m2)
    sub(m1, m2)
    add(m1, m3)
    add(m1, m6)
    return constitute(m7, m5, m4, m1)


def _run_threads(tasks: list[Callable[[], list[int]]]) -> list[list[int]]:
    results: list[list[int] | None] = [None] * len(tasks)
    errors: list[BaseException] = []

    def runner(idx: int, task: Callable[[], list[int]]) -> None:
        try:
            results[idx] = task()
        except BaseException as exc:  # re-raised in the caller
            errors.append(exc)

    threads = [
        threading.Thread(target=runner, args=(idx, task))
        for idx, task in enumerate(tasks)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]
    return results  # type: ignore[return-value]


def par_strassen_mul(
    a: list[int],
    b: list[int],
    m0: int,
    level: int = 1,
    branches: ResourceManager | None = None,
    computes: ResourceManager | None = None,
) -> list[int]:
    """Multiply two ``m0`` square matrices given as flat row-major lists.

    Level 1 runs its seven products on their own threads, level 2 does the
    same while holding a branch resource per thread, and deeper levels hand
    each product to a single-threaded multiplication holding a compute resource.
    """
    if branches is None:
        branches = ResourceManager(BRANCH_NUM)
    if computes is None:
        computes = ResourceManager(THREADS_NUM)
    if m0 < 2 or m0 % 2:
        return mul_simple(Matrix.from_vec(a, m0), Matrix.from_vec(b, m0), m0).to_vec()

    m = m0 // 2
    operands = _operands(a, b, m0)

    if level == 1:
        tasks = [
            (lambda x=x, y=y: par_strassen_mul(x, y, m, level + 1, branches, computes))
            for x, y in operands
        ]
        return _combine(_run_threads(tasks))

    if level == 2:
        results: list[list[int] | None] = [None] * len(operands)
        errors: list[BaseException] = []
        threads = []

        def branch(idx: int, x: list[int], y: list[int], resource: int) -> None:
            try:
                results[idx] = par_strassen_mul(x, y, m, level + 1, branches, computes)
            except BaseException as exc:  # re-raised in the caller
                errors.append(exc)
            finally:
                branches.release_resource(resource)

        for idx, (x, y) in enumerate(operands):
            resource = branches.get_resource(0)
            thread = threading.Thread(target=branch, args=(idx, x, y, resource))
            thread.start()
            threads.append(thread)
        for thread in threads:
            thread.join()
        if errors:
            raise errors[0]
        return _combine(results)  # type: ignore[arg-type]

    with ThreadPoolExecutor(max_workers=len(operands)) as pool:
        futures = []
        for x, y in operands:
            resource = computes.get_resource(0)
            futures.append(pool.submit(single_strassen_mul, x, y, m, computes, resource))
        products = [future.result() for future in futures]
    return _combine(products)
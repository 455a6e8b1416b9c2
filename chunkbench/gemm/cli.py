"""Command that times a parallel Strassen multiplication of two all-ones matrices."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from .par_strassen import par_strassen_mul
from .resources import ResourceManager
from .strassen import BRANCH_NUM, MATRIX_SIZE, THREADS_NUM

_CORNER = 8


def _format_seconds(elapsed: float) -> str:
    text = repr(int(elapsed * 1000) / 1000)
    return text[:-2] if text.endswith(".0") else text


def run(size: int = MATRIX_SIZE, log_path: str | Path | None = None) -> list[int]:
    """Multiply two ``size`` square all-ones matrices, report the time and return the product."""
    branches = ResourceManager(BRANCH_NUM)
    computes = ResourceManager(THREADS_NUM)
    matrix_a = [1] * (size * size)
    matrix_b = [1] * (size * size)

    start = time.perf_counter()
    matrix_c = par_strassen_mul(matrix_a, matrix_b, size, 1, branches, computes)
    elapsed = time.perf_counter() - start
    print(f"Time elapsed in matrix multiplication function() is: {elapsed:.6f}s")

    if log_path is not None:
        Path(log_path).write_text(_format_seconds(elapsed) + "\n")

    for i in range(max(0, size - _CORNER), size):
        for j in range(max(0, size - _CORNER), size):
            print(f"matrix_c[{i}, {j}] = {matrix_c[i * size + j]}")
    return matrix_c


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parallel Strassen benchmark")
    parser.add_argument("--size", type=int, default=MATRIX_SIZE)
    parser.add_argument(
        "--log", default=str(Path.home() / "DRust_home/logs/gemm_single.txt")
    )
    args = parser.parse_args(argv)
    run(args.size, args.log)
    return 0
"""Populate and exercise the key-value store from CSV key traces."""

from __future__ import annotations

import argparse
import csv
import random
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator

from .store import NUM_SERVERS, READ_RATIO, SERVER_INDEX, KVStore

VALUE = b"x" * 32
_RANGE = 100_000_000
_PROGRESS_EVERY = 1_000_000


def read_keys(path: str | Path) -> Iterator[int]:
    """Yield the integer keys in the first column of a CSV file with a header."""
    with open(path, newline="") as handle:
        reader = csv.reader(handle)
        next(reader, None)
        for record in reader:
            if record:
                yield int(record[0])


def populate(store: KVStore, keys_path: str | Path) -> int:
    """Write the fixed value under every key of the trace; return the key count."""
    count = 0
    for key in read_keys(keys_path):
        if count % _PROGRESS_EVERY == 0:
            print(f"Populate {count} keys")
        store.put(key, VALUE)
        count += 1
    return count


def benchmark(
    store: KVStore,
    keys_path: str | Path,
    read_ratio: int = READ_RATIO,
    seed: int = 0,
) -> int:
    """Replay a trace as a mix of reads and writes; return the operation count."""
    rng = random.Random(seed)
    threshold = read_ratio * _RANGE // 10
    count = 0
    start = time.perf_counter()
    for key in read_keys(keys_path):
        if rng.randrange(_RANGE) < threshold:
            if store.get(key) != VALUE:
                raise RuntimeError("Wrong value")
        else:
            store.put(key, VALUE)
        count += 1
    elapsed = time.perf_counter() - start
    throughput = count / elapsed if elapsed > 0 else float("inf")
    print(f"Thread Local Elapsed Time: {elapsed:.6f}s, throughput: {throughput}")
    return count


def _format_seconds(elapsed: float) -> str:
    text = repr(int(elapsed * 1000) / 1000)
    return text[:-2] if text.endswith(".0") else text


def _run_parallel(workers: int, func, *args) -> list:
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(func, *args) for _ in range(workers)]
        return [future.result() for future in futures]


def zipf_bench(
    populate_path: str | Path,
    bench_path: str | Path,
    num_servers: int = NUM_SERVERS,
    log_path: str | Path | None = None,
) -> float:
    """Populate a fresh store, run the benchmark on every worker and return its seconds."""
    store = KVStore()

    start = time.perf_counter()
    _run_parallel(num_servers, populate, store, populate_path)
    print(f"Populate Elapsed Time: {time.perf_counter() - start:.6f}s")

    start = time.perf_counter()
    operations = sum(_run_parallel(num_servers, benchmark, store, bench_path))
    elapsed = time.perf_counter() - start
    print(f"Total Elapsed Time: {elapsed:.6f}s")
    throughput = operations / elapsed if elapsed > 0 else float("inf")
    print(f"Total Throughput: {throughput}")

    if log_path is not None:
        Path(log_path).write_text(_format_seconds(elapsed) + "\n")
    return elapsed


def _dataset_path(index: int) -> str:
    return str(
        Path.home()
        / "DRust_home/dataset/dht/zipf"
        / f"gam_data_0.99_100000000_{NUM_SERVERS}_{index}.csv"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Key-value store benchmark")
    parser.add_argument("--populate", default=_dataset_path(SERVER_INDEX % NUM_SERVERS))
    parser.add_argument("--bench", default=_dataset_path((SERVER_INDEX + 1) % NUM_SERVERS))
    parser.add_argument("--servers", type=int, default=NUM_SERVERS)
    parser.add_argument("--log", default=str(Path.home() / "DRust_home/logs/kv_single.txt"))
    args = parser.parse_args(argv)
    zipf_bench(args.populate, args.bench, args.servers, args.log)
    return 0
"""Benchmark workloads: chunked dataframe, Strassen multiplication and a bucketed key-value store."""

__version__ = "0.1.0"
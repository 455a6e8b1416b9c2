[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkbench"
version = "0.1.0"
description = "Chunked columnar dataframe, Strassen matrix multiplication and bucketed key-value store workloads for benchmarking."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "dataframe",
    "groupby",
    "strassen",
    "matrix-multiplication",
    "key-value-store",
    "columnar",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chunkbench-gemm = "chunkbench.gemm.cli:main"
chunkbench-kv = "chunkbench.kv.kvbench:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkbench"]

[tool.hatch.build.targets.sdist]
include = ["chunkbench", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

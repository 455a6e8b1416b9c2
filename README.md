# chunkbench

This package provides three self-contained workloads that put load on memory
and threads: a columnar dataframe with group-by, Strassen matrix
multiplication, and a bucketed key-value store. It is written in pure Python
and has no runtime dependencies.

## Dataframe (`chunkbench.dataframe`)

The dataframe stores each column as a list of fixed-size byte chunks of
`CHUNK_SIZE` (1 MiB) bytes. Values inside a chunk are packed little-endian.

- `types`: defines `DataType` and its variants (`TypeKind`, `TimeUnit`,
  `DateUnit`, `IntervalUnit`) and the `PrimitiveType` storage table. Use
  `primitive_for(data_type)` to look up an entry. The module also defines
  `Field`, a named and typed column description.
- `anytype`: `AnyValue` holds a single typed value and has `to_string()` and
  `to_num()`. Further functions:
  - `to_str(data_type)` gives a short type name.
  - `from_data_type(data_type, value)` wraps a raw value, and parses strings
    for the integer, float and boolean types.
  - `is_numeric` and `is_integer` classify primitive types.
- `helpers`: little-endian byte conversions (`bytes_to_u32`,
  `u64_to_bytes` and the others), `integer_decode` / `floating_encode_f64`,
  `exec_concurrent`, `get_iter_capacity` and `datatype_size`.
- `chunk`: `Chunk` is one buffer. It supports `push`, `get`, `set`,
  `copy_from_vec` and `get_any`. `to_chunked_index` splits a row number into
  a chunk number and an offset within that chunk.
- `chunked_array`: `ChunkedArray` is a column of one primitive type spread
  over many chunks.
- `series`: `Series` is a named column. It supports `push_item`, `get`,
  `rawget`, `rename` and `take_iter_unchecked`.
- `frame`: `DataFrame` offers these operations:
  - column lookup with `column`, `f_column`, `select_idx` and
    `find_idx_by_name`;
  - `drop_in_place`;
  - row access with `get`;
  - gathering rows by index with `take_iter_unchecked`;
  - `groupby`.
- `groupby`: `GroupBy` groups rows by one or more 4-byte integer key
  columns. `keys()` returns the key columns with one row per group.
  `sum_series(name)` and `min_series(name)` return `Float64` series; both
  name their result `<name>_sum`. The functions `agg_sum`, `agg_min` and
  `group_tuples` are available directly.
- `csv_input` and `bench_utils` load data and report results:
  - `read_series` loads one CSV column into chunks.
  - `read_csv_from_file(path, types, line_cnt)` loads every column on its
    own thread.
  - `format_rows(df, rows)` returns the leading rows as text lines, with
    each value labelled by its type.
  - `print_time` writes a query time to a file object and echoes it.

```python
from chunkbench.dataframe.anytype import from_data_type
from chunkbench.dataframe.frame import DataFrame
from chunkbench.dataframe.series import Series
from chunkbench.dataframe.types import DataType

key = Series.new_from_name(DataType.UINT32, "id", 4)
val = Series.new_from_name(DataType.FLOAT64, "v", 4)
for row, (k, v) in enumerate([(1, 2.0), (2, 5.0), (1, 3.0), (2, 1.0)]):
    key.push_item(from_data_type(DataType.UINT32, k), row)
    val.push_item(from_data_type(DataType.FLOAT64, v), row)

grouped = DataFrame([key, val]).groupby(["id"])
sums = grouped.sum_series("v")
print([sums.get(i).value for i in range(len(sums))])   # [5.0, 6.0]
```

## Matrix multiplication (`chunkbench.gemm`)

- `strassen`: provides a square `Matrix`, the schoolbook `mul_simple`, and
  the recursive `strassen_mul(a, b, leaf_size)`. `strassen_mul` switches to
  the schoolbook product once a block is no larger than `leaf_size` (16 by
  default), or when the block width is odd.
- `resources`: `ResourceManager(num)` hands out resource ids and blocks
  while none is free. Use `get_resource` to take an id and
  `release_resource` to give it back.
- `par_strassen`: `par_strassen_mul(a, b, m0)` works on flat row-major
  lists and splits the work by recursion level:
  - At level 1, the seven products run on their own threads.
  - At level 2, each thread also holds a branch resource.
  - Deeper levels run `single_strassen_mul` while holding a compute
    resource.

```python
from chunkbench.gemm.strassen import Matrix, strassen_mul

a = Matrix.from_vec([1] * 64, 8)
b = Matrix.from_vec([1] * 64, 8)
c = strassen_mul(a, b, 2)
print(c.to_vec()[:8])   # every entry is 8
```

## Key-value store (`chunkbench.kv`)

- `store`: `bucket(key)` maps a key to one of 2**24 buckets. `KVStore`
  keeps one `GlobalEntry` per bucket, so keys that fall in the same bucket
  overwrite each other. `get(key)` returns the bucket's 32-byte value, which
  is all zero bytes if nothing has been written. `put(key, value)` requires
  exactly 32 bytes.
- `kvbench`: works on key files, which are CSV files with a header row and
  the key in the first column. The functions are:
  - `read_keys` yields the keys of a file.
  - `populate` writes a fixed value under every key.
  - `benchmark` replays a file as a seeded mix of reads and writes. It
    raises `RuntimeError` if a read returns an unexpected value.
  - `zipf_bench` runs both phases on a number of worker threads and
    returns the elapsed seconds of the benchmark phase.

## Command line

The package installs two commands:

```
chunkbench-gemm --size 256 --log gemm.txt
chunkbench-kv --populate keys_a.csv --bench keys_b.csv --servers 1 --log kv.txt
```

`chunkbench-gemm` multiplies two all-ones matrices of side `--size` with
the parallel Strassen algorithm. It prints the elapsed time and the
bottom-right 8×8 corner of the result, and writes the elapsed seconds to
`--log`.

`chunkbench-kv` populates a store from `--populate` and then runs the
benchmark on `--bench`. It uses `--servers` worker threads for each phase
and writes the benchmark's elapsed seconds to `--log`.

Both commands have defaults. The default paths point into a `DRust_home`
directory under your home directory, and that directory must already exist.
The default matrix size is 32768, which is far too large for pure Python.
Pass your own values.

## Limits

- There is no command for the dataframe workload. Use it from Python.
- Group keys must be 4-byte columns, and the first key column must be an
  integer type.
- Aggregation is limited to sum and minimum, over `Int32` or `Float64`
  columns. `Int32` values are read as unsigned.
- Null values cannot be stored. Pushing a null raises `ValueError`.
- Everything is held in process memory. Nothing is persisted or shared
  between machines.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```
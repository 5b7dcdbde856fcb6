"""Sorting integer files larger than memory with sorted runs and a k-way merge."""

from __future__ import annotations

import heapq
import os
import tempfile
from collections.abc import Iterable, Iterator
from contextlib import ExitStack
from itertools import islice
from pathlib import Path
from typing import TextIO

StrPath = str | os.PathLike


def _integers(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise ValueError(f"not an integer: {token!r}") from None


def _chunks(values: Iterator[int], size: int) -> Iterator[list[int]]:
    while chunk := list(islice(values, size)):
        yield chunk


def merge_sorted_files(paths: Iterable[StrPath], output_path: StrPath) -> int:
    """Merge files of ascending whitespace-separated integers into one.

    Writes one integer per line and returns how many were written.
    """
    written = 0
    with ExitStack() as stack:
        streams = [
            _integers(stack.enter_context(open(path, encoding="utf-8")))
            for path in paths
        ]
        out = stack.enter_context(open(output_path, "w", encoding="utf-8"))
        for value in heapq.merge(*streams):
            out.write(f"{value}\n")
            written += 1
    return written


def external_merge_sort(
    input_path: StrPath, output_path: StrPath, chunk_size: int
) -> int:
    """Sort the integers of ``input_path`` into ``output_path``.

    At most ``chunk_size`` values are held in memory at once. Sorted runs go
    to temporary files that are removed afterwards. Returns the number of runs.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    with tempfile.TemporaryDirectory() as workdir:
        runs: list[Path] = []
        with open(input_path, encoding="utf-8") as source:
            for chunk in _chunks(_integers(source), chunk_size):
                run = Path(workdir) / f"temp{len(runs)}.txt"
                run.write_text(
                    "".join(f"{value}\n" for value in sorted(chunk)), encoding="utf-8"
                )
                runs.append(run)
        merge_sorted_files(runs, output_path)
    return len(runs)
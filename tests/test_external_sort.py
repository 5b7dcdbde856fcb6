import random

import pytest

from dsakit.external_sort import external_merge_sort, merge_sorted_files


def _read(path):
    return [int(line) for line in path.read_text().splitlines()]


def test_external_sort_matches_sorted(tmp_path):
    rng = random.Random(11)
    values = [rng.randint(-500, 500) for _ in range(257)]
    source = tmp_path / "input.txt"
    source.write_text(" ".join(map(str, values)))
    target = tmp_path / "output.txt"
    external_merge_sort(source, target, 20)
    assert _read(target) == sorted(values)


def test_run_count_and_line_format(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("5\n3\n8\n4\n2\n7\n1\n10\n9\n6\n")
    target = tmp_path / "output.txt"
    runs = external_merge_sort(source, target, 3)
    assert runs == 4
    assert target.read_text() == "".join(f"{v}\n" for v in range(1, 11))


def test_single_chunk_when_chunk_is_large(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("3 1 2")
    target = tmp_path / "output.txt"
    assert external_merge_sort(str(source), str(target), 1000) == 1
    assert _read(target) == [1, 2, 3]


def test_empty_input(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("")
    target = tmp_path / "output.txt"
    assert external_merge_sort(source, target, 5) == 0
    assert target.read_text() == ""


def test_temporary_runs_are_not_left_beside_input(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("4 3 2 1")
    target = tmp_path / "output.txt"
    runs = external_merge_sort(source, target, 1)
    assert runs == 4
    assert _read(target) == [1, 2, 3, 4]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["input.txt", "output.txt"]


@pytest.mark.parametrize("chunk_size", [0, -3])
def test_rejects_non_positive_chunk(tmp_path, chunk_size):
    source = tmp_path / "input.txt"
    source.write_text("1 2")
    with pytest.raises(ValueError):
        external_merge_sort(source, tmp_path / "out.txt", chunk_size)


def test_rejects_non_integer_token(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("1 two 3")
    with pytest.raises(ValueError):
        external_merge_sort(source, tmp_path / "out.txt", 2)


def test_missing_input_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        external_merge_sort(tmp_path / "absent.txt", tmp_path / "out.txt", 2)


def test_merge_sorted_files(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    third = tmp_path / "c.txt"
    first.write_text("1\n4\n7\n")
    second.write_text("2 5 8")
    third.write_text("")
    target = tmp_path / "merged.txt"
    count = merge_sorted_files([first, second, third], target)
    assert count == 6
    assert _read(target) == [1, 2, 4, 5, 7, 8]


def test_merge_with_no_files(tmp_path):
    target = tmp_path / "merged.txt"
    assert merge_sorted_files([], target) == 0
    assert target.read_text() == ""
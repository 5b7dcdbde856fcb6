"""Finding dictionary words traced through a grid of letters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .tries import Trie

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """Words spelled by paths of horizontally or vertically adjacent cells.

    No cell is used twice in one word. Each word is reported once, in the
    order it is first found scanning start cells row by row.
    """
    grid = [list(row) for row in board]
    if not grid or not grid[0]:
        return []
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("all rows of the board must have the same length")
    rows = len(grid)
    trie = Trie(words)
    visited: set[tuple[int, int]] = set()
    found: dict[str, None] = {}

    def explore(row: int, col: int, path: str) -> None:
        if not (0 <= row < rows and 0 <= col < cols) or (row, col) in visited:
            return
        word = path + grid[row][col]
        if not trie.starts_with(word):
            return
        visited.add((row, col))
        if trie.contains(word):
            found.setdefault(word, None)
        for d_row, d_col in _STEPS:
            explore(row + d_row, col + d_col, word)
        visited.discard((row, col))

    for row in range(rows):
        for col in range(cols):
            explore(row, col, "")
    return list(found)
import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.word_search import find_words

BOARD = [
    ["o", "a", "a", "n"],
    ["e", "t", "a", "e"],
    ["i", "h", "k", "r"],
    ["i", "f", "l", "v"],
]


def test_example_board():
    assert find_words(BOARD, ["oath", "pea", "eat", "rain", "hike"]) == ["oath", "eat"]


def test_empty_board():
    assert find_words([], ["a"]) == []


def test_cell_not_reused():
    assert find_words([["a"]], ["aa"]) == []


def test_word_reported_once():
    assert find_words(["ab", "ba"], ["ab"]) == ["ab"]


def test_ragged_board_rejected():
    with pytest.raises(ValueError):
        find_words([["a", "b"], ["c"]], ["a"])


def test_snake_path_found():
    assert find_words(["ab", "dc"], ["abcd"]) == ["abcd"]


@given(
    st.lists(st.text(alphabet="ab", min_size=3, max_size=3), min_size=1, max_size=3),
    st.lists(st.text(alphabet="ab", min_size=1, max_size=4), max_size=6),
)
def test_found_words_are_distinct_dictionary_words(board, words):
    found = find_words(board, words)
    assert set(found) <= set(words)
    assert len(found) == len(set(found))
    letters = set("".join(board))
    assert all(set(word) <= letters for word in found)


@given(st.lists(st.text(alphabet="xy", min_size=2, max_size=2), min_size=2, max_size=2))
def test_single_letters_on_board_are_found(board):
    letters = sorted(set("".join(board)))
    assert sorted(find_words(board, letters)) == letters
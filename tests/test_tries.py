import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.tries import Trie, WordDictionary, longest_common_prefix

words_strategy = st.lists(st.text(alphabet="abc", max_size=5), max_size=12)


def test_autocomplete_example():
    trie = Trie(["apple", "app", "apt", "banana", "band", "bandana"])
    assert trie.autocomplete("ban") == ["banana", "band", "bandana"]


def test_autocomplete_missing_prefix():
    trie = Trie(["apple", "app"])
    assert trie.autocomplete("b") == []


def test_count_prefix_example():
    trie = Trie(["test", "tester", "team", "technical"])
    assert trie.count_prefix("te") == 4
    assert trie.count_prefix("test") == 2
    assert trie.count_prefix("toast") == 0


def test_delete_keeps_longer_word():
    trie = Trie(["abc", "abcd"])
    assert trie.contains("abc")
    assert trie.delete("abc") is True
    assert not trie.contains("abc")
    assert trie.contains("abcd")


def test_delete_missing_word():
    trie = Trie(["abc"])
    assert trie.delete("ab") is False
    assert trie.contains("abc")


def test_delete_prunes_branch():
    trie = Trie(["abc", "xyz"])
    trie.delete("abc")
    assert not trie.starts_with("a")
    assert trie.words() == ["xyz"]


def test_insert_and_search_example():
    trie = Trie(["apple", "app", "ape", "bat"])
    assert trie.contains("app")
    assert trie.contains("bat")
    assert not trie.contains("bad")
    assert "ape" in trie


def test_list_words_example():
    trie = Trie(["car", "cat", "cab", "dog"])
    assert trie.words() == ["cab", "car", "cat", "dog"]


def test_starts_with_example():
    trie = Trie(["hello", "helium"])
    assert trie.starts_with("he")
    assert not trie.starts_with("ho")


@pytest.mark.parametrize("word", ["catsdog", "dogcats", "sanddog", "catsand"])
def test_can_concatenate_example(word):
    trie = Trie(["cat", "cats", "dog", "sand", "and", "catdog"])
    assert trie.can_concatenate(word)


def test_cannot_concatenate():
    trie = Trie(["cat", "dog"])
    assert not trie.can_concatenate("catdo")


def test_longest_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_empty():
    assert longest_common_prefix([]) == ""


@pytest.mark.parametrize(
    "pattern, expected",
    [("pad", False), ("bad", True), (".ad", True), ("b..", True)],
)
def test_wildcard_search_example(pattern, expected):
    dictionary = WordDictionary()
    for word in ["bad", "dad", "mad"]:
        dictionary.add_word(word)
    assert dictionary.search(pattern) is expected


def test_wildcard_length_must_match():
    dictionary = WordDictionary()
    dictionary.add_word("bad")
    assert not dictionary.search("ba")


def test_add_word_rejects_wildcard():
    with pytest.raises(ValueError):
        WordDictionary().add_word("b.d")


@given(words_strategy)
def test_words_are_sorted_distinct_insertions(words):
    assert Trie(words).words() == sorted(set(words))


@given(words_strategy, st.text(alphabet="abc", max_size=3))
def test_count_prefix_counts_insertions(words, prefix):
    trie = Trie(words)
    assert trie.count_prefix(prefix) == sum(w.startswith(prefix) for w in words)


@given(words_strategy, st.text(alphabet="abc", max_size=5))
def test_delete_removes_only_that_word(words, target):
    trie = Trie(words)
    assert trie.delete(target) is (target in words)
    assert trie.words() == sorted(set(words) - {target})


@given(st.lists(st.text(alphabet="abc", max_size=5), min_size=1, max_size=8))
def test_longest_common_prefix_matches_commonprefix(words):
    assert longest_common_prefix(words) == os.path.commonprefix(words)


@given(words_strategy, st.text(alphabet="abc", max_size=4))
def test_wildcard_search_agrees_with_plain_search(words, pattern):
    dictionary = WordDictionary()
    for word in words:
        dictionary.add_word(word)
    assert dictionary.search(pattern) is (pattern in words)
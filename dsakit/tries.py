"""Prefix trees: word storage, prefix queries, deletion and wildcard search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

_WILDCARD = "."


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    ends: int = 0  # how many insertions end here
    passing: int = 0  # how many insertions pass through or end here


def _collect(node: _Node, prefix: str) -> Iterator[str]:
    if node.ends:
        yield prefix
    for char in sorted(node.children):
        yield from _collect(node.children[char], prefix + char)


class Trie:
    """A prefix tree of words.

    Words are kept with their multiplicity for prefix counting; listing and
    completion return each distinct word once, in lexicographic order.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def _walk(self, prefix: str) -> _Node | None:
        node = self._root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add a word; inserting it again raises its prefix counts again."""
        node = self._root
        node.passing += 1
        for char in word:
            node = node.children.setdefault(char, _Node())
            node.passing += 1
        node.ends += 1

    def contains(self, word: str) -> bool:
        """Tell whether ``word`` was inserted and not deleted since."""
        node = self._walk(word)
        return node is not None and node.ends > 0

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some stored word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def count_prefix(self, prefix: str) -> int:
        """Number of insertions of words that begin with ``prefix``."""
        node = self._walk(prefix)
        return node.passing if node is not None else 0

    def autocomplete(self, prefix: str) -> list[str]:
        """Stored words that begin with ``prefix``, in lexicographic order."""
        node = self._walk(prefix)
        if node is None:
            return []
        return list(_collect(node, prefix))

    def words(self) -> list[str]:
        """Every stored word, in lexicographic order."""
        return self.autocomplete("")

    def delete(self, word: str) -> bool:
        """Remove ``word`` and prune branches left without words.

        Returns False when the word was not stored.
        """
        path: list[tuple[_Node, str, _Node]] = []
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            path.append((node, char, child))
            node = child
        if not node.ends:
            return False
        removed = node.ends
        node.ends = 0
        self._root.passing -= removed
        for parent, char, child in path:
            child.passing -= removed
            if child.passing == 0:
                del parent.children[char]
                break
        return True

    def can_concatenate(self, word: str) -> bool:
        """Tell whether ``word`` splits into a sequence of stored words.

        A stored word counts as a sequence of one; the empty word always splits.
        """
        reachable = [False] * (len(word) + 1)
        reachable[0] = True
        for start in range(len(word)):
            if not reachable[start]:
                continue
            node = self._root
            for end, char in enumerate(word[start:], start + 1):
                child = node.children.get(char)
                if child is None:
                    break
                node = child
                if node.ends:
                    reachable[end] = True
        return reachable[-1]


def longest_common_prefix(words: Iterable[str]) -> str:
    """Longest prefix shared by all ``words``; empty for no words."""
    items = list(words)
    trie = Trie(items)
    total = len(items)
    node = trie._root
    prefix: list[str] = []
    while True:
        shared = [
            char for char, child in node.children.items() if child.passing == total
        ]
        if len(shared) != 1:
            break
        prefix.append(shared[0])
        node = node.children[shared[0]]
    return "".join(prefix)


class WordDictionary:
    """Words searchable by patterns in which ``.`` matches any one character."""

    def __init__(self) -> None:
        self._root = _Node()

    def add_word(self, word: str) -> None:
        """Store a word; it may not contain the wildcard character."""
        if _WILDCARD in word:
            raise ValueError(f"word may not contain {_WILDCARD!r}: {word!r}")
        node = self._root
        node.passing += 1
        for char in word:
            node = node.children.setdefault(char, _Node())
            node.passing += 1
        node.ends += 1

    def search(self, pattern: str) -> bool:
        """Tell whether a stored word matches ``pattern`` character for character."""

        def matches(node: _Node, index: int) -> bool:
            if index == len(pattern):
                return node.ends > 0
            char = pattern[index]
            if char == _WILDCARD:
                return any(matches(child, index + 1) for child in node.children.values())
            child = node.children.get(char)
            return child is not None and matches(child, index + 1)

        return matches(self._root, 0)
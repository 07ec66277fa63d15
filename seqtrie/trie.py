"""Prefix trie over sequences of hashable elements."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any, Callable, Hashable, Iterable, Iterator, Sequence

log = logging.getLogger("seqtrie.trie")

ROOT = 0


class TrieResult(Enum):
    FAILED = auto()
    PREFIX = auto()
    EXISTS = auto()


class TrieNode:
    """Single node in the node pool. Links are pool indices, not objects."""

    __slots__ = ("key", "parent", "children", "is_terminating")

    def __init__(self, key: Hashable | None = None, parent: int | None = None):
        self.key = key
        self.parent = parent  # None only for the root
        self.children: dict[Hashable, int] = {}
        self.is_terminating: bool = False

    def __repr__(self) -> str:
        mark = "*" if self.is_terminating else ""
        return f"TrieNode({self.key!r}{mark}, parent={self.parent}, children={len(self.children)})"


class Trie:
    """Prefix trie storing sequences (str, tuple, list, bytes, ...).

    Nodes live in a flat pool owned by the trie. Each node maps its child
    elements to pool indices and keeps its parent's index so that ``remove``
    can walk back up and prune dead branches. Released slots are reused by
    later insertions.

    Prefix enumeration yields members in pre-order: a member comes before
    its extensions, and siblings follow the order in which their element was
    first inserted under that parent.

    Parameters
    ----------
    collections : iterable of sequences, optional
        Sequences inserted on construction.
    factory : callable, optional
        Builds an enumeration result from a list of elements. By default a
        ``str`` prefix gives ``str`` results and any other prefix of type
        ``T`` gives ``T(elements)``.
    """

    def __init__(
        self,
        collections: Iterable[Sequence[Hashable]] | None = None,
        factory: Callable[[list[Any]], Sequence[Hashable]] | None = None,
    ):
        self._nodes: list[TrieNode | None] = [TrieNode()]
        self._free: list[int] = []
        self._size = 0
        self.factory = factory
        if collections is not None:
            self.update(collections)

    # core operations

    def insert(self, collection: Sequence[Hashable]) -> None:
        """Store ``collection``. Inserting a member again changes nothing."""
        index = ROOT
        node = self._node(index)
        for element in collection:
            child = node.children.get(element)
            if child is None:
                child = self._alloc(element, index)
                node.children[element] = child
            index = child
            node = self._node(index)
        if not node.is_terminating:
            node.is_terminating = True
            self._size += 1

    def contains(self, collection: Sequence[Hashable]) -> bool:
        index = self._walk(collection)
        return index is not None and self._node(index).is_terminating

    def remove(self, collection: Sequence[Hashable]) -> None:
        """Drop ``collection`` and prune the nodes only it was using.

        Removing something that is not a member is a no-op.
        """
        index = self._walk(collection)
        if index is None:
            return
        node = self._node(index)
        if not node.is_terminating:
            return

        node.is_terminating = False
        self._size -= 1

        pruned = 0
        while node.parent is not None and not node.children and not node.is_terminating:
            parent_index = node.parent
            parent = self._node(parent_index)
            del parent.children[node.key]
            self._release(index)
            pruned += 1
            index, node = parent_index, parent
        log.debug("Removed %r, pruned %d node(s)", collection, pruned)

    def collections_starting_with(self, prefix: Sequence[Hashable]) -> list[Sequence[Hashable]]:
        """All members that begin with ``prefix``, ``prefix`` itself included."""
        return list(self.iter_collections_starting_with(prefix))

    def iter_collections_starting_with(self, prefix: Sequence[Hashable]) -> Iterator[Sequence[Hashable]]:
        """Lazy version of :meth:`collections_starting_with`.

        Iterative DFS over a single shared element buffer; only the yielded
        results are materialised. The trie must not be mutated while the
        iterator is live.
        """
        start = self._walk(prefix)
        if start is None:
            return

        build = self._builder(prefix)
        buf = list(prefix)
        node = self._node(start)
        if node.is_terminating:
            yield build(buf)

        stack = [(node, iter(node.children.items()), len(buf))]
        while stack:
            node, children, depth = stack[-1]
            step = next(children, None)
            if step is None:
                stack.pop()
                continue
            element, child_index = step
            child = self._node(child_index)
            del buf[depth:]
            buf.append(element)
            if child.is_terminating:
                yield build(buf)
            stack.append((child, iter(child.children.items()), len(buf)))

    # additional functionality

    def update(self, collections: Iterable[Sequence[Hashable]]) -> None:
        """Insert every sequence of ``collections``."""
        for collection in collections:
            self.insert(collection)

    def has_prefix(self, prefix: Sequence[Hashable]) -> bool:
        """True if at least one member starts with ``prefix``."""
        return self.match(prefix) is not TrieResult.FAILED

    def match(self, collection: Sequence[Hashable]) -> TrieResult:
        """Classify ``collection`` against the stored members.

        Returns
        -------
        TrieResult
            ``EXISTS`` for a member, ``PREFIX`` when it only leads to longer
            members, ``FAILED`` when no member starts with it.
        """
        index = self._walk(collection)
        if index is None:
            return TrieResult.FAILED
        node = self._node(index)
        if node.is_terminating:
            return TrieResult.EXISTS
        # only the root can be a live non-terminating leaf
        if not node.children:
            return TrieResult.FAILED
        return TrieResult.PREFIX

    @property
    def node_count(self) -> int:
        """Live nodes, root included."""
        return len(self._nodes) - len(self._free)

    def __contains__(self, collection: Sequence[Hashable]) -> bool:
        return self.contains(collection)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"Trie(size={self._size}, nodes={self.node_count})"

    # node pool

    def _node(self, index: int) -> TrieNode:
        node = self._nodes[index]
        assert node is not None, f"dangling node index {index}"
        return node

    def _alloc(self, key: Hashable, parent: int) -> int:
        node = TrieNode(key, parent)
        if self._free:
            index = self._free.pop()
            self._nodes[index] = node
        else:
            index = len(self._nodes)
            self._nodes.append(node)
        return index

    def _release(self, index: int) -> None:
        assert index != ROOT, "the root is never released"
        self._nodes[index] = None
        self._free.append(index)

    def _walk(self, collection: Sequence[Hashable]) -> int | None:
        index = ROOT
        for element in collection:
            child = self._node(index).children.get(element)
            if child is None:
                return None
            index = child
        return index

    def _builder(self, prefix: Sequence[Hashable]) -> Callable[[list[Any]], Sequence[Hashable]]:
        if self.factory is not None:
            return self.factory
        if isinstance(prefix, str):
            return "".join
        return type(prefix)

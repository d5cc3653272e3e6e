"""
Ordered record index

An unbalanced binary search tree keyed by composite string keys. Events and
tickets share the tree; keys are compared lexicographically and are unique
across the whole index. Descents and traversals are iterative so a degenerate
tree (depth close to the node count) stays within the interpreter's limits.
"""

import logging
from typing import Callable, Iterator, List, Optional

from boxoffice.models import Record, RecordKind

logger = logging.getLogger(__name__)

RecordFilter = Callable[[Record], bool]


class IndexNode:
    """Tree node owning one record and its two subtrees"""

    __slots__ = ("key", "record", "left", "right")

    def __init__(self, key: str, record: Record):
        self.key = key
        self.record = record
        self.left: Optional["IndexNode"] = None
        self.right: Optional["IndexNode"] = None

    def __repr__(self) -> str:
        return f"IndexNode({self.key!r})"


class RecordIndex:
    """Binary search tree over event and ticket records"""

    def __init__(self):
        self.root: Optional[IndexNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: str) -> bool:
        return self._find_node(key) is not None

    def insert(self, key: str, record: Record) -> bool:
        """
        Add ``record`` as a new leaf under ``key``.

        An existing key is left untouched (first writer wins) and the call
        returns False. Callers that must report duplicates check first.
        """
        new_node = IndexNode(key, record)

        if self.root is None:
            self.root = new_node
            self._size += 1
            return True

        current = self.root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = new_node
                    break
                current = current.left
            elif key > current.key:
                if current.right is None:
                    current.right = new_node
                    break
                current = current.right
            else:
                logger.debug(f"Key {key} already indexed, insert ignored")
                return False

        self._size += 1
        return True

    def _find_node(self, key: str) -> Optional[IndexNode]:
        current = self.root
        while current is not None and current.key != key:
            current = current.left if key < current.key else current.right
        return current

    def search(self, key: str) -> Optional[Record]:
        """Return the record stored under ``key``, or None"""
        node = self._find_node(key)
        return node.record if node is not None else None

    @staticmethod
    def find_min(node: Optional[IndexNode]) -> Optional[IndexNode]:
        """Leftmost node of the subtree rooted at ``node``"""
        current = node
        while current is not None and current.left is not None:
            current = current.left
        return current

    def delete(self, key: str) -> bool:
        """
        Remove the node stored under ``key``.

        A node with two children takes over the key and record of its in-order
        successor, and the successor's original node is unlinked from the right
        subtree instead. Returns False when the key is absent.
        """
        parent: Optional[IndexNode] = None
        current = self.root
        while current is not None and current.key != key:
            parent = current
            current = current.left if key < current.key else current.right

        if current is None:
            return False

        if current.left is not None and current.right is not None:
            successor = self.find_min(current.right)
            target = current

            parent, current = current, current.right
            while current is not successor:
                parent, current = current, current.left

            target.key = successor.key
            target.record = successor.record

        # At most one child remains below ``current``
        child = current.left if current.left is not None else current.right
        if parent is None:
            self.root = child
        elif parent.left is current:
            parent.left = child
        else:
            parent.right = child

        current.left = current.right = None
        self._size -= 1
        return True

    def _in_order(self) -> Iterator[IndexNode]:
        stack: List[IndexNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def enumerate_records(
        self,
        kind: RecordKind,
        predicate: Optional[RecordFilter] = None,
    ) -> Iterator[Record]:
        """
        Yield records of ``kind`` in ascending key order.

        When ``predicate`` is given, only records for which it holds are
        yielded. Each call starts a fresh single-pass traversal; the index must
        not be mutated while the iterator is being consumed.
        """
        for node in self._in_order():
            record = node.record
            if record.kind is not kind:
                continue
            if predicate is None or predicate(record):
                yield record

    def collect_ticket_keys(self, event_code: int) -> List[str]:
        """Keys of every ticket booked against ``event_code``, in key order"""
        keys: List[str] = []
        for node in self._in_order():
            record = node.record
            if record.kind is RecordKind.TICKET and record.event_code == event_code:
                keys.append(node.key)
        return keys

    def keys(self) -> List[str]:
        return [node.key for node in self._in_order()]

    def height(self) -> int:
        """Number of levels in the tree, 0 when empty"""
        if self.root is None:
            return 0

        levels = 0
        frontier = [self.root]
        while frontier:
            levels += 1
            frontier = [
                child
                for node in frontier
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def clear(self) -> int:
        """Release every node children-first and return how many were released"""
        if self.root is None:
            return 0

        pending = [self.root]
        visited: List[IndexNode] = []
        while pending:
            node = pending.pop()
            visited.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)

        # Reversed pre-order (root, right, left) is a post-order walk
        for node in reversed(visited):
            node.left = node.right = None

        released = len(visited)
        self.root = None
        self._size = 0
        logger.debug(f"Released {released} index nodes")
        return released

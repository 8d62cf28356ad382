"""Sorted set of collected clues, kept in an unbalanced binary search tree."""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

logger = logging.getLogger("detective_quest.clue_set")


@dataclass
class _ClueNode:
    text: str
    left: Optional["_ClueNode"] = None
    right: Optional["_ClueNode"] = None


class ClueSet:
    """Binary search tree keyed by clue text.

    Smaller texts go left, larger texts go right. Inserting a clue that is
    already stored is a no-op, so no two nodes ever hold the same text.
    No rebalancing is done; the tree is at most as deep as the mansion has
    rooms.
    """

    def __init__(self) -> None:
        self._root: Optional[_ClueNode] = None
        self._size = 0

    def insert(self, clue: str) -> bool:
        """Add a clue. Returns False when it is empty or already present."""
        if not clue:
            return False
        if self._root is None:
            self._root = _ClueNode(clue)
            self._size = 1
            logger.debug("Clue stored as root: %r", clue)
            return True
        node = self._root
        while True:
            if clue < node.text:
                if node.left is None:
                    node.left = _ClueNode(clue)
                    break
                node = node.left
            elif clue > node.text:
                if node.right is None:
                    node.right = _ClueNode(clue)
                    break
                node = node.right
            else:
                logger.debug("Clue already collected: %r", clue)
                return False
        self._size += 1
        logger.debug("Clue stored: %r (%d total)", clue, self._size)
        return True

    def contains(self, clue: str) -> bool:
        node = self._root
        while node is not None:
            if clue < node.text:
                node = node.left
            elif clue > node.text:
                node = node.right
            else:
                return True
        return False

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.contains(clue)

    def __iter__(self) -> Iterator[str]:
        # in-order walk with an explicit stack
        stack: List[_ClueNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def sorted_clues(self) -> List[str]:
        """All stored clues in ascending order."""
        return list(self)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def depth(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        if self._root is None:
            return 0
        deepest = 0
        frontier = [(self._root, 1)]
        while frontier:
            node, level = frontier.pop()
            deepest = max(deepest, level)
            if node.left is not None:
                frontier.append((node.left, level + 1))
            if node.right is not None:
                frontier.append((node.right, level + 1))
        return deepest

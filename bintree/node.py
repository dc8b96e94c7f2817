"""Binary tree nodes with parent links and the usual tree measurements."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives.

    Creating a node records its parent but does not attach it to that parent;
    assign it to ``parent.left`` or ``parent.right``, or use
    :meth:`insert_left` / :meth:`insert_right`, which do both.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _walk(self) -> Iterator[Node]:
        """Yield every node of this subtree in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    @staticmethod
    def _levels(node: Optional[Node]) -> int:
        """Number of levels in the subtree at ``node``; 0 for no subtree."""
        if node is None:
            return 0
        levels = 0
        frontier = deque([node])
        while frontier:
            levels += 1
            for _ in range(len(frontier)):
                current = frontier.popleft()
                if current.left is not None:
                    frontier.append(current.left)
                if current.right is not None:
                    frontier.append(current.right)
        return levels

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; the old left child becomes its left child."""
        new = Node(value, self)
        new.left = self.left
        if self.left is not None:
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; the old right child becomes its right child."""
        new = Node(value, self)
        new.right = self.right
        if self.right is not None:
            self.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Detach this subtree from its parent and break all its links."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        for node in list(self._walk()):
            node.parent = None
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        for node in self._walk():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        stack: list[Node] = []
        current: Optional[Node] = self
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.value
            current = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def height(self) -> int:
        """Number of edges on the longest downward path; a leaf has height 0."""
        return self._levels(self) - 1

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        depth = 0
        node = self
        while node.parent is not None:
            node = node.parent
            depth += 1
        return depth

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return sum(1 for _ in self._walk())

    def leaves(self) -> int:
        """Number of leaves in this subtree."""
        return sum(1 for node in self._walk() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes in this subtree with at least one child."""
        return sum(1 for node in self._walk() if not node.is_leaf())

    def balance(self) -> int:
        """Level count of the left subtree minus that of the right subtree."""
        return self._levels(self.left) - self._levels(self.right)

    def is_full(self) -> bool:
        """True if every node has either no children or two."""
        return all(
            node.is_leaf() or (node.left is not None and node.right is not None)
            for node in self._walk()
        )

    def is_perfect(self) -> bool:
        """True if every level of the subtree is completely filled."""
        return self.size() == (1 << self._levels(self)) - 1

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        return parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def render(self) -> str:
        """Describe the tree node by node with its left and right children."""
        lines: list[str] = []
        for node in self._walk():
            lines.append(str(node.value))
            if node.left is not None:
                lines.append(f"Left of {node.value}: {node.left.value}")
            if node.right is not None:
                lines.append(f"Right of {node.value}: {node.right.value}")
        return "".join(line + "\n" for line in lines)

    def print_tree(self) -> None:
        """Write :meth:`render` to standard output."""
        sys.stdout.write(self.render())
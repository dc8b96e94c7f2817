"""Worked examples that build small trees and print what the tree methods report."""

from __future__ import annotations

import argparse
import io
import sys
from typing import Callable, Optional, Sequence, TextIO

from bintree.node import Node

_EXAMPLES: dict[int, Callable[[TextIO], None]] = {}


def _example(number: int) -> Callable[[Callable[[TextIO], None]], Callable[[TextIO], None]]:
    def register(func: Callable[[TextIO], None]) -> Callable[[TextIO], None]:
        _EXAMPLES[number] = func
        return func

    return register


def _left(parent: Node, value: int) -> Node:
    """Create a node and hang it as the left child of ``parent``."""
    parent.left = Node(value, parent)
    return parent.left


def _right(parent: Node, value: int) -> Node:
    """Create a node and hang it as the right child of ``parent``."""
    parent.right = Node(value, parent)
    return parent.right


def _three_node_tree() -> Node:
    root = Node(98)
    _left(root, 12)
    _right(root, 402)
    return root


def _base_tree() -> Node:
    root = _three_node_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven_node_tree() -> Node:
    root = _three_node_tree()
    _left(root.left, 6)
    _right(root.left, 56)
    _left(root.right, 256)
    _right(root.right, 512)
    return root


def _family_tree() -> Node:
    root = Node(98)
    _left(root, 12)
    _right(root, 128)
    _right(root.left, 54)
    _right(root.right, 402)
    _left(root.left, 10)
    _left(root.right, 110)
    _left(root.right.right, 200)
    _right(root.right.right, 512)
    return root


def _pointer(node: Optional[Node]) -> str:
    return "(nil)" if node is None else hex(id(node))


@_example(0)
def _node_creation(out: TextIO) -> None:
    root = Node(98)
    _left(root, 12)
    _left(root.left, 6)
    _right(root.left, 16)
    _right(root, 402)
    _left(root.right, 256)
    _right(root.right, 512)
    out.write(root.render())


@_example(1)
def _insert_left(out: TextIO) -> None:
    root = _three_node_tree()
    out.write(root.render())
    out.write("\n")
    root.right.insert_left(128)
    root.insert_left(54)
    out.write(root.render())


@_example(2)
def _insert_right(out: TextIO) -> None:
    root = _three_node_tree()
    out.write(root.render())
    out.write("\n")
    root.left.insert_right(54)
    root.insert_right(128)
    out.write(root.render())


@_example(3)
def _delete(out: TextIO) -> None:
    root = _base_tree()
    out.write(root.render())
    root.delete()


def _report_predicate(out: TextIO, label: str, check: Callable[[Node], bool]) -> None:
    root = _base_tree()
    out.write(root.render())
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a {label}: {int(check(node))}", file=out)


@_example(4)
def _is_leaf(out: TextIO) -> None:
    _report_predicate(out, "leaf", Node.is_leaf)


@_example(5)
def _is_root(out: TextIO) -> None:
    _report_predicate(out, "root", Node.is_root)


def _report_traversal(out: TextIO, walk: Callable[[Node], object]) -> None:
    root = _seven_node_tree()
    out.write(root.render())
    for value in walk(root):
        print(value, file=out)


@_example(6)
def _preorder(out: TextIO) -> None:
    _report_traversal(out, Node.preorder)


@_example(7)
def _inorder(out: TextIO) -> None:
    _report_traversal(out, Node.inorder)


@_example(8)
def _postorder(out: TextIO) -> None:
    _report_traversal(out, Node.postorder)


def _report_measure(out: TextIO, label: str, measure: Callable[[Node], int]) -> None:
    root = _base_tree()
    out.write(root.render())
    for node in (root, root.right, root.left.right):
        print(f"{label} {node.value}: {measure(node)}", file=out)


@_example(9)
def _height(out: TextIO) -> None:
    _report_measure(out, "Height from", Node.height)


@_example(10)
def _depth(out: TextIO) -> None:
    _report_measure(out, "Depth of", Node.depth)


@_example(11)
def _size(out: TextIO) -> None:
    _report_measure(out, "Size of", Node.size)


@_example(12)
def _leaves(out: TextIO) -> None:
    _report_measure(out, "Leaves in", Node.leaves)


@_example(13)
def _internal_nodes(out: TextIO) -> None:
    _report_measure(out, "Nodes in", Node.internal_nodes)


@_example(14)
def _balance(out: TextIO) -> None:
    root = _base_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    out.write(root.render())
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {node.balance():+d}", file=out)


@_example(15)
def _is_full(out: TextIO) -> None:
    root = _base_tree()
    _left(root.left, 10)
    out.write(root.render())
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(node.is_full())}", file=out)


@_example(16)
def _is_perfect(out: TextIO) -> None:
    root = _base_tree()
    _left(root.left, 10)
    _left(root.right, 10)
    out.write(root.render())
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    _left(root.right.right, 10)
    out.write(root.render())
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    _right(root.right.right, 10)
    out.write(root.render())
    print(f"Perfect: {int(root.is_perfect())}", file=out)


@_example(17)
def _sibling(out: TextIO) -> None:
    root = _family_tree()
    out.write(root.render())
    for node in (root.left, root.right.left, root.left.right):
        print(f"Sibling of {node.value}: {node.sibling().value}", file=out)
    print(f"Sibling of {root.value}: {_pointer(root.sibling())}", file=out)


@_example(18)
def _uncle(out: TextIO) -> None:
    root = _family_tree()
    out.write(root.render())
    for node in (root.right.left, root.left.right):
        print(f"Uncle of {node.value}: {node.uncle().value}", file=out)
    print(f"Uncle of {root.left.value}: {_pointer(root.left.uncle())}", file=out)


def available_examples() -> list[int]:
    """Numbers of the examples that can be run, in ascending order."""
    return sorted(_EXAMPLES)


def run_example(number: int) -> str:
    """Run one example and return everything it prints."""
    try:
        example = _EXAMPLES[number]
    except KeyError:
        raise ValueError(f"no example numbered {number}") from None
    out = io.StringIO()
    example(out)
    return out.getvalue()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the output of the chosen examples, or of all of them."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo",
        description="Build small binary trees and print what they report.",
    )
    parser.add_argument(
        "examples",
        nargs="*",
        type=int,
        choices=available_examples(),
        metavar="N",
        help="example numbers to run (default: all)",
    )
    args = parser.parse_args(argv)
    for number in args.examples or available_examples():
        sys.stdout.write(run_example(number))
    return 0


if __name__ == "__main__":
    sys.exit(main())
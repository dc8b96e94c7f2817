# bintree

A small binary tree of integers. Every node keeps a link to its parent. You
can ask a node for its depth, its sibling or its uncle. You can also ask for
its height, size, balance and shape.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.left = Node(12, root)
root.right = Node(402, root)

root.left.insert_right(54)   # becomes the right child of 12
root.insert_right(128)       # slides between 98 and 402

root.print_tree()
```

`Node(value, parent)` records the parent but does not attach the new node to
it. Assign the node to `parent.left` or `parent.right` yourself.

`insert_left` and `insert_right` create the node and attach it in one step.
They return the new node. The new node takes the place of the current child
on that side. The old child, if there is one, moves down to become the new
node's child on the same side.

## Asking about a tree

| Method             | Answer                                                                                      |
|--------------------|---------------------------------------------------------------------------------------------|
| `is_leaf()`        | True if the node has no children.                                                           |
| `is_root()`        | True if the node has no parent.                                                             |
| `height()`         | Number of edges on the longest path down to a leaf. A lone node has height 0.               |
| `depth()`          | Number of edges up to the root.                                                             |
| `size()`           | Number of nodes in the subtree.                                                             |
| `leaves()`         | Number of leaves in the subtree.                                                            |
| `internal_nodes()` | Number of nodes in the subtree with at least one child.                                     |
| `balance()`        | Number of levels in the left subtree minus the number of levels in the right subtree.       |
| `is_full()`        | True if every node has either zero or two children.                                         |
| `is_perfect()`     | True if every level is completely filled.                                                   |
| `sibling()`        | The other child of this node's parent, or `None`.                                           |
| `uncle()`          | The sibling of this node's parent, or `None`.                                               |

## Traversals

`preorder()`, `inorder()` and `postorder()` are generators. Each yields the
stored values in the order its name says:

```python
list(root.inorder())
```

## Text output

`render()` returns the text that `print_tree()` writes to standard output.
The nodes are listed in pre-order. Each node's value is followed by a line
for its left child and a line for its right child, where those exist:

```
98
Left of 98: 12
Right of 98: 128
...
```

## Removing a subtree

`delete()` first detaches the node from its parent. It then takes its whole
subtree apart, so every node in it is left with no parent and no children.

## Examples

The package has a set of numbered worked examples, from 0 to 18. Each one
builds a small tree and prints what the tree methods report. Run them from
the command line:

```
bintree-demo 14
bintree-demo 6 7 8
bintree-demo
```

With no numbers, every example runs in turn. A number that is not an example
is rejected with a usage error.

You can also use them from Python:

- `bintree.demo.run_example(number)` returns an example's output as text. It
  raises `ValueError` for an unknown number.
- `bintree.demo.available_examples()` lists the example numbers in ascending
  order.

## What it does not do

The tree does not keep its values in any order and does not search them. It
has no way to remove a single node while keeping its children, and no way to
save a tree or load one back. Trees exist only in memory, built by hand with
`Node`, `insert_left` and `insert_right`.
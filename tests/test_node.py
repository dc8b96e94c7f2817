import pytest

from bintree.node import Node


def _full_example():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _inserted_example():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _family_example():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_links():
    parent = Node(98)
    child = Node(12, parent)
    assert child.value == 12
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.left is None and parent.right is None


def test_render_full_example():
    expected = (
        "98\nLeft of 98: 12\nRight of 98: 402\n"
        "12\nLeft of 12: 6\nRight of 12: 56\n6\n56\n"
        "402\nLeft of 402: 256\nRight of 402: 512\n256\n512\n"
    )
    assert _full_example().render() == expected


def test_print_tree_writes_render(capsys):
    root = _full_example()
    root.print_tree()
    assert capsys.readouterr().out == root.render()


def test_insert_right_example():
    root = _inserted_example()
    expected = (
        "98\nLeft of 98: 12\nRight of 98: 128\n"
        "12\nRight of 12: 54\n54\n"
        "128\nRight of 128: 402\n402\n"
    )
    assert root.render() == expected
    assert root.right.right.parent is root.right
    assert root.right.parent is root


def test_insert_left_example():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    old_left = root.left
    new = root.insert_left(54)
    root.right.insert_left(128)
    assert root.left is new
    assert new.left is old_left
    assert old_left.parent is new
    assert new.parent is root
    assert new.right is None
    expected = (
        "98\nLeft of 98: 54\nRight of 98: 402\n"
        "54\nLeft of 54: 12\n12\n"
        "402\nLeft of 402: 128\n128\n"
    )
    assert root.render() == expected


def test_delete_detaches_subtree():
    root = _full_example()
    before = root.size()
    left = root.left
    removed = left.size()
    grandchild = left.left
    left.delete()
    assert root.left is None
    assert root.size() == before - removed
    assert left.parent is None and left.is_leaf()
    assert grandchild.parent is None


def test_delete_whole_tree():
    root = _full_example()
    leaf = root.right.right
    root.delete()
    assert root.is_leaf()
    assert leaf.parent is None


def test_is_leaf_and_is_root():
    root = _inserted_example()
    assert root.is_root() and not root.is_leaf()
    assert not root.right.is_root() and not root.right.is_leaf()
    assert root.right.right.is_leaf() and not root.right.right.is_root()


def test_traversals_full_example():
    root = _full_example()
    assert list(root.preorder()) == [98, 12, 6, 56, 402, 256, 512]
    assert list(root.inorder()) == [6, 12, 56, 98, 256, 402, 512]
    assert list(root.postorder()) == [6, 56, 12, 256, 512, 402, 98]


def test_traversals_visit_every_node_once():
    root = _family_example()
    values = sorted(root.preorder())
    assert sorted(root.inorder()) == values
    assert sorted(root.postorder()) == values
    assert len(values) == root.size()


def test_height_and_depth():
    root = _inserted_example()
    leaf = root.left.right
    assert leaf.height() == 0
    assert root.depth() == 0
    assert root.height() == max(root.left.height(), root.right.height()) + 1
    assert root.right.height() == root.right.right.height() + 1
    assert leaf.depth() == root.left.depth() + 1
    assert root.right.depth() == root.depth() + 1


def test_counts_are_consistent():
    root = _inserted_example()
    assert root.size() == len(list(root.preorder()))
    assert root.leaves() + root.internal_nodes() == root.size()
    assert root.size() == 1 + root.left.size() + root.right.size()
    leaf = root.left.right
    assert leaf.size() == leaf.leaves()
    assert leaf.internal_nodes() == 0 * leaf.size()
    assert root.right.leaves() == root.right.right.leaves()


def test_balance():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    assert root.balance() > 0
    assert root.right.balance() < 0
    assert root.left.left.right.balance() == 0


def test_balance_mirrors():
    left_heavy = Node(1)
    left_heavy.insert_left(2).insert_left(3)
    right_heavy = Node(1)
    right_heavy.insert_right(2).insert_right(3)
    assert left_heavy.balance() == -right_heavy.balance()
    assert left_heavy.balance() > 0


def test_is_full():
    root = _inserted_example()
    root.left.left = Node(10, root.left)
    assert not root.is_full()
    assert root.left.is_full()
    assert not root.right.is_full()
    assert _full_example().is_full()


def test_is_perfect_steps():
    root = _inserted_example()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    assert root.is_perfect()
    assert root.balance() == root.left.balance()
    root.right.right.left = Node(10, root.right.right)
    assert not root.is_perfect()
    root.right.right.right = Node(10, root.right.right)
    assert not root.is_perfect()
    assert root.right.right.is_perfect()


@pytest.mark.parametrize("path, expected_path", [
    ("l", "r"),
    ("rl", "rr"),
    ("lr", "ll"),
])
def test_sibling(path, expected_path):
    root = _family_example()

    def follow(steps):
        node = root
        for step in steps:
            node = node.left if step == "l" else node.right
        return node

    assert follow(path).sibling() is follow(expected_path)


def test_sibling_of_root_is_none():
    assert _family_example().sibling() is None


def test_uncle():
    root = _family_example()
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None
    assert root.right.right.left.uncle() is root.right.left
"""Red-black repair passes run after a raw binary-search-tree edit.

Both passes only ever recolor nodes and call the node rotation primitives;
neither changes the in-order sequence of items.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node
    from .tree import RBTree


def repair_insert(tree: RBTree, node: Node):
    """Restore the red-black properties after linking in the red leaf `node`."""
    # The root's parent is the (black) sentinel, so a red parent always has a
    # real grandparent.
    while node._parent._red:
        parent = node._parent
        grandparent = parent._parent

        if parent is grandparent._left:
            uncle = grandparent._right
            if uncle._red:
                parent._red = False
                uncle._red = False
                grandparent._red = True
                node = grandparent
                continue

            if node is parent._right:
                # inner grandchild: rotate into the outer position first
                node = parent
                node._rotate_left()
                parent = node._parent

            parent._red = False
            grandparent._red = True
            grandparent._rotate_right()
        else:
            uncle = grandparent._left
            if uncle._red:
                parent._red = False
                uncle._red = False
                grandparent._red = True
                node = grandparent
                continue

            if node is parent._left:
                node = parent
                node._rotate_right()
                parent = node._parent

            parent._red = False
            grandparent._red = True
            grandparent._rotate_left()

    tree._root._red = False


def repair_delete(tree: RBTree, node: Node):
    """Push the extra black carried by `node` up the tree until it is absorbed.

    `node` is the child that replaced a removed black node. It may be the
    sentinel, in which case its parent link has been pointed at the removed
    node's old parent.
    """
    while node is not tree._root and not node._red:
        parent = node._parent

        if node is parent._left:
            sibling = parent._right

            if sibling._red:
                sibling._red = False
                parent._red = True
                parent._rotate_left()
                sibling = parent._right

            if not sibling._left._red and not sibling._right._red:
                sibling._red = True
                node = parent
                continue

            if not sibling._right._red:
                sibling._left._red = False
                sibling._red = True
                sibling._rotate_right()
                sibling = parent._right

            sibling._red = parent._red
            parent._red = False
            sibling._right._red = False
            parent._rotate_left()
            node = tree._root
        else:
            sibling = parent._left

            if sibling._red:
                sibling._red = False
                parent._red = True
                parent._rotate_right()
                sibling = parent._left

            if not sibling._left._red and not sibling._right._red:
                sibling._red = True
                node = parent
                continue

            if not sibling._left._red:
                sibling._right._red = False
                sibling._red = True
                sibling._rotate_left()
                sibling = parent._left

            sibling._red = parent._red
            parent._red = False
            sibling._left._red = False
            parent._rotate_right()
            node = tree._root

    node._red = False

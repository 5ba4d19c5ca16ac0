"""Whole-tree consistency checks for `RBTree`.

These walk every node, so they are meant for tests and debugging rather than
for routine use.
"""

from __future__ import annotations

import logging
from typing import List

from .node import Node, SentinelNode
from .tree import RBTree

logger = logging.getLogger(__name__)


class InvariantError(AssertionError):
    """Raised when a tree violates one of the red-black properties."""


def _check(cond: bool, msg: str, *args):
    if not cond:
        raise InvariantError(msg.format(*args))


def _verify_node(tree: RBTree, cur: Node, seen: set, items: List) -> int:
    nil = tree._nil
    _check(id(cur) not in seen, "encountered loop in tree pointers at node {}", cur._item)
    seen.add(id(cur))
    _check(cur._tree is tree, "node {} does not belong to this tree", cur._item)

    if cur._left is not nil:
        _check(
            (not cur._red) or (not cur._left._red),
            "Red node {} has red left child {}",
            cur._item,
            cur._left._item,
        )
        _check(
            cur._left._parent is cur,
            "parent <> left child link broken at node {} (child = {})",
            cur._item,
            cur._left._item,
        )
        left_blk_height = _verify_node(tree, cur._left, seen, items)
    else:
        left_blk_height = 1

    items.append(cur._item)

    if cur._right is not nil:
        _check(
            (not cur._red) or (not cur._right._red),
            "Red node {} has red right child {}",
            cur._item,
            cur._right._item,
        )
        _check(
            cur._right._parent is cur,
            "parent <> right child link broken at node {} (child = {})",
            cur._item,
            cur._right._item,
        )
        right_blk_height = _verify_node(tree, cur._right, seen, items)
    else:
        right_blk_height = 1

    _check(
        left_blk_height == right_blk_height,
        "Left and right subtrees of {} have different black heights ({} != {})",
        cur._item,
        left_blk_height,
        right_blk_height,
    )

    if cur._red:
        return left_blk_height
    else:
        return left_blk_height + 1


def verify_tree(tree: RBTree) -> int:
    """Check every red-black invariant of `tree`.

    Returns the black height of the root (1 for an empty tree). Raises
    `InvariantError` describing the first violation found.
    """
    nil = tree._nil
    _check(isinstance(nil, SentinelNode), "tree sentinel has the wrong type")
    _check(not nil._red, "sentinel is not black")
    _check(
        nil._parent is nil and nil._left is nil and nil._right is nil,
        "sentinel links do not point back at the sentinel",
    )

    if tree._root is nil:
        _check(len(tree) == 0, "empty tree reports length {}", len(tree))
        return 1

    root = tree._root
    _check(not root._red, "RBTree root is not black")
    _check(root._parent is nil, "RBTree root has a parent")

    items: List = []
    height = _verify_node(tree, root, set(), items)

    for a, b in zip(items, items[1:]):
        _check(a < b, "items out of order in traversal: {} then {}", a, b)

    _check(
        len(tree) == len(items),
        "tree stored length differs from traversed number of nodes (got {}, expected {})",
        len(tree),
        len(items),
    )

    logger.debug("verified %d nodes, black height %d", len(items), height)
    return height

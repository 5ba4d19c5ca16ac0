from . import item
from . import node
from . import tree
from . import verify

from .item import Comparable, Entry
from .node import Node
from .tree import RBTree
from .verify import InvariantError, verify_tree

__all__ = [
    "Comparable",
    "Entry",
    "Node",
    "RBTree",
    "InvariantError",
    "verify_tree",
]

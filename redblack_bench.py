import logging
import os
import time
from typing import Optional, Tuple

import numpy as np
from numpy.random import default_rng

from redblack import Entry, RBTree, verify_tree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

BENCH_SIZE = int(os.environ.get("RBTREE_BENCH_SIZE", "200000"))
_seed = os.environ.get("RBTREE_BENCH_SEED")
BENCH_SEED: Optional[int] = int(_seed) if _seed else None


def make_dataset(n: int, seed: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Generate up to `n` distinct uint32 keys in random order, each paired
    with a random boolean flag."""
    rng = default_rng(seed)
    keys = np.unique(rng.integers(0, 2 ** 32, size=n, dtype=np.uint32))
    rng.shuffle(keys)
    flags = rng.random(len(keys)) < 0.5
    return keys, flags


def timed(name: str, fn, *args):
    start_time = time.perf_counter()
    ret = fn(*args)
    end_time = time.perf_counter()
    logger.info("{:<8s}: {:8.3f}s".format(name, end_time - start_time))
    return ret


def build(keys: np.ndarray, flags: np.ndarray) -> RBTree:
    tree = RBTree()
    for k, v in zip(keys.tolist(), flags.tolist()):
        tree.insert(Entry(k, v))
    return tree


def check_lookups(tree: RBTree, keys: np.ndarray, flags: np.ndarray, deleted: bool):
    """Look up every key; with `deleted` set, entries flagged False must be gone."""
    for k, v in zip(keys.tolist(), flags.tolist()):
        found = tree.get(Entry(k))
        if deleted and not v:
            if found is not None:
                raise RuntimeError("deleted key {} still present".format(k))
        elif found is None or found.value != v:
            raise RuntimeError("could not find {} -> {} (got {!r})".format(k, v, found))


def check_walk(tree: RBTree, keys: np.ndarray):
    node = tree.first()
    for k in np.sort(keys).tolist():
        if node is None or node.item.key != k:
            raise RuntimeError("walk diverged at key {}".format(k))
        node = tree.next(node)
    if node is not None:
        raise RuntimeError("walk ran past the last key")


def delete_unflagged(tree: RBTree, keys: np.ndarray, flags: np.ndarray) -> int:
    removed = 0
    for k in keys[~flags].tolist():
        if tree.delete(Entry(k)) is not None:
            removed += 1
    return removed


def run(n: int, seed: Optional[int] = None):
    keys, flags = make_dataset(n, seed)
    logger.info("generated %d distinct keys", len(keys))

    tree = timed("build", build, keys, flags)
    assert len(tree) == len(keys)

    timed("lookup", check_lookups, tree, keys, flags, False)
    timed("walk", check_walk, tree, keys)

    removed = timed("delete", delete_unflagged, tree, keys, flags)
    logger.info("removed %d keys, %d remain", removed, len(tree))

    timed("lookup", check_lookups, tree, keys, flags, True)
    height = timed("verify", verify_tree, tree)
    logger.info("black height after deletes: %d", height)


if __name__ == "__main__":
    run(BENCH_SIZE, BENCH_SEED)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
bst_sample.py
-------------

A small driver showing the tree going out of balance and back.

It builds a tree from random keys, prints every traversal, inserts a few keys
larger than anything already stored (which all land on the right spine),
checks the balance again, rebalances and prints the traversals once more.

Run it with ``python bst_sample.py --seed 7 --show-tree``.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, Sequence

from binary_search_tree import BinarySearchTree
from tree_render import pretty_format

logger = logging.getLogger(__name__)


def traverse_report(tree: BinarySearchTree) -> List[str]:
    """One labelled line per traversal order."""
    return [
        f"Level Order(I): {tree.level_order_iterative()}",
        f"Level Order(R): {tree.level_order_recursive()}",
        f"Preorder: {tree.preorder()}",
        f"Inorder: {tree.inorder()}",
        f"Postorder: {tree.postorder()}",
    ]


def sample(
    rng: random.Random,
    count: int = 15,
    low: int = 1,
    high: int = 100,
    extra: int = 5,
    extra_low: int = 150,
    extra_high: int = 300,
    show_tree: bool = False,
) -> List[str]:
    """
    Run the build / skew / rebalance scenario and return the report lines.

    ``count`` keys are drawn from ``[low, high]`` (duplicates are dropped by
    the tree), then ``extra`` keys from ``[extra_low, extra_high]`` are
    inserted one by one.
    """
    tree = BinarySearchTree(rng.randint(low, high) for _ in range(count))
    logger.debug("sample tree holds %d distinct keys", len(tree))

    lines = [f"Balanced: {tree.is_balanced()}"]
    lines.extend(traverse_report(tree))

    for _ in range(extra):
        tree.insert(rng.randint(extra_low, extra_high))
    lines.append(f"Balanced after inserts: {tree.is_balanced()}")
    if show_tree:
        lines.append(pretty_format(tree))

    tree.rebalance()
    lines.append(f"Balanced after rebalance: {tree.is_balanced()}")
    lines.extend(traverse_report(tree))
    if show_tree:
        lines.append(pretty_format(tree))
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="binary search tree sample run")
    parser.add_argument("-c", "--count", type=int, default=15,
                        help="number of random keys to build the tree from.")
    parser.add_argument("-e", "--extra", type=int, default=5,
                        help="number of large keys inserted before rebalancing.")
    parser.add_argument("-s", "--seed", type=int, default=None,
                        help="seed for the random number generator.")
    parser.add_argument("-t", "--show-tree", action="store_true",
                        help="draw the tree before and after rebalancing.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log tree construction at DEBUG level.")
    args = parser.parse_args(argv)

    if args.count < 0 or args.extra < 0:
        parser.error("--count and --extra must not be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    for line in sample(rng, count=args.count, extra=args.extra, show_tree=args.show_tree):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())

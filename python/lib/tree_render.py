#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
tree_render.py
--------------

Text rendering for :class:`binary_search_tree.BinarySearchTree`.

The tree is drawn sideways: the right subtree above its parent, the left
subtree below, so reading the output top to bottom gives the keys in
descending order.

>>> from binary_search_tree import BinarySearchTree
>>> print(pretty_format(BinarySearchTree([1, 2, 3])))
│   ┌── 3
└── 2
    └── 1
"""

from __future__ import annotations

import sys
from typing import IO, List, Optional

from binary_search_tree import BinarySearchTree, Node


def _render(node: Node, prefix: str, is_left: bool, lines: List[str]) -> None:
    if node.right is not None:
        _render(node.right, prefix + ("│   " if is_left else "    "), False, lines)
    lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.key}")
    if node.left is not None:
        _render(node.left, prefix + ("    " if is_left else "│   "), True, lines)


def pretty_format(tree: BinarySearchTree) -> str:
    """Return the sideways drawing of *tree*; an empty tree gives ``""``."""
    if tree.root is None:
        return ""
    lines: List[str] = []
    _render(tree.root, "", True, lines)
    return "\n".join(lines)


def pretty_print(tree: BinarySearchTree, file: Optional[IO[str]] = None) -> None:
    """Write :func:`pretty_format` output to *file* (stdout by default)."""
    text = pretty_format(tree)
    if text:
        print(text, file=file if file is not None else sys.stdout)

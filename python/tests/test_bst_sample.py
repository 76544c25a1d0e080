#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_bst_sample.py
------------------

Runs the sample driver with fixed seeds and checks its report.
"""

import contextlib
import io
import random
import unittest

from binary_search_tree import BinarySearchTree
from bst_sample import main, sample, traverse_report


class TestBstSample(unittest.TestCase):
    def test_traverse_report(self):
        lines = traverse_report(BinarySearchTree([1, 2, 3]))
        self.assertEqual(
            lines,
            [
                "Level Order(I): [2, 1, 3]",
                "Level Order(R): [2, 1, 3]",
                "Preorder: [2, 1, 3]",
                "Inorder: [1, 2, 3]",
                "Postorder: [1, 3, 2]",
            ],
        )

    def test_sample_report(self):
        lines = sample(random.Random(7))
        self.assertEqual(len(lines), 13)
        self.assertEqual(lines[0], "Balanced: True")
        self.assertTrue(lines[6].startswith("Balanced after inserts: "))
        self.assertEqual(lines[7], "Balanced after rebalance: True")

        # the inorder line after rebalancing holds the inorder line from
        # before plus the inserted keys
        before = lines[4]
        after = lines[11]
        self.assertTrue(before.startswith("Inorder: "))
        self.assertTrue(after.startswith("Inorder: "))
        self.assertGreaterEqual(len(after), len(before))

    def test_no_extra_inserts_keeps_balance(self):
        lines = sample(random.Random(1), extra=0)
        self.assertEqual(lines[6], "Balanced after inserts: True")
        self.assertEqual(lines[4], lines[11])

    def test_show_tree_adds_drawings(self):
        lines = sample(random.Random(3), show_tree=True)
        self.assertEqual(len(lines), 15)

    def test_main_prints_report(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = main(["--seed", "5", "--count", "10", "--extra", "3"])
        self.assertEqual(status, 0)
        self.assertIn("Balanced after rebalance: True", out.getvalue())

    def test_main_rejects_negative_counts(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--count", "-1"])


if __name__ == "__main__":
    unittest.main(verbosity=2)

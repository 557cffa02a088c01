"""
Tests for odd/even classification strategies
"""

import random
import unittest
import sys
from collections import Counter
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from seatsort.classification import (
    ClassificationStrategy, classify, classify_partition, classify_stable,
    classify_two_pointer, is_odd
)


class TestParity(unittest.TestCase):
    """Test the lowest-bit parity check"""

    def test_positive_values(self):
        self.assertTrue(is_odd(7))
        self.assertFalse(is_odd(8))
        self.assertFalse(is_odd(0))

    def test_negative_values(self):
        self.assertTrue(is_odd(-1))
        self.assertTrue(is_odd(-3))
        self.assertFalse(is_odd(-4))


class TestClassificationStrategies(unittest.TestCase):
    """Properties shared by all three strategies"""

    def setUp(self):
        rng = random.Random(1234)
        self.samples = [
            [1],
            [2],
            [],
            [3, 1, 5],
            [2, 4, 6],
            [5, -3, 0, 8, -2, 7, 7, 4, 11, -9],
            [rng.randint(-50, 50) for _ in range(200)],
        ]

    def test_split_is_correct_for_all_strategies(self):
        for strategy in ClassificationStrategy:
            for raw in self.samples:
                with self.subTest(strategy=strategy, raw=raw):
                    odd, even = classify(raw, strategy)

                    self.assertEqual(len(odd) + len(even), len(raw))
                    self.assertTrue(all(is_odd(v) for v in odd))
                    self.assertTrue(all(not is_odd(v) for v in even))
                    self.assertEqual(Counter(odd) + Counter(even), Counter(raw))

    def test_input_is_not_modified(self):
        raw = [4, 3, 2, 1]
        for strategy in ClassificationStrategy:
            classify(raw, strategy)
            self.assertEqual(raw, [4, 3, 2, 1])

    def test_stable_preserves_order(self):
        raw = [9, 2, 3, 8, 1, 6, -5, 4]
        odd, even = classify_stable(raw)
        self.assertEqual(odd, [9, 3, 1, -5])
        self.assertEqual(even, [2, 8, 6, 4])

    def test_partition_reorders_groups(self):
        # Lomuto scan swaps 1 into slot 0 and pushes 2 behind it
        odd, even = classify_partition([2, 4, 1])
        self.assertEqual(odd, [1])
        self.assertEqual(even, [4, 2])

    def test_two_pointer_swaps_from_both_ends(self):
        odd, even = classify_two_pointer([2, 4, 1, 3])
        self.assertEqual(odd, [3, 1])
        self.assertEqual(even, [4, 2])

    def test_two_pointer_already_split(self):
        raw = [1, 3, 5, 2, 4]
        odd, even = classify_two_pointer(raw)
        self.assertEqual(odd, [1, 3, 5])
        self.assertEqual(even, [2, 4])

    def test_default_strategy_is_partition(self):
        raw = [2, 4, 1]
        self.assertEqual(classify(raw), classify_partition(raw))


if __name__ == '__main__':
    unittest.main()

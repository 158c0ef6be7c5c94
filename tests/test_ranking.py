"""
Unit tests for top-K selection.
"""

import unittest
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from movie_recommender.ranking import top_k

class TestTopK(unittest.TestCase):

    def setUp(self):
        self.scored = [("a", 7.0), ("b", 9.0), ("c", 7.0), ("d", 8.0), ("e", 7.0)]

    def test_sorted_descending(self):
        """Test results come back highest score first."""
        result = top_k(self.scored, 5)
        scores = [score for _, score in result]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_ties_keep_input_order(self):
        """Test equal scores keep the order they were supplied in."""
        result = top_k(self.scored, 5)
        self.assertEqual([item for item, _ in result], ["b", "d", "a", "c", "e"])

    def test_truncates_to_k(self):
        result = top_k(self.scored, 2)
        self.assertEqual(result, [("b", 9.0), ("d", 8.0)])

    def test_k_larger_than_input(self):
        result = top_k(self.scored, 50)
        self.assertEqual(len(result), len(self.scored))

    def test_non_positive_k(self):
        """Test k <= 0 always yields nothing."""
        self.assertEqual(top_k(self.scored, 0), [])
        self.assertEqual(top_k(self.scored, -3), [])

    def test_empty_input(self):
        self.assertEqual(top_k([], 3), [])

    def test_does_not_mutate_input(self):
        original = list(self.scored)
        top_k(self.scored, 3)
        self.assertEqual(self.scored, original)

if __name__ == '__main__':
    unittest.main()

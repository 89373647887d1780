"""Tests for SearchConfig validation."""

import math
import unittest

from dazzlequery import SearchConfig, SearchConfigError, UNLIMITED


class TestSearchConfig(unittest.TestCase):

    def test_defaults(self):
        config = SearchConfig()
        self.assertTrue(config.recurse)
        self.assertTrue(config.guard_revisits)
        self.assertTrue(config.is_unbounded())
        self.assertFalse(config.exhausted())
        self.assertEqual(config.validate(), [])

    def test_infinity_normalised_to_unbounded(self):
        self.assertIsNone(SearchConfig(limit=math.inf).limit)
        self.assertIsNone(SearchConfig(limit=UNLIMITED).limit)

    def test_exhausted(self):
        self.assertTrue(SearchConfig(limit=0).exhausted())
        self.assertTrue(SearchConfig(limit=-3).exhausted())
        self.assertFalse(SearchConfig(limit=1).exhausted())

    def test_invalid_limits(self):
        for limit in ('3', 2.5, True, [1]):
            errors = SearchConfig(limit=limit).validate()
            self.assertEqual(len(errors), 1, f"limit={limit!r}")
            self.assertIn("limit", errors[0])

    def test_invalid_flags(self):
        errors = SearchConfig(recurse=1, guard_revisits='no').validate()
        self.assertEqual(len(errors), 2)

    def test_raise_if_invalid(self):
        with self.assertRaises(SearchConfigError) as ctx:
            SearchConfig(limit='ten').raise_if_invalid()
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertIn("Invalid search configuration", str(ctx.exception))

    def test_valid_config_does_not_raise(self):
        SearchConfig(recurse=False, limit=10).raise_if_invalid()


if __name__ == '__main__':
    unittest.main()

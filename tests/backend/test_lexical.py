"""
Unit tests for lexical overlap helpers.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../backend"))

from lexical import shared_tag_count, tag_similarity


class TestTagSimilarity:
    """Test suite for tag_similarity."""

    def test_identical_text(self):
        assert tag_similarity("project plan", "project plan") == 1.0

    def test_empty_side_returns_zero(self):
        """Test that an empty string on either side yields no overlap."""
        assert tag_similarity("", "project plan") == 0.0
        assert tag_similarity("project plan", "") == 0.0
        assert tag_similarity("   ", "project") == 0.0

    def test_partial_overlap(self):
        # {a, b, c} vs {b, c, d}: 2 shared of 4 total
        assert tag_similarity("a b c", "b c d") == pytest.approx(0.5)

    def test_disjoint(self):
        assert tag_similarity("alpha beta", "gamma delta") == 0.0

    def test_case_sensitive(self):
        assert tag_similarity("Notes", "notes") == 0.0

    def test_duplicates_and_whitespace_ignored(self):
        assert tag_similarity("plan  plan\tplan", "plan\n") == 1.0


class TestSharedTagCount:
    """Test suite for shared_tag_count."""

    def test_counts_distinct_shared_tags(self):
        assert shared_tag_count(["a", "b", "b", "c"], ["b", "c", "c", "d"]) == 2

    def test_no_tags(self):
        assert shared_tag_count([], ["a"]) == 0

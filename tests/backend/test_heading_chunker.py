"""
Unit tests for the HeadingChunker module.
"""

import os
import sys
from unittest.mock import Mock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../backend"))

from heading_chunker import HeadingChunker

SAMPLE = """# Project Plan
Intro paragraph.

## Goals
Ship the first release.
Keep scope small.

### Risks

## Timeline
Q3 kickoff.
"""


class TestHeadingChunker:
    """Test suite for the HeadingChunker class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.chunker = HeadingChunker()

    def test_chunk_empty_text(self):
        """Test chunking empty text returns empty list."""
        assert self.chunker.chunk("", "note") == []
        assert self.chunker.chunk("   \n", "note") == []

    def test_text_without_headings(self):
        assert self.chunker.chunk("just a paragraph", "note") == []

    def test_extract_headings(self):
        headings = self.chunker.extract_headings(SAMPLE)

        assert [(h.level, h.text, h.line_number) for h in headings] == [
            (1, "Project Plan", 0),
            (2, "Goals", 3),
            (3, "Risks", 7),
            (2, "Timeline", 9),
        ]

    def test_ignores_non_headings(self):
        text = "#NoSpace\n####### seven\n  # indented\n# Real"
        headings = self.chunker.extract_headings(text)
        assert [h.text for h in headings] == ["Real"]

    def test_chunk_content_and_ids(self):
        """Test that each chunk holds the body up to the next heading."""
        chunks = self.chunker.chunk(SAMPLE, "plan")

        assert [c.id for c in chunks] == ["plan_0", "plan_1", "plan_2", "plan_3"]
        assert all(c.note_id == "plan" for c in chunks)
        assert chunks[0].content == "Intro paragraph."
        assert chunks[1].content == "Ship the first release.\nKeep scope small."
        assert chunks[2].content == ""
        assert chunks[3].content == "Q3 kickoff."
        assert all(c.embedding is None for c in chunks)

    def test_chunk_with_embedder(self):
        """Test that the supplied callable embeds heading plus body."""
        embed = Mock(return_value=[0.1, 0.2])
        chunker = HeadingChunker(embed=embed)

        chunks = chunker.chunk("# Title\nBody text\r\n## Next", "n")

        assert chunks[0].embedding == [0.1, 0.2]
        embed.assert_any_call("Title\nBody text")
        embed.assert_any_call("Next")
        assert embed.call_count == 2

"""
Heading chunking module for Notelink.

Splits a markdown note into one chunk per heading so headings can be ranked
against each other.
"""

import re
from typing import Callable, List, NamedTuple, Optional

from models import HeadingChunk

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+)$")


class ParsedHeading(NamedTuple):
    level: int
    text: str
    line_number: int


class HeadingChunker:
    """Handles splitting markdown into heading chunks."""

    def __init__(self, embed: Optional[Callable[[str], List[float]]] = None):
        """
        Initialize the chunker.

        Args:
            embed: Optional callable turning chunk text into an embedding.
                   Chunks are left without an embedding when omitted.
        """
        self.embed = embed

    def extract_headings(self, markdown: str) -> List[ParsedHeading]:
        """Find ATX headings (``#`` to ``######``) line by line."""
        headings = []
        for i, line in enumerate(self._split_lines(markdown)):
            match = HEADING_PATTERN.match(line)
            if match:
                headings.append(
                    ParsedHeading(
                        level=len(match.group(1)),
                        text=match.group(2).strip(),
                        line_number=i,
                    )
                )
        return headings

    def chunk(self, markdown: str, note_id: str) -> List[HeadingChunk]:
        """
        Split a note into heading chunks.

        Args:
            markdown: The note body
            note_id: Identifier for the note

        Returns:
            One HeadingChunk per heading, in document order
        """
        if not markdown or not markdown.strip():
            return []

        lines = self._split_lines(markdown)
        headings = self.extract_headings(markdown)

        chunks = []
        for i, heading in enumerate(headings):
            end_line = headings[i + 1].line_number if i + 1 < len(headings) else len(lines)
            content = "\n".join(lines[heading.line_number + 1 : end_line]).strip()

            embedding = None
            text_for_embedding = f"{heading.text}\n{content}".strip()
            if self.embed is not None and text_for_embedding:
                embedding = list(self.embed(text_for_embedding))

            chunks.append(
                HeadingChunk(
                    id=f"{note_id}_{i}",
                    note_id=note_id,
                    heading=heading.text,
                    level=heading.level,
                    content=content,
                    embedding=embedding,
                )
            )

        return chunks

    def _split_lines(self, text: str) -> List[str]:
        return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

"""Lexical overlap measures used alongside semantic similarity."""

from typing import Iterable, Set


def _tokens(text: str) -> Set[str]:
    # Case-sensitive whitespace split; no stemming or stopwords.
    return set(text.split())


def tag_similarity(text1: str, text2: str) -> float:
    """Jaccard index of the whitespace-delimited word sets of two strings."""
    words1 = _tokens(text1)
    words2 = _tokens(text2)

    if not words1 or not words2:
        return 0.0

    return len(words1 & words2) / len(words1 | words2)


def shared_tag_count(tags1: Iterable[str], tags2: Iterable[str]) -> int:
    """Number of distinct tags present in both collections."""
    return len(set(tags1) & set(tags2))

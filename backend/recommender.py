"""
Ranking engine for Notelink.

Scores heading chunks and whole notes against a reference item by combining
cosine similarity with lexical overlap, recency and explicit relation weights.
Every call is a single pass over the candidate pool and mutates none of its
inputs.
"""

from __future__ import annotations

import logging
import math
import time
from typing import List, Mapping, Optional, Sequence

from errors import InvalidInputError, ZeroMagnitudeError
from lexical import shared_tag_count, tag_similarity
from models import HeadingChunk, Note, RecommendationScore, WorkspaceSettings
from vector import cosine_similarity

logger = logging.getLogger(__name__)

MS_PER_DAY = 1000 * 60 * 60 * 24
RECENCY_WINDOW_DAYS = 7


def _now_ms() -> int:
    return int(time.time() * 1000)


def _similarity(a: Sequence[float], b: Sequence[float], candidate_id: str) -> float:
    try:
        return cosine_similarity(a, b)
    except ZeroMagnitudeError:
        logger.warning("Ranking aborted: zero-magnitude embedding for %s", candidate_id)
        raise


def _top(scores: List[RecommendationScore], settings: WorkspaceSettings) -> List[RecommendationScore]:
    """Sort descending by score and keep the first ``max_recommendations``."""
    for entry in scores:
        if math.isnan(entry.score):
            raise InvalidInputError(f"Score for {entry.note_id} is NaN")

    ranked = sorted(scores, key=lambda s: s.score, reverse=True)
    ranked = ranked[: settings.max_recommendations]
    assert len(ranked) <= settings.max_recommendations
    return ranked


def recommend_headings(
    current_heading_text: str,
    current_embedding: Sequence[float],
    all_chunks: Sequence[HeadingChunk],
    current_note_id: str,
    settings: WorkspaceSettings,
) -> List[RecommendationScore]:
    """
    Rank heading chunks from other notes against the current heading.

    Args:
        current_heading_text: Text of the heading being edited
        current_embedding: Embedding of the current heading
        all_chunks: Candidate chunks; chunks of ``current_note_id`` are ignored
        current_note_id: Note that owns the current heading
        settings: Workspace tuning

    Returns:
        Up to ``settings.max_recommendations`` scores, highest first

    Raises:
        InvalidInputError: On empty heading text or embedding, or when an
            embedding length does not match.
        ZeroMagnitudeError: If any compared embedding is all zeros. The whole
            call fails; no partial result is returned.
    """
    if not current_heading_text:
        raise InvalidInputError("Current heading text must not be empty")
    if len(current_embedding) == 0:
        raise InvalidInputError("Current embedding must not be empty")

    scores: List[RecommendationScore] = []

    for chunk in all_chunks:
        if chunk.note_id == current_note_id:
            continue
        if chunk.embedding is None:
            continue

        similarity = _similarity(current_embedding, chunk.embedding, chunk.id)
        if similarity < settings.semantic_threshold:
            continue

        context = tag_similarity(current_heading_text, chunk.heading)
        final_score = similarity + context * settings.tag_weight

        reasons = [f"Semantic similarity: {similarity:.2f}"]
        if context > 0:
            reasons.append(f"Shared context: {context:.2f}")

        scores.append(
            RecommendationScore(
                note_id=chunk.note_id,
                heading_id=chunk.id,
                score=final_score,
                reasons=reasons,
            )
        )

    logger.debug(
        "Heading ranking for %s: %d of %d chunks passed",
        current_note_id,
        len(scores),
        len(all_chunks),
    )
    return _top(scores, settings)


def recommend_notes(
    current_note: Note,
    all_notes: Sequence[Note],
    relations: Mapping[str, float],
    settings: WorkspaceSettings,
    now_ms: Optional[int] = None,
) -> List[RecommendationScore]:
    """
    Rank notes in the same workspace against ``current_note``.

    A candidate's score is the sum of its semantic similarity (when both
    notes carry embeddings), shared tags, recent views and explicit relation
    weight. Candidates whose total is not positive are dropped.

    ``now_ms`` fixes the clock used for recency; it defaults to the wall clock.
    """
    if not current_note.id:
        raise InvalidInputError("Current note ID must not be empty")

    if now_ms is None:
        now_ms = _now_ms()

    scores: List[RecommendationScore] = []

    for note in all_notes:
        if note.id == current_note.id or note.workspace_id != current_note.workspace_id:
            continue

        score = 0.0
        reasons: List[str] = []

        if current_note.embedding is not None and note.embedding is not None:
            similarity = _similarity(current_note.embedding, note.embedding, note.id)
            if similarity < settings.semantic_threshold:
                continue
            score += similarity
            reasons.append(f"Semantic similarity: {similarity:.2f}")

        common_tags = shared_tag_count(current_note.tags, note.tags)
        if common_tags > 0:
            score += common_tags * settings.tag_weight
            reasons.append(f"Shared tags: {common_tags}")

        if note.last_viewed_at is not None:
            days_ago = (now_ms - note.last_viewed_at) // MS_PER_DAY
            if days_ago < RECENCY_WINDOW_DAYS:
                score += settings.recency_weight * (1.0 - days_ago / RECENCY_WINDOW_DAYS)
                reasons.append(f"Recently viewed: {days_ago} days ago")

        relation_weight = relations.get(note.id)
        if relation_weight is not None:
            score += relation_weight * settings.relation_weight
            reasons.append(f"Explicit relation: {relation_weight:.2f}")

        if score > 0.0:
            scores.append(
                RecommendationScore(
                    note_id=note.id,
                    heading_id=None,
                    score=score,
                    reasons=reasons,
                )
            )

    logger.debug(
        "Note ranking for %s: %d of %d notes scored",
        current_note.id,
        len(scores),
        len(all_notes),
    )
    return _top(scores, settings)

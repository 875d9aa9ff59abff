"""Service layer exposing the recommendation operations on request payloads."""

from __future__ import annotations

from typing import Callable, List, Optional

from config import default_workspace_settings
from models import (
    RankHeadingsRequest,
    RankNotesRequest,
    RecommendationScore,
    SimilarityRequest,
    WorkspaceSettings,
)
from recommender import recommend_headings, recommend_notes
from vector import cosine_similarity


class RecommendationService:
    """Wraps the vector primitive and both ranking algorithms.

    Errors from the engine are not caught here; callers decide how to report
    them.
    """

    def __init__(
        self,
        default_settings: Optional[WorkspaceSettings] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.default_settings = default_settings or default_workspace_settings()
        self.clock = clock

    def _settings(self, settings: Optional[WorkspaceSettings]) -> WorkspaceSettings:
        return settings if settings is not None else self.default_settings

    def similarity(self, request: SimilarityRequest) -> float:
        return cosine_similarity(request.vector_a, request.vector_b)

    def rank_headings(self, request: RankHeadingsRequest) -> List[RecommendationScore]:
        return recommend_headings(
            request.current_heading_text,
            request.current_embedding,
            request.candidate_chunks,
            request.current_note_id,
            self._settings(request.settings),
        )

    def rank_notes(self, request: RankNotesRequest) -> List[RecommendationScore]:
        now_ms = self.clock() if self.clock is not None else None
        return recommend_notes(
            request.current_note,
            request.candidate_notes,
            request.relation_weights,
            self._settings(request.settings),
            now_ms=now_ms,
        )

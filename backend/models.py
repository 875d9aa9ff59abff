"""Shared backend models for Notelink."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HeadingChunk(BaseModel):
    """A heading and the body text under it, owned by a single note."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    note_id: str = Field(alias="note_id")
    heading: str
    level: int = Field(default=1, ge=1, le=6)
    content: str = ""
    embedding: Optional[List[float]] = None


class Note(BaseModel):
    """A note as seen by the ranking engine. Timestamps are ms since epoch."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    workspace_id: str = Field(alias="workspace_id")
    title: str = ""
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    created_at: int = 0
    updated_at: int = 0
    last_viewed_at: Optional[int] = None
    embedding: Optional[List[float]] = None


class RecommendationScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    note_id: str
    heading_id: Optional[str] = None
    score: float
    reasons: List[str] = Field(default_factory=list)


class WorkspaceSettings(BaseModel):
    """Per-workspace tuning for the ranking engine.

    ``engagement_weight`` is carried for hosts that store it but is not used
    by either ranking algorithm.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str = "default"
    max_recommendations: int = Field(default=10, ge=0)
    semantic_threshold: float = 0.3
    tag_weight: float = 0.2
    recency_weight: float = 0.15
    engagement_weight: float = 0.1
    relation_weight: float = 0.3


# Request payloads

class SimilarityRequest(BaseModel):
    vector_a: List[float]
    vector_b: List[float]


class RankHeadingsRequest(BaseModel):
    current_heading_text: str
    current_embedding: List[float]
    candidate_chunks: List[HeadingChunk] = Field(default_factory=list)
    current_note_id: str
    settings: Optional[WorkspaceSettings] = None


class RankNotesRequest(BaseModel):
    current_note: Note
    candidate_notes: List[Note] = Field(default_factory=list)
    relation_weights: Dict[str, float] = Field(default_factory=dict)
    settings: Optional[WorkspaceSettings] = None


# Response payloads

class SimilarityResponsePayload(BaseModel):
    similarity: float


class RecommendationsResponsePayload(BaseModel):
    recommendations: List[RecommendationScore] = Field(default_factory=list)

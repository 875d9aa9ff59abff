"""Environment-driven configuration for the Notelink backend."""

from __future__ import annotations

import logging
import os

from models import WorkspaceSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def default_workspace_settings() -> WorkspaceSettings:
    """Settings used when a caller does not send its own.

    Each field can be overridden with a ``NOTELINK_*`` environment variable.
    """
    base = WorkspaceSettings()
    return WorkspaceSettings(
        id=os.environ.get("NOTELINK_WORKSPACE_ID", base.id),
        max_recommendations=_env_int("NOTELINK_MAX_RECOMMENDATIONS", base.max_recommendations),
        semantic_threshold=_env_float("NOTELINK_SEMANTIC_THRESHOLD", base.semantic_threshold),
        tag_weight=_env_float("NOTELINK_TAG_WEIGHT", base.tag_weight),
        recency_weight=_env_float("NOTELINK_RECENCY_WEIGHT", base.recency_weight),
        engagement_weight=_env_float("NOTELINK_ENGAGEMENT_WEIGHT", base.engagement_weight),
        relation_weight=_env_float("NOTELINK_RELATION_WEIGHT", base.relation_weight),
    )


def server_address() -> tuple:
    return (
        os.environ.get("NOTELINK_HOST", "127.0.0.1"),
        _env_int("NOTELINK_PORT", 8000),
    )


def configure_logging() -> logging.Logger:
    """Attach a stream handler to the root logger once."""
    root = logging.getLogger()
    level = os.environ.get("NOTELINK_LOG_LEVEL", "INFO").strip().upper()
    root.setLevel(level)

    if not getattr(root, "_notelink_configured", False):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root._notelink_configured = True

    return root

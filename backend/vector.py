"""
Vector similarity helpers for Notelink.

Embeddings arrive already computed; this module only compares and rescales them.
"""

from typing import List, Sequence, Union

import numpy as np

from errors import InvalidInputError, ZeroMagnitudeError

Vector = Union[Sequence[float], np.ndarray]

NORMALIZE_TOLERANCE = 1e-4


def _as_array(vector: Vector, name: str) -> np.ndarray:
    v = np.asarray(vector, dtype=np.float64)
    if v.ndim != 1 or v.size == 0:
        raise InvalidInputError(f"{name} must be a non-empty 1-D vector")
    return v


def cosine_similarity(vec1: Vector, vec2: Vector) -> float:
    """
    Calculate cosine similarity between two vectors.

    Args:
        vec1: First embedding vector
        vec2: Second embedding vector

    Returns:
        Cosine similarity score between -1 and 1

    Raises:
        InvalidInputError: If a vector is empty, the lengths differ, or the
            result is not a finite number.
        ZeroMagnitudeError: If either vector has zero magnitude.
    """
    v1 = _as_array(vec1, "vec1")
    v2 = _as_array(vec2, "vec2")

    if v1.shape != v2.shape:
        raise InvalidInputError(
            f"Vector dimensions don't match: {v1.size} vs {v2.size}"
        )

    norm1 = np.linalg.norm(v1)
    norm2 = np.linalg.norm(v2)

    if norm1 == 0 or norm2 == 0:
        raise ZeroMagnitudeError("Vector magnitude is zero")

    similarity = float(np.dot(v1, v2) / (norm1 * norm2))
    if not np.isfinite(similarity):
        raise InvalidInputError("Cosine similarity is not a finite number")

    # Rounding can push identical directions just past 1.0
    return float(np.clip(similarity, -1.0, 1.0))


def normalize_vector(vector: Union[List[float], np.ndarray]) -> None:
    """
    Scale a vector to unit length in place.

    An all-zero vector has no direction and is left unchanged.

    Args:
        vector: Mutable list or numpy array to rescale
    """
    v = _as_array(vector, "vector")
    norm = np.linalg.norm(v)

    if norm == 0:
        return

    vector[:] = (v / norm).tolist()

    assert abs(np.linalg.norm(np.asarray(vector, dtype=np.float64)) - 1.0) < NORMALIZE_TOLERANCE

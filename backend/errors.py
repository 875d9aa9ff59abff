"""Error types raised by the recommendation engine."""


class RecommendationError(Exception):
    """Base class for engine errors surfaced to callers."""

    kind = "recommendation_error"


class InvalidInputError(RecommendationError, ValueError):
    """A call violated its contract (empty or mismatched vectors, missing ids)."""

    kind = "invalid_input"


class ZeroMagnitudeError(RecommendationError, ArithmeticError):
    """Cosine similarity is undefined because a vector has zero magnitude."""

    kind = "zero_magnitude"

"""Domain exceptions raised by the recommendation services."""


class RecommendationError(Exception):
    """Base class for errors surfaced to API callers."""


class ValidationError(RecommendationError):
    """Required input is missing or malformed."""


class NotFoundError(RecommendationError):
    """Nothing matched the request, not even a fallback."""

"""UrbanSprout plant recommendation and gardening advice API."""

__version__ = "1.0.0"

"""All SQLAlchemy models – re-exported for Alembic and app use."""

from urbansprout.models.plant import Plant
from urbansprout.models.plant_suggestion import PlantSuggestion, build_combination_key
from urbansprout.models.product import Product

__all__ = ["Plant", "PlantSuggestion", "Product", "build_combination_key"]

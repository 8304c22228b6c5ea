"""
Resolve a quiz combination (space, sunlight, experience, time, purpose) to a
stored suggestion set.

Lookup order: exact key, then (space, sunlight, experience) ignoring time and
purpose, then the canonical beginner default.
"""
import logging
from dataclasses import dataclass
from typing import Literal, Optional

from sqlalchemy.orm import Session

from urbansprout.models import PlantSuggestion, build_combination_key
from urbansprout.models.plant_suggestion import COMBINATION_FIELDS, normalize_field
from urbansprout.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_COMBINATION = {
    "space": "small",
    "sunlight": "full_sun",
    "experience": "beginner",
    "time": "low",
    "purpose": "food",
}

MatchKind = Literal["exact", "fallback", "default"]


@dataclass(frozen=True)
class Resolution:
    suggestion: PlantSuggestion
    match: MatchKind
    requested_key: str

    def to_response(self) -> dict:
        data = {
            "plants": list(self.suggestion.plants or []),
            "recommendationMessage": self.suggestion.recommendation_message,
            "combinationKey": self.suggestion.combination_key,
        }
        if self.match == "fallback":
            data["isFallback"] = True
        elif self.match == "default":
            data["isDefault"] = True
        return data


def _active(db: Session):
    return db.query(PlantSuggestion).filter(PlantSuggestion.is_active.is_(True))


def _find_partial(db: Session, space: str, sunlight: str, experience: str) -> Optional[PlantSuggestion]:
    return (
        _active(db)
        .filter(
            PlantSuggestion.space == space,
            PlantSuggestion.sunlight == sunlight,
            PlantSuggestion.experience == experience,
        )
        .order_by(PlantSuggestion.id)
        .first()
    )


def resolve(
    db: Session,
    space: Optional[str],
    sunlight: Optional[str],
    experience: Optional[str],
    time: Optional[str],
    purpose: Optional[str],
) -> Resolution:
    values = dict(zip(COMBINATION_FIELDS, (space, sunlight, experience, time, purpose)))
    missing = [name for name, value in values.items() if value is None or not str(value).strip()]
    if missing:
        raise ValidationError(
            "All combination parameters are required: space, sunlight, experience, time, purpose"
        )

    normalized = {name: normalize_field(value) for name, value in values.items()}
    key = build_combination_key(**normalized)

    suggestion = _active(db).filter(PlantSuggestion.combination_key == key).first()
    if suggestion:
        return Resolution(suggestion=suggestion, match="exact", requested_key=key)

    # time and purpose are dropped here, so the set may not match them
    suggestion = _find_partial(db, normalized["space"], normalized["sunlight"], normalized["experience"])
    if suggestion:
        logger.info(f"No exact suggestion for {key}; using partial match {suggestion.combination_key}")
        return Resolution(suggestion=suggestion, match="fallback", requested_key=key)

    default_key = build_combination_key(**DEFAULT_COMBINATION)
    suggestion = _active(db).filter(PlantSuggestion.combination_key == default_key).first()
    if suggestion:
        logger.info(f"No suggestion for {key}; using default {default_key}")
        return Resolution(suggestion=suggestion, match="default", requested_key=key)

    raise NotFoundError("No plant suggestions found for this combination")

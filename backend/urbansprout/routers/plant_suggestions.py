"""Public plant suggestion endpoints: quiz combinations and keyword filters."""
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from urbansprout.database import get_db
from urbansprout.dependencies import get_catalog
from urbansprout.schemas import SuggestRequest
from urbansprout.services.catalog import PlantCatalog
from urbansprout.services.combination_resolver import resolve
from urbansprout.services.keyword_filter import Preferences, filter_plants

router = APIRouter(tags=["plant-suggestions"])


@router.get("/plant-suggestions/resolve")
def resolve_combination(
    space: Optional[str] = None,
    sunlight: Optional[str] = None,
    experience: Optional[str] = None,
    time: Optional[str] = None,
    purpose: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Return the suggestion set for a quiz combination (public)."""
    resolution = resolve(db, space, sunlight, experience, time, purpose)
    return resolution.to_response()


@router.post("/plants/suggest")
def suggest_plants(data: SuggestRequest, catalog: PlantCatalog = Depends(get_catalog)):
    """Filter the plant catalog by keyword and optional preferences (public)."""
    prefs = data.preferences
    preferences = Preferences(
        space=prefs.space,
        sunlight=prefs.sunlight,
        max_days=prefs.max_days,
        indoor_only=prefs.indoor_only,
    ) if prefs else Preferences()

    plants = filter_plants(catalog, data.keyword, preferences)
    return {
        "plants": [plant.to_dict() for plant in plants],
        "total": len(plants),
        "keyword": data.keyword,
        "preferences": preferences.to_dict(),
    }

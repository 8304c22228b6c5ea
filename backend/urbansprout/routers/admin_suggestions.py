"""Admin management of quiz suggestion sets."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from urbansprout.auth import require_admin_token
from urbansprout.database import get_db
from urbansprout.models import PlantSuggestion, build_combination_key
from urbansprout.models.plant import EXPERIENCE_LEVELS, SPACE_SIZES, SUNLIGHT_LEVELS, TIME_COMMITMENTS
from urbansprout.models.plant_suggestion import COMBINATION_FIELDS, PURPOSES, normalize_field
from urbansprout.routers.plants import paginate
from urbansprout.schemas import (
    SuggestionCreate, SuggestionPage, SuggestionPlant, SuggestionResponse,
    SuggestionStats, SuggestionUpdate,
)

router = APIRouter(
    prefix="/admin/plant-suggestions",
    tags=["admin"],
    dependencies=[Depends(require_admin_token)],
)

ALLOWED_VALUES = {
    "space": SPACE_SIZES,
    "sunlight": SUNLIGHT_LEVELS,
    "experience": EXPERIENCE_LEVELS,
    "time": TIME_COMMITMENTS,
    "purpose": PURPOSES,
}
MIN_PLANTS = 1
MAX_PLANTS = 9
DUPLICATE_DETAIL = "A suggestion for this combination already exists"


def validate_combination(values: dict) -> dict:
    """Normalise the five quiz answers, rejecting blanks and unknown values."""
    normalized = {}
    for name in COMBINATION_FIELDS:
        value = values.get(name)
        if value is None or not str(value).strip():
            raise HTTPException(
                status_code=400,
                detail="All combination fields (space, sunlight, experience, time, purpose) are required",
            )
        value = normalize_field(value)
        if value not in ALLOWED_VALUES[name]:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid {name} '{value}'. Expected one of: {', '.join(ALLOWED_VALUES[name])}",
            )
        normalized[name] = value
    return normalized


def validate_plants(plants: Optional[List[SuggestionPlant]]) -> List[dict]:
    if not plants or not (MIN_PLANTS <= len(plants) <= MAX_PLANTS):
        raise HTTPException(
            status_code=400,
            detail=f"Suggestion sets need between {MIN_PLANTS} and {MAX_PLANTS} plants",
        )
    for index, plant in enumerate(plants, start=1):
        missing = [name for name in ("name", "description", "image") if not getattr(plant, name)]
        if missing:
            raise HTTPException(
                status_code=400,
                detail=f"Plant {index} is missing required fields: {', '.join(missing)}",
            )
    return [plant.model_dump(by_alias=True, exclude_none=True) for plant in plants]


def validate_message(message: Optional[str]) -> str:
    message = (message or "").strip()
    if not message:
        raise HTTPException(status_code=400, detail="recommendationMessage is required")
    return message


def _key_taken(db: Session, key: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(PlantSuggestion).filter(PlantSuggestion.combination_key == key)
    if exclude_id is not None:
        query = query.filter(PlantSuggestion.id != exclude_id)
    return query.first() is not None


def _get_or_404(db: Session, suggestion_id: int) -> PlantSuggestion:
    suggestion = db.query(PlantSuggestion).filter(PlantSuggestion.id == suggestion_id).first()
    if not suggestion:
        raise HTTPException(status_code=404, detail="Plant suggestion not found")
    return suggestion


def _commit(db: Session, suggestion: PlantSuggestion):
    try:
        db.commit()
        db.refresh(suggestion)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_DETAIL)
    except Exception:
        db.rollback()
        raise


@router.get("", response_model=SuggestionPage)
def list_suggestions(
    search: Optional[str] = None,
    space: Optional[str] = None,
    sunlight: Optional[str] = None,
    experience: Optional[str] = None,
    time: Optional[str] = None,
    purpose: Optional[str] = None,
    is_active: Optional[bool] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """List suggestion sets with filters and pagination."""
    query = db.query(PlantSuggestion)
    for column, value in (
        (PlantSuggestion.space, space),
        (PlantSuggestion.sunlight, sunlight),
        (PlantSuggestion.experience, experience),
        (PlantSuggestion.time, time),
        (PlantSuggestion.purpose, purpose),
    ):
        if value:
            query = query.filter(column == normalize_field(value))
    if is_active is not None:
        query = query.filter(PlantSuggestion.is_active.is_(is_active))
    if search:
        needle = search.strip().lower()
        query = query.filter(or_(
            PlantSuggestion.combination_key.contains(needle, autoescape=True),
            func.lower(PlantSuggestion.recommendation_message).contains(needle, autoescape=True),
        ))

    query = query.order_by(PlantSuggestion.created_at.desc(), PlantSuggestion.id.desc())
    return paginate(query, page, limit, key="suggestions")


@router.get("/stats", response_model=SuggestionStats)
def suggestion_stats(db: Session = Depends(get_db)):
    """Count suggestion sets overall and by space and purpose."""
    total = db.query(func.count(PlantSuggestion.id)).scalar() or 0
    active = (
        db.query(func.count(PlantSuggestion.id))
        .filter(PlantSuggestion.is_active.is_(True))
        .scalar()
        or 0
    )
    by_space = dict(
        db.query(PlantSuggestion.space, func.count(PlantSuggestion.id))
        .group_by(PlantSuggestion.space)
        .all()
    )
    by_purpose = dict(
        db.query(PlantSuggestion.purpose, func.count(PlantSuggestion.id))
        .group_by(PlantSuggestion.purpose)
        .all()
    )
    return SuggestionStats(
        total=total,
        active=active,
        inactive=total - active,
        by_space=by_space,
        by_purpose=by_purpose,
    )


@router.get("/{suggestion_id}", response_model=SuggestionResponse)
def get_suggestion(suggestion_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, suggestion_id)


@router.post("", response_model=SuggestionResponse, status_code=201)
def create_suggestion(data: SuggestionCreate, db: Session = Depends(get_db)):
    """Create a suggestion set for a new combination."""
    fields = validate_combination(data.model_dump())
    plants = validate_plants(data.plants)
    message = validate_message(data.recommendation_message)

    key = build_combination_key(**fields)
    if _key_taken(db, key):
        raise HTTPException(status_code=409, detail=DUPLICATE_DETAIL)

    suggestion = PlantSuggestion(
        combination_key=key,
        plants=plants,
        recommendation_message=message,
        is_active=True,
        **fields,
    )
    db.add(suggestion)
    _commit(db, suggestion)
    return suggestion


@router.put("/{suggestion_id}", response_model=SuggestionResponse)
def update_suggestion(suggestion_id: int, data: SuggestionUpdate, db: Session = Depends(get_db)):
    """Update a suggestion set; the combination key follows the fields."""
    suggestion = _get_or_404(db, suggestion_id)
    updates = data.model_dump(exclude_unset=True)

    merged = {name: getattr(suggestion, name) for name in COMBINATION_FIELDS}
    merged.update({name: updates[name] for name in COMBINATION_FIELDS if updates.get(name) is not None})
    fields = validate_combination(merged)

    key = build_combination_key(**fields)
    if key != suggestion.combination_key and _key_taken(db, key, exclude_id=suggestion.id):
        raise HTTPException(status_code=409, detail=DUPLICATE_DETAIL)

    for name, value in fields.items():
        setattr(suggestion, name, value)
    suggestion.combination_key = key

    if data.plants is not None:
        suggestion.plants = validate_plants(data.plants)
    if data.recommendation_message is not None:
        suggestion.recommendation_message = validate_message(data.recommendation_message)
    if data.is_active is not None:
        suggestion.is_active = data.is_active

    _commit(db, suggestion)
    return suggestion


@router.put("/{suggestion_id}/toggle", response_model=SuggestionResponse)
def toggle_suggestion(suggestion_id: int, db: Session = Depends(get_db)):
    """Flip a suggestion set between active and inactive."""
    suggestion = _get_or_404(db, suggestion_id)
    suggestion.is_active = not suggestion.is_active
    _commit(db, suggestion)
    return suggestion


@router.delete("/{suggestion_id}", status_code=204)
def delete_suggestion(suggestion_id: int, db: Session = Depends(get_db)):
    suggestion = _get_or_404(db, suggestion_id)
    try:
        db.delete(suggestion)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return None

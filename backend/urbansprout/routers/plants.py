"""Database plant catalog endpoints with quiz matching and admin CRUD."""
import math
from typing import List, Optional, Union

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy import func, or_
from sqlalchemy.orm import Query as OrmQuery
from sqlalchemy.orm import Session

from urbansprout.auth import require_admin_token
from urbansprout.database import get_db
from urbansprout.models import Plant
from urbansprout.models.plant import (
    DIFFICULTIES, EXPERIENCE_LEVELS, PLANT_CATEGORIES, SPACE_SIZES, SUNLIGHT_LEVELS, TIME_COMMITMENTS,
)
from urbansprout.schemas import PlantCreate, PlantPage, PlantResponse, PlantUpdate

router = APIRouter(prefix="/plants", tags=["plants"])

REQUIRED_PLANT_FIELDS = [
    "plant_name", "image_url", "description", "benefits", "sunlight", "space",
    "experience", "time", "maintenance", "category", "difficulty", "growing_time",
]
DEFAULT_DAYS_TO_GROW = 60
DEFAULT_PRICE = "₹20-40"
QUIZ_LIMIT = 6
# the quiz matches its time answer against maintenance, so both share one scale
ALLOWED_PLANT_VALUES = {
    "sunlight": SUNLIGHT_LEVELS,
    "space": SPACE_SIZES,
    "experience": EXPERIENCE_LEVELS,
    "time": TIME_COMMITMENTS,
    "maintenance": TIME_COMMITMENTS,
    "category": PLANT_CATEGORIES,
    "difficulty": DIFFICULTIES,
}


def paginate(query: OrmQuery, page: int, limit: int, key: str = "plants") -> dict:
    total = query.count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return {
        key: items,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit) if limit else 0,
            "has_next": page * limit < total,
            "has_prev": page > 1,
        },
    }


def _listed(db: Session) -> OrmQuery:
    return db.query(Plant).filter(Plant.is_active.is_(True), Plant.archived.is_(False))


def _contains(column, needle: str):
    return func.lower(column).contains(needle.strip().lower(), autoescape=True)


def quiz_payload(plant: Plant) -> dict:
    return {
        "name": plant.plant_name,
        "category": plant.category,
        "description": plant.description,
        "image": plant.image_url,
        "growingTime": plant.growing_time,
        "sunlight": plant.sunlight,
        "space": plant.space,
        "difficulty": plant.difficulty,
        "price": plant.price,
        "benefits": plant.benefits,
        "maintenance": plant.maintenance,
        "daysToGrow": plant.days_to_grow,
    }


@router.get("", response_model=PlantPage)
def list_plants(
    plant_name: Optional[str] = None,
    sunlight: Optional[str] = None,
    space: Optional[str] = None,
    experience: Optional[str] = None,
    time: Optional[str] = None,
    maintenance: Optional[str] = None,
    min_days: Optional[int] = Query(default=None, ge=0),
    max_days: Optional[int] = Query(default=None, ge=0),
    search: Optional[str] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=12, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """List active plants with optional filters (public)."""
    query = db.query(Plant).filter(Plant.is_active.is_(True))
    if plant_name:
        query = query.filter(_contains(Plant.plant_name, plant_name))
    for column, value in (
        (Plant.sunlight, sunlight),
        (Plant.space, space),
        (Plant.experience, experience),
        (Plant.time, time),
        (Plant.maintenance, maintenance),
    ):
        if value:
            query = query.filter(column == value.strip().lower())
    if min_days is not None:
        query = query.filter(Plant.days_to_grow >= min_days)
    if max_days is not None:
        query = query.filter(Plant.days_to_grow <= max_days)
    if search:
        query = query.filter(or_(
            _contains(Plant.plant_name, search),
            _contains(Plant.description, search),
            _contains(Plant.benefits, search),
        ))

    return paginate(query.order_by(Plant.created_at.desc(), Plant.id.desc()), page, limit)


@router.get("/quiz")
def plants_by_quiz(
    sunlight: Optional[str] = None,
    space: Optional[str] = None,
    experience: Optional[str] = None,
    time: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Match quiz answers against plants, relaxing to 3 then 2 criteria (public)."""
    if not all([sunlight, space, experience, time]):
        raise HTTPException(
            status_code=400,
            detail="All quiz parameters are required: sunlight, space, experience, time",
        )

    criteria = {
        "sunlight": sunlight.strip().lower(),
        "space": space.strip().lower(),
        "experience": experience.strip().lower(),
        # the time answer is matched against the maintenance level
        "maintenance": time.strip().lower(),
    }
    attempts = [
        ("sunlight", "space", "experience", "maintenance"),
        ("sunlight", "space", "experience"),
        ("sunlight", "space", "maintenance"),
        ("sunlight", "experience", "maintenance"),
        ("space", "experience", "maintenance"),
        ("sunlight", "space"),
        ("sunlight", "experience"),
        ("space", "experience"),
        ("experience", "maintenance"),
    ]

    plants: List[Plant] = []
    for fields in attempts:
        query = _listed(db)
        for name in fields:
            query = query.filter(getattr(Plant, name) == criteria[name])
        plants = query.order_by(Plant.id).limit(QUIZ_LIMIT).all()
        if plants:
            break

    payload = [quiz_payload(plant) for plant in plants]
    return {
        "plants": payload,
        "total": len(payload),
        "query": {"sunlight": sunlight, "space": space, "experience": experience, "time": time},
    }


@router.get("/search", response_model=PlantPage)
def search_plants(
    q: Optional[str] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=12, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """Search plant names, descriptions and benefits (public)."""
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    query = _listed(db).filter(or_(
        _contains(Plant.plant_name, q),
        _contains(Plant.description, q),
        _contains(Plant.benefits, q),
    ))
    return paginate(query.order_by(Plant.plant_name), page, limit)


@router.get("/category/{category}", response_model=PlantPage)
def plants_by_category(
    category: str,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=12, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """List plants in a category (public)."""
    query = _listed(db).filter(Plant.category == category.strip().lower())
    return paginate(query.order_by(Plant.created_at.desc(), Plant.id.desc()), page, limit)


@router.get("/{plant_id}", response_model=PlantResponse)
def get_plant(plant_id: int, db: Session = Depends(get_db)):
    """Get a single plant (public)."""
    plant = db.query(Plant).filter(Plant.id == plant_id).first()
    if not plant:
        raise HTTPException(status_code=404, detail="Plant not found")
    return plant


def validate_plant_values(values: dict) -> None:
    """Reject enumerated fields whose value is outside the allowed set."""
    for name, allowed in ALLOWED_PLANT_VALUES.items():
        value = values.get(name)
        if value is not None and value not in allowed:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid {name} '{value}'. Expected one of: {', '.join(allowed)}",
            )


def _build_plant(data: PlantCreate) -> Plant:
    values = data.model_dump()
    missing = [name for name in REQUIRED_PLANT_FIELDS if not values.get(name)]
    if missing:
        label = values.get("plant_name") or "Unknown"
        raise HTTPException(
            status_code=400,
            detail=f"Missing required fields in plant \"{label}\": {', '.join(missing)}",
        )
    validate_plant_values(values)
    values["days_to_grow"] = values.get("days_to_grow") or DEFAULT_DAYS_TO_GROW
    values["price"] = values.get("price") or DEFAULT_PRICE
    return Plant(**values, is_active=True, archived=False)


@router.post("", status_code=201, dependencies=[Depends(require_admin_token)])
def create_plants(
    data: Union[List[PlantCreate], PlantCreate] = Body(...),
    db: Session = Depends(get_db),
):
    """Create one plant or a batch of plants (requires admin token)."""
    batch = data if isinstance(data, list) else [data]
    if not batch:
        raise HTTPException(status_code=400, detail="At least one plant is required")

    plants = [_build_plant(item) for item in batch]
    try:
        db.add_all(plants)
        db.commit()
        for plant in plants:
            db.refresh(plant)
    except Exception:
        db.rollback()
        raise

    created = [PlantResponse.model_validate(plant) for plant in plants]
    if isinstance(data, list):
        return {"message": f"{len(created)} plants created successfully", "plants": created}
    return created[0]


@router.put("/{plant_id}", response_model=PlantResponse, dependencies=[Depends(require_admin_token)])
def update_plant(plant_id: int, data: PlantUpdate, db: Session = Depends(get_db)):
    """Update a plant (requires admin token)."""
    plant = db.query(Plant).filter(Plant.id == plant_id).first()
    if not plant:
        raise HTTPException(status_code=404, detail="Plant not found")

    changes = {
        name: value for name, value in data.model_dump(exclude_unset=True).items()
        if value is not None
    }
    validate_plant_values(changes)
    for name, value in changes.items():
        setattr(plant, name, value)

    try:
        db.commit()
        db.refresh(plant)
    except Exception:
        db.rollback()
        raise
    return plant


@router.delete("/{plant_id}", status_code=204, dependencies=[Depends(require_admin_token)])
def delete_plant(plant_id: int, db: Session = Depends(get_db)):
    """Soft-delete a plant by archiving it (requires admin token)."""
    plant = db.query(Plant).filter(Plant.id == plant_id).first()
    if not plant:
        raise HTTPException(status_code=404, detail="Plant not found")

    plant.archived = True
    plant.is_active = False
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    return None

"""
Plant catalog loaded from the flat-file plant database.

The catalog is read once at start-up and shared read-only by every request.
If the CSV cannot be read a small embedded list keeps the service usable.
"""
import csv
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "type", "category", "sunlight", "maintenance", "space", "growTime")

_DURATION_RE = re.compile(
    r"(\d+)\s*(?:-\s*(\d+))?\s*\+?\s*(day|week|month|year)?s?",
    re.IGNORECASE,
)
_UNIT_DAYS = {"day": 1, "week": 7, "month": 30, "year": 365}


def parse_growth_days(grow_time: Optional[str]) -> Optional[int]:
    """Turn a grow time such as "30-45 days" or "2-3 years" into days.

    Ranges resolve to their upper bound; "365+ days" resolves to 365.
    """
    if not grow_time:
        return None
    match = _DURATION_RE.search(grow_time)
    if not match:
        return None
    low, high, unit = match.groups()
    value = int(high or low)
    return value * _UNIT_DAYS[(unit or "day").lower()]


def _split_tags(raw: str) -> Tuple[str, ...]:
    return tuple(tag.strip().lower() for tag in (raw or "").split(",") if tag.strip())


@dataclass(frozen=True)
class PlantRecord:
    name: str
    plant_type: str
    category: str
    sunlight: str
    maintenance: str
    space: str
    grow_time: str
    growth_days: Optional[int]
    description: str = ""
    tips: str = ""
    image_url: str = ""
    features: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def quick_growing(self) -> bool:
        return "quick_growing" in self.features

    @property
    def salad_suitable(self) -> bool:
        return any(tag.startswith("salad") for tag in self.features)

    @property
    def smoothie_suitable(self) -> bool:
        return any(tag.startswith("smoothie") for tag in self.features)

    @property
    def indoor(self) -> bool:
        return any(tag.startswith("indoor") for tag in self.features)

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> "PlantRecord":
        clean = {key.strip(): (value or "").strip() for key, value in row.items() if key}
        grow_time = clean.get("growTime", "")
        return cls(
            name=clean["name"],
            plant_type=clean.get("type", "").lower(),
            category=clean.get("category", "").lower(),
            sunlight=clean.get("sunlight", "").lower(),
            maintenance=clean.get("maintenance", "").lower(),
            space=clean.get("space", "").lower(),
            grow_time=grow_time,
            growth_days=parse_growth_days(grow_time),
            description=clean.get("description", ""),
            tips=clean.get("tips", ""),
            image_url=clean.get("image_url", ""),
            features=_split_tags(clean.get("features", "")),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.plant_type,
            "category": self.category,
            "sunlight": self.sunlight,
            "maintenance": self.maintenance,
            "space": self.space,
            "growTime": self.grow_time,
            "growthDays": self.growth_days,
            "description": self.description,
            "tips": self.tips,
            "image_url": self.image_url,
            "features": list(self.features),
            "quickGrowing": self.quick_growing,
            "saladSuitable": self.salad_suitable,
            "smoothieSuitable": self.smoothie_suitable,
            "indoor": self.indoor,
        }


class PlantCatalog:
    """Immutable, ordered collection of plant records."""

    def __init__(self, records: Sequence[PlantRecord], source: str = "file"):
        self._records: Tuple[PlantRecord, ...] = tuple(records)
        self._by_name = {record.name.lower(): record for record in self._records}
        self.source = source

    def __iter__(self) -> Iterator[PlantRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> Tuple[PlantRecord, ...]:
        return self._records

    def find(self, name: str) -> Optional[PlantRecord]:
        return self._by_name.get(name.strip().lower())


FALLBACK_ROWS: List[Dict[str, str]] = [
    {
        "name": "Lettuce", "type": "vegetable", "category": "leafy_green", "sunlight": "low",
        "maintenance": "low", "space": "small", "growTime": "30-45 days",
        "description": "Fast-growing leafy green that tolerates shade",
        "tips": "Harvest outer leaves first; keep soil moist",
        "features": "salad,quick_growing,beginner_friendly",
    },
    {
        "name": "Radishes", "type": "vegetable", "category": "root", "sunlight": "full",
        "maintenance": "low", "space": "small", "growTime": "25-30 days",
        "description": "Fastest growing vegetable, perfect for beginners",
        "tips": "Direct sow; thin seedlings",
        "features": "quick_growing,beginner_friendly,root_vegetable",
    },
    {
        "name": "Microgreens", "type": "vegetable", "category": "leafy_green", "sunlight": "full",
        "maintenance": "low", "space": "small", "growTime": "7-14 days",
        "description": "Nutrient-dense baby greens ready in days",
        "tips": "Harvest in 1-2 weeks",
        "features": "superfood,quick_growing,indoor_growing",
    },
    {
        "name": "Cherry Tomatoes", "type": "fruit", "category": "solanaceae", "sunlight": "partial",
        "maintenance": "low", "space": "small", "growTime": "60-80 days",
        "description": "Small sweet tomatoes perfect for containers",
        "tips": "Support with stakes; harvest frequently",
        "features": "container_friendly,sweet_flavor,snacking",
    },
    {
        "name": "Basil", "type": "herb", "category": "culinary", "sunlight": "partial",
        "maintenance": "low", "space": "small", "growTime": "30-60 days",
        "description": "Essential cooking herb with aromatic leaves",
        "tips": "Harvest regularly; pinch flowers",
        "features": "cooking_essential,aromatic,italian_cuisine",
    },
    {
        "name": "Blueberries", "type": "fruit", "category": "berry", "sunlight": "partial",
        "maintenance": "medium", "space": "medium", "growTime": "365+ days",
        "description": "Sweet antioxidant-rich berries",
        "tips": "Acidic soil needed; prune annually",
        "features": "antioxidant_rich,perennial,sweet_berry",
    },
]


def fallback_catalog() -> PlantCatalog:
    return PlantCatalog([PlantRecord.from_row(row) for row in FALLBACK_ROWS], source="fallback")


def load_catalog(path: Path) -> PlantCatalog:
    """Load the plant catalog from ``path``, degrading to the embedded list."""
    try:
        with open(path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            missing = [col for col in REQUIRED_COLUMNS if col not in (reader.fieldnames or [])]
            if missing:
                raise ValueError(f"missing columns: {', '.join(missing)}")
            records = [PlantRecord.from_row(row) for row in reader if (row.get("name") or "").strip()]
    except (OSError, csv.Error, ValueError, KeyError) as e:
        logger.error(f"Failed to load plant catalog from {path}: {e}. Using embedded fallback list.")
        return fallback_catalog()

    if not records:
        logger.error(f"Plant catalog {path} is empty. Using embedded fallback list.")
        return fallback_catalog()

    logger.info(f"Loaded {len(records)} plants from {path}")
    return PlantCatalog(records, source="file")

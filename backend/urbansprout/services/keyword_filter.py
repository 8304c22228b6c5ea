"""
Keyword filter over the in-memory plant catalog.

A keyword picks the base set, optional preferences narrow it further, and the
result is ordered by growth duration and capped.
"""
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional

from urbansprout.services.catalog import PlantCatalog, PlantRecord
from urbansprout.services.errors import ValidationError

MAX_RESULTS = 12
SLOW_GROWING_DAYS = 90

Predicate = Callable[[PlantRecord], bool]


def _default_predicate(plant: PlantRecord) -> bool:
    return plant.quick_growing or plant.salad_suitable


KEYWORD_PREDICATES: Dict[str, Predicate] = {
    "quick_growing": lambda p: p.quick_growing,
    "salad_suitable": lambda p: p.salad_suitable,
    "smoothie_suitable": lambda p: p.smoothie_suitable,
    "small_space": lambda p: p.space == "small",
    "medium_space": lambda p: p.space == "medium",
    "large_space": lambda p: p.space == "large",
    "full_sun": lambda p: p.sunlight == "full",
    "partial_shade": lambda p: p.sunlight == "partial",
    "slow_growing": lambda p: p.growth_days is not None and p.growth_days > SLOW_GROWING_DAYS,
    "indoor": lambda p: p.indoor,
    "outdoor": lambda p: not p.indoor,
    "herbs": lambda p: p.plant_type == "herb",
    "vegetables": lambda p: p.plant_type == "vegetable",
    "fruits": lambda p: p.plant_type == "fruit",
    "specific": lambda p: True,
}

# quick-reply keywords sent by the web client
KEYWORD_ALIASES = {
    "quick": "quick_growing",
    "salad": "salad_suitable",
    "salad_plants": "salad_suitable",
    "smoothie": "smoothie_suitable",
    "smoothie_plants": "smoothie_suitable",
}


@dataclass(frozen=True)
class Preferences:
    space: Optional[str] = None
    sunlight: Optional[str] = None
    max_days: Optional[int] = None
    indoor_only: Optional[bool] = None

    def to_dict(self) -> dict:
        return {key: value for key, value in asdict(self).items() if value is not None}

    def matches(self, plant: PlantRecord) -> bool:
        if self.space and plant.space != self.space.strip().lower():
            return False
        if self.sunlight and plant.sunlight != self.sunlight.strip().lower():
            return False
        if self.max_days is not None and (plant.growth_days is None or plant.growth_days > self.max_days):
            return False
        if self.indoor_only is not None and plant.indoor != self.indoor_only:
            return False
        return True


def canonical_keyword(keyword: str) -> str:
    key = keyword.strip().lower()
    return KEYWORD_ALIASES.get(key, key)


def predicate_for(keyword: str) -> Predicate:
    return KEYWORD_PREDICATES.get(canonical_keyword(keyword), _default_predicate)


def _sort_key(plant: PlantRecord):
    return (plant.growth_days is None, plant.growth_days or 0)


def filter_plants(
    catalog: PlantCatalog,
    keyword: Optional[str],
    preferences: Optional[Preferences] = None,
    limit: int = MAX_RESULTS,
) -> List[PlantRecord]:
    if keyword is None or not keyword.strip():
        raise ValidationError("Keyword is required")

    preferences = preferences or Preferences()
    predicate = predicate_for(keyword)
    selected = [plant for plant in catalog if predicate(plant) and preferences.matches(plant)]
    selected.sort(key=_sort_key)
    return selected[:limit]

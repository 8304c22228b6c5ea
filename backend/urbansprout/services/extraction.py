"""Surface catalog plants mentioned in a free-text chatbot reply."""
from typing import List

from urbansprout.services.catalog import PlantCatalog, PlantRecord

MAX_EXTRACTED = 4

RECOMMENDATION_TRIGGERS = (
    "recommend",
    "suggest",
    "what should i grow",
    "what can i grow",
    "what to grow",
    "which plants",
    "what plants",
    "best plants",
    "good plants",
    "easy to grow",
    "beginner",
    "quick growing",
    "fast growing",
    "for my balcony",
    "small space",
    "ideas",
)

EDIBLE_PLANT_KEYWORDS = (
    "tomato",
    "lettuce",
    "spinach",
    "kale",
    "arugula",
    "chard",
    "radish",
    "carrot",
    "cucumber",
    "zucchini",
    "pepper",
    "bean",
    "broccoli",
    "onion",
    "microgreen",
    "basil",
    "mint",
    "cilantro",
    "parsley",
    "rosemary",
    "strawberr",
    "blueberr",
    "raspberr",
    "lemon",
    "watermelon",
)


def is_recommendation_request(message: str) -> bool:
    text = (message or "").lower()
    return any(trigger in text for trigger in RECOMMENDATION_TRIGGERS)


def _match_record(keyword: str, catalog: PlantCatalog):
    for record in catalog:
        name = record.name.lower()
        if keyword in name or name in keyword:
            return record
    return None


def extract_recommendations(reply: str, catalog: PlantCatalog, limit: int = MAX_EXTRACTED) -> List[PlantRecord]:
    """Return up to ``limit`` catalog records named in ``reply``.

    Keywords are matched by substring, so a short keyword can pick an
    unexpected record whose name happens to contain it.
    """
    text = (reply or "").lower()
    hits = sorted(
        (text.find(keyword), keyword) for keyword in EDIBLE_PLANT_KEYWORDS if keyword in text
    )

    found: List[PlantRecord] = []
    seen = set()
    for _, keyword in hits:
        record = _match_record(keyword, catalog)
        if record is None or record.name.lower() in seen:
            continue
        seen.add(record.name.lower())
        found.append(record)
        if len(found) >= limit:
            break
    return found

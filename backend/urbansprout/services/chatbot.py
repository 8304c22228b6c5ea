"""
Conversational turn handling for the gardening chatbot.

A turn pulls prior history from the session store, asks the text-generation
collaborator for a reply, records the exchange, and, when the user asked for
recommendations, attaches catalog plants named in the reply plus store items.
"""
import logging
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Protocol

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from urbansprout.models import Plant
from urbansprout.services.catalog import PlantCatalog, PlantRecord
from urbansprout.services.errors import ValidationError
from urbansprout.services.extraction import extract_recommendations, is_recommendation_request
from urbansprout.services.outcome import Outcome
from urbansprout.services.session_store import SessionStore
from urbansprout.services.store_products import recommended_products

logger = logging.getLogger(__name__)

ANONYMOUS_USER = "anonymous"

STEP_CONVERSATION = "conversation"
STEP_RECOMMENDATIONS = "recommendations"

PREDEFINED_QUESTIONS = [
    "I'm a beginner, give me suggestions",
    "I want specific recommendations",
    "Show me quick growing options",
    "I want plants for salads",
    "I want plants for smoothies",
    "What exotic fruits can I grow?",
    "I have a small balcony space",
    "I want low maintenance plants",
    "Help me start a vegetable garden",
]

STEP_BUTTONS = {
    STEP_RECOMMENDATIONS: [
        "How do I care for these plants?",
        "Show me quick growing options",
        "What about fruits?",
        "Start over",
    ],
    STEP_CONVERSATION: [
        "I'm a beginner, give me suggestions",
        "Show me quick growing options",
        "I want specific recommendations",
    ],
}

CARE_TIPS = [
    {
        "category": "Watering",
        "tip": "Check soil moisture with your finger before watering. Most plants prefer to dry out slightly between waterings.",
        "icon": "💧",
    },
    {
        "category": "Light",
        "tip": "Rotate your plants weekly to ensure even growth and prevent them from leaning toward the light source.",
        "icon": "☀️",
    },
    {
        "category": "Humidity",
        "tip": "Group plants together or use a pebble tray with water to increase humidity around your plants.",
        "icon": "💨",
    },
    {
        "category": "Cleaning",
        "tip": "Dust plant leaves regularly with a damp cloth to help them photosynthesize more efficiently.",
        "icon": "🧽",
    },
    {
        "category": "Observation",
        "tip": "Check your plants regularly for signs of pests, disease, or stress. Early detection makes treatment easier.",
        "icon": "👀",
    },
]

SEASONAL_ADVICE = {
    "Spring": {
        "title": "Spring Plant Care",
        "tips": [
            "Start fertilizing your plants as they enter their growing season",
            "This is the best time for repotting and sowing seeds",
            "Increase watering frequency as plants become more active",
            "Begin taking cuttings for propagation",
        ],
        "icon": "🌸",
    },
    "Summer": {
        "title": "Summer Plant Care",
        "tips": [
            "Water more frequently but check soil moisture first",
            "Mulch containers to keep roots cool",
            "Harvest often to keep plants producing",
            "Continue regular fertilizing schedule",
        ],
        "icon": "☀️",
    },
    "Fall": {
        "title": "Fall Plant Care",
        "tips": [
            "Reduce fertilizing as plant growth slows down",
            "Sow cool-season greens like spinach and lettuce",
            "Bring tender plants inside before first frost",
            "Check for pests that may have developed over summer",
        ],
        "icon": "🍂",
    },
    "Winter": {
        "title": "Winter Plant Care",
        "tips": [
            "Water less frequently as growth slows",
            "Grow microgreens and herbs on a sunny windowsill",
            "Provide extra light with grow lamps if needed",
            "Keep plants away from cold drafts and heating vents",
        ],
        "icon": "❄️",
    },
}


def season_for(day: date) -> str:
    if 3 <= day.month <= 5:
        return "Spring"
    if 6 <= day.month <= 8:
        return "Summer"
    if 9 <= day.month <= 11:
        return "Fall"
    return "Winter"


def seasonal_advice(day: Optional[date] = None) -> dict:
    day = day or date.today()
    season = season_for(day)
    return {"season": season, "advice": SEASONAL_ADVICE[season], "month": day.strftime("%B")}


def care_tips(rng: Optional[random.Random] = None) -> dict:
    rng = rng or random
    return {"tip": rng.choice(CARE_TIPS), "allTips": CARE_TIPS}


IDENTIFICATION_GUIDE = {
    "thick leaves": ["succulent", "jade plant", "aloe vera"],
    "heart shaped": ["pothos", "philodendron", "monstera"],
    "long thin leaves": ["snake plant", "spider plant", "dracaena"],
    "split leaves": ["monstera", "fiddle leaf fig"],
    "trailing": ["pothos", "ivy", "string of pearls"],
    "spiky": ["snake plant", "aloe vera", "cactus"],
}
DEFAULT_IDENTIFICATIONS = ["pothos", "snake plant", "spider plant"]
IDENTIFY_LOOKUPS = 3
IDENTIFY_MATCHED = "Based on your description, here are some possible matches:"
IDENTIFY_UNMATCHED = (
    "I couldn't identify your plant from that description. "
    "Try describing the leaf shape, size, or growth pattern."
)
IDENTIFY_FOLLOW_UPS = [
    "Can you describe the leaf shape?",
    "How big is the plant?",
    "Does it have flowers?",
    "Is it a trailing or upright plant?",
]


def possible_matches(description: str) -> List[str]:
    """Candidate plant names for every guide characteristic found in the text, in guide order."""
    text = description.lower()
    matches: List[str] = []
    for characteristic, plants in IDENTIFICATION_GUIDE.items():
        if characteristic in text:
            for name in plants:
                if name not in matches:
                    matches.append(name)
    return matches


def _listed_plants_named(db: Session, names: List[str]) -> List[dict]:
    found = []
    try:
        for name in names:
            plant = (
                db.query(Plant)
                .filter(
                    func.lower(Plant.plant_name).contains(name, autoescape=True),
                    Plant.is_active.is_(True),
                    Plant.archived.is_(False),
                )
                .order_by(Plant.id)
                .first()
            )
            if plant is not None:
                found.append({
                    "id": plant.id,
                    "name": plant.plant_name,
                    "description": plant.description,
                    "image": plant.image_url,
                    "category": plant.category,
                })
    except SQLAlchemyError as e:
        logger.error(f"Error fetching plants matching an identification: {e}")
    return found


def identify_plant(
    db: Session, description: Optional[str], characteristics: Optional[List[str]] = None,
) -> dict:
    if description is None or not description.strip():
        raise ValidationError("Plant description is required")

    text = " ".join([description, *(characteristics or [])])
    matches = possible_matches(text)
    response = IDENTIFY_MATCHED
    if not matches:
        response = IDENTIFY_UNMATCHED
        matches = list(DEFAULT_IDENTIFICATIONS)

    return {
        "response": response,
        "possibleMatches": matches,
        "plants": _listed_plants_named(db, matches[:IDENTIFY_LOOKUPS]),
        "suggestions": list(IDENTIFY_FOLLOW_UPS),
    }


class TextGenerator(Protocol):
    def generate(self, message: str, history: List[Dict[str, str]]) -> Outcome[str]:
        ...


@dataclass
class ChatTurn:
    message: str
    step: str
    plants: List[PlantRecord] = field(default_factory=list)
    store_items: List[dict] = field(default_factory=list)
    buttons: List[str] = field(default_factory=list)
    fallback_used: bool = False

    def to_response(self) -> dict:
        return {
            "message": self.message,
            "plants": [plant.to_dict() for plant in self.plants],
            "storeItems": self.store_items,
            "buttons": self.buttons,
            "step": self.step,
        }


class ChatService:
    def __init__(self, catalog: PlantCatalog, sessions: SessionStore, text_generator: TextGenerator):
        self.catalog = catalog
        self.sessions = sessions
        self.text_generator = text_generator

    def process_turn(self, db: Session, message: Optional[str], user_id: Optional[str] = None) -> ChatTurn:
        if message is None or not message.strip():
            raise ValidationError("Message is required")

        message = message.strip()
        session_id = (user_id or "").strip() or ANONYMOUS_USER

        history = self.sessions.history(session_id)
        reply = self.text_generator.generate(message, history)
        self.sessions.append(session_id, message, reply.value)

        if not is_recommendation_request(message):
            return ChatTurn(
                message=reply.value,
                step=STEP_CONVERSATION,
                buttons=list(STEP_BUTTONS[STEP_CONVERSATION]),
                fallback_used=reply.used_fallback,
            )

        plants = extract_recommendations(reply.value, self.catalog)
        products = recommended_products(db)
        if reply.used_fallback or products.used_fallback:
            logger.warning(
                f"Chat turn for {session_id} degraded: reply={reply.status} products={products.status}"
            )
        return ChatTurn(
            message=reply.value,
            step=STEP_RECOMMENDATIONS,
            plants=plants,
            store_items=products.value,
            buttons=list(STEP_BUTTONS[STEP_RECOMMENDATIONS]),
            fallback_used=reply.used_fallback or products.used_fallback,
        )

"""Store products surfaced next to chatbot plant recommendations."""
import logging
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from urbansprout.models import Product
from urbansprout.services.outcome import Outcome

logger = logging.getLogger(__name__)

MAX_PRODUCTS = 4

FALLBACK_PRODUCTS: List[Dict[str, str]] = [
    {"name": "Small Ceramic Pots", "description": "Perfect for herbs and small vegetables", "category": "container"},
    {"name": "Hand Trowel", "description": "Essential for planting and transplanting", "category": "tool"},
]


def product_summary(product: Product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "category": product.category,
        "image": product.image,
    }


def recommended_products(db: Session, limit: int = MAX_PRODUCTS) -> Outcome[List[dict]]:
    try:
        products = (
            db.query(Product)
            .filter(Product.chatbot_recommended.is_(True), Product.is_active.is_(True))
            .order_by(Product.id)
            .limit(limit)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Error fetching recommended products: {e}")
        return Outcome.fallback([dict(item) for item in FALLBACK_PRODUCTS], str(e))

    return Outcome.ok([product_summary(product) for product in products])

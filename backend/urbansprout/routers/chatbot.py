"""Gardening chatbot endpoints."""
import logging

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.orm import Session

from urbansprout.config import settings
from urbansprout.database import get_db
from urbansprout.dependencies import get_chat_service
from urbansprout.schemas import ChatRequest, IdentifyRequest
from urbansprout.services.chatbot import (
    PREDEFINED_QUESTIONS, ChatService, care_tips, identify_plant, seasonal_advice,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chatbot", tags=["chatbot"])

limiter = Limiter(key_func=get_remote_address)


@router.post("")
@limiter.limit(settings.chat_rate_limit)
def chat(
    request: Request,
    data: ChatRequest,
    db: Session = Depends(get_db),
    service: ChatService = Depends(get_chat_service),
):
    """Answer one chat message, attaching plants and store items when recommending."""
    turn = service.process_turn(db, data.message, data.user_id)
    if turn.fallback_used:
        logger.info(f"Chat reply served from fallback (step={turn.step})")
    return turn.to_response()


@router.get("/questions")
def predefined_questions():
    return {"questions": PREDEFINED_QUESTIONS}


@router.get("/tips")
def plant_care_tips():
    return care_tips()


@router.get("/seasonal")
def seasonal():
    """Seasonal care advice for the current month."""
    return seasonal_advice()


@router.post("/identify")
def identify(data: IdentifyRequest, db: Session = Depends(get_db)):
    """Suggest likely plants from a description of leaves and growth habit."""
    return identify_plant(db, data.description, data.characteristics)

"""FastAPI dependencies for the shared, start-up initialised services."""
from fastapi import Depends, Request

from urbansprout.services.catalog import PlantCatalog
from urbansprout.services.chatbot import ChatService, TextGenerator
from urbansprout.services.session_store import SessionStore


def get_catalog(request: Request) -> PlantCatalog:
    return request.app.state.catalog


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_text_generator(request: Request) -> TextGenerator:
    return request.app.state.text_generator


def get_chat_service(
    catalog: PlantCatalog = Depends(get_catalog),
    sessions: SessionStore = Depends(get_session_store),
    text_generator: TextGenerator = Depends(get_text_generator),
) -> ChatService:
    return ChatService(catalog, sessions, text_generator)

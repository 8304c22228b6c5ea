from urbansprout.routers.plant_suggestions import router as plant_suggestions_router
from urbansprout.routers.plants import router as plants_router
from urbansprout.routers.admin_suggestions import router as admin_suggestions_router
from urbansprout.routers.chatbot import router as chatbot_router

__all__ = ["plant_suggestions_router", "plants_router", "admin_suggestions_router", "chatbot_router"]

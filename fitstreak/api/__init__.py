from fastapi import APIRouter
from fitstreak.api import activities, goals

api_router = APIRouter()

api_router.include_router(activities.router)
api_router.include_router(goals.router)

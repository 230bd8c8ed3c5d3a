import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fitstreak.api import api_router
from fitstreak.config import settings
from fitstreak.database import create_db_and_tables

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="FitStreak",
    description="Weekly fitness goals, streaks and personal records",
    version="1.0.0",
)

# CORS middleware configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_PREFIX)

@app.on_event("startup")
async def on_startup():
    logger.info("Starting FitStreak (%s)", settings.ENVIRONMENT)
    create_db_and_tables()

@app.get("/")
async def root():
    return {"message": "Welcome to FitStreak API"}

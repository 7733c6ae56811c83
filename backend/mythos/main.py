from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
import os
import logging
from contextlib import asynccontextmanager

from .database import get_db, check_database_connection, create_tables, get_db_session
from .journey import JourneyService, journey_router
from .scoring import JourneyError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the database and make sure the journey settings exist."""
    logger.info("Starting up Mythos Ascendant API...")
    # Strict DB connectivity check in production; only skip during pytest
    if os.getenv("PYTEST_CURRENT_TEST") is not None:
        logger.info("Skipping DB setup during tests")
    else:
        if not check_database_connection():
            logger.error("Database connection failed")
            raise Exception("Cannot connect to database")
        create_tables()
        with get_db_session() as db:
            JourneyService(db).seed_defaults()
    yield
    logger.info("Shutting down Mythos Ascendant API...")


app = FastAPI(
    title="Mythos Ascendant API",
    description="Points, titles and leaderboard for the Mythos Ascendant reading challenge",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "http://localhost:3000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(journey_router)


@app.exception_handler(JourneyError)
async def journey_error_handler(request: Request, exc: JourneyError):
    """Report engine errors raised outside the service boundary as results."""
    logger.error(f"{request.url.path} failed: {exc}")
    return JSONResponse(status_code=409, content={"status": "error", "message": str(exc)})


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Mythos Ascendant API", "version": VERSION}


@app.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """Health check endpoint with database connectivity test."""
    try:
        db.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "database": "connected",
            "version": VERSION,
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
            "version": VERSION,
        }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

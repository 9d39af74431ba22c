"""
FastAPI application entry point for the Leaderboard API.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import settings
from database import init_db

# Import routers
from routers import leaderboard

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize services on startup, clean up on shutdown."""
    print("[INFO] Starting Leaderboard API...")

    # Create database tables if they don't exist
    try:
        init_db()
        print("[INFO] Database tables initialized")
    except Exception as e:
        print(f"[ERROR] Database initialization failed: {e}")

    yield

    print("[INFO] Shutting down Leaderboard API...")


app = FastAPI(
    title="Leaderboard API",
    description="Ranked leaderboard and gamification levels for the learning platform",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "message": "Leaderboard API is running",
        "version": "1.0.0",
    }


@app.get("/health")
async def health_check():
    """Liveness check endpoint."""
    return {
        "status": "healthy",
    }


# Include routers
app.include_router(leaderboard.router, prefix="/api/leaderboard", tags=["Leaderboard"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

"""
FastAPI application for user onboarding and CIBIL scoring.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.auth import router as auth_router
from api.handlers import (
    auth_exception_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from auth.exceptions import AuthException
from auth.schemas import ApiResponse
from config import Config

# Validate configuration on startup
Config.validate()

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown."""
    for directory in (Config.UPLOAD_DIR, Config.RETAINED_DIR):
        Path(directory).mkdir(parents=True, exist_ok=True)
    logger.info("Upload directories ready: %s, %s", Config.UPLOAD_DIR, Config.RETAINED_DIR)
    yield
    logger.info("Shutting down application...")


app = FastAPI(
    title="CIBIL Onboarding API",
    description="Registers users with an uploaded financial profile and serves their CIBIL score",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers (apply to all endpoints)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(AuthException, auth_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(auth_router, tags=["auth"])


@app.get("/")
def health_check():
    """Root health check endpoint."""
    return ApiResponse(
        success=True,
        message="System operational",
        data={"status": "ok"}
    )

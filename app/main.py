"""
Internship Match Portal - Main Application

FastAPI backend with:
- MongoDB for listings, profiles, applications, saved items, notifications
- AI-assisted ranking of internships against a student profile,
  with heuristic matching as the fallback
- Bearer tokens issued by the external auth provider

Run: uvicorn app.main:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.api.dependencies import build_services
from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import RecordNotFoundError, RecordValidationError
from app.core.log import get_logger
from app.db.mongodb import (
    create_mongo_client, get_database, init_mongo_indexes, test_mongo_connection
)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build every collaborator once and share it through app.state."""
    settings = get_settings()
    client = create_mongo_client(settings)
    db = get_database(client, settings)

    try:
        init_mongo_indexes(db)
    except PyMongoError as e:
        log.warning("MongoDB index initialization failed: %s", e)

    app.state.mongo_client = client
    app.state.services = build_services(settings, db)
    log.info(
        "Services ready (AI ranking %s)",
        "enabled" if settings.ai_enabled else "disabled, heuristic matching only"
    )
    yield
    client.close()


# Create FastAPI app
app = FastAPI(
    title="Internship Match Portal",
    description="""
    Browse, filter, save and apply to internship listings.

    ## Features
    - **Internships**: Search and filter active listings; government accounts manage postings
    - **Recommendations**: Listings ranked against the student profile (AI, with heuristic fallback)
    - **Profiles**: Skills, interests and preferences used for matching
    - **Applications / Saved / Notifications**: Per-student records
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(RecordValidationError)
async def validation_error_handler(request: Request, exc: RecordValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.reason})


@app.exception_handler(RecordNotFoundError)
async def not_found_handler(request: Request, exc: RecordNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(PyMongoError)
async def store_error_handler(request: Request, exc: PyMongoError):
    log.error("Store write failed on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={"detail": "Could not save your changes right now. Please try again."}
    )


@app.get("/health", tags=["Health"])
def health_check(request: Request):
    """Detailed health check."""
    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection(request.app.state.mongo_client) else "disconnected",
        "ai_ranking": "enabled" if get_settings().ai_enabled else "disabled"
    }

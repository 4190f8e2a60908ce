import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from accounts.core.config import settings
from accounts.core.database import engine, Base
from accounts.core.exceptions import UserError
from accounts.api.routes import users

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage app lifecycle events.

    Startup: create tables from all models that inherit from Base.
    In production, use migrations (Alembic) instead of create_all.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
    yield


app = FastAPI(
    title="User Accounts API",
    description="User registration, profile updates and password changes",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware - allows frontend to make requests to backend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UserError)
async def user_error_handler(request: Request, exc: UserError):
    """All domain failures surface as 400 with the message as plain text"""
    logger.debug(f"{request.method} {request.url.path} rejected: {exc.message}")
    return PlainTextResponse(exc.message, status_code=400)


# All routes are prefixed with /api
app.include_router(users.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {"message": "User Accounts API", "version": "1.0.0"}


@app.get("/health")
async def health():
    """Health check endpoint - used by monitoring/deployment tools"""
    return {"status": "healthy"}

"""FastAPI application entry point"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swiftjobs.api.error_handlers import register_error_handlers
from swiftjobs.api.routes import (
    auth,
    employers,
    health,
    job_seekers,
    jobs,
    matches,
    messages,
)
from swiftjobs.core.config import settings
from swiftjobs.core.logging import setup_logging
from swiftjobs.db.session import init_db

# Setup logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(settings.DATABASE_URL)
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Swift Jobs job-matching backend API",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(health.router, prefix=f"{settings.API_PREFIX}/health", tags=["health"])
app.include_router(job_seekers.router, prefix=f"{settings.API_PREFIX}/jobseeker", tags=["job-seekers"])
app.include_router(employers.router, prefix=f"{settings.API_PREFIX}/employer", tags=["employers"])
app.include_router(jobs.router, prefix=settings.API_PREFIX, tags=["jobs"])
app.include_router(matches.router, prefix=settings.API_PREFIX, tags=["matches"])
app.include_router(messages.router, prefix=f"{settings.API_PREFIX}/message", tags=["messages"])
app.include_router(auth.router, prefix=f"{settings.API_PREFIX}/auth", tags=["auth"])


@app.get("/")
async def root():
    return {
        "message": "Swift Jobs API",
        "version": "1.0.0",
        "docs": "/docs",
    }

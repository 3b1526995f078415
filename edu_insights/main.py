"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware

from edu_insights.config import settings
from edu_insights.api import (
    health_router,
    stats_router,
    subjects_router,
    careers_router,
)

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s  %(name)-25s  %(levelname)-8s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("edu-insights starting (env=%s)", settings.ENV)
    yield
    logger.info("edu-insights shut down")


app = FastAPI(
    title="edu-insights API",
    description="Quiz statistics and career-guidance subject resolution",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Middleware ─────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(health_router, tags=["Health"])
app.include_router(stats_router, prefix="/api/stats", tags=["Statistics"])
app.include_router(subjects_router, prefix="/api/subjects", tags=["Subjects"])
app.include_router(careers_router, prefix="/api/careers", tags=["Careers"])


@app.get("/")
async def root():
    return {
        "name": "edu-insights API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }

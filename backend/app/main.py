"""
Point d'entrée principal de l'API de gestion des élèves et utilisateurs.
Démarrage : uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import app.models  # noqa: F401 : enregistre tous les modèles dans Base.metadata avant les routers
from app.config import settings
from app.database import create_tables
from app.error_handlers import register_error_handlers
from app.logging_config import setup_logging
from app.routers import students, users

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : journalisation et création des tables."""
    setup_logging()
    if settings.AUTO_CREATE_TABLES:
        create_tables()
    logger.info("API démarrée (env=%s, version=%s)", settings.ENV, VERSION)
    yield
    logger.info("API arrêtée.")


app = FastAPI(
    title="Student Records API",
    description="API de gestion des dossiers élèves et des comptes utilisateurs",
    version=VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS : autorise les ports localhost en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)

app.include_router(students.router)
app.include_router(users.router)

register_error_handlers(app)


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Student Records API", "version": VERSION}

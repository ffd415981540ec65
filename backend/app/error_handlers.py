"""
Handlers d'exceptions globaux : table de correspondance erreur → statut HTTP.

- RecordServiceError (introuvable, doublon, identifiants) → statut porté par l'erreur
- RequestValidationError → 422 avec la liste des erreurs par champ
- Exception → 500, sans détail interne
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.errors import RecordServiceError
from app.schemas.common import to_field_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre tous les handlers d'erreurs sur l'application."""

    @app.exception_handler(RecordServiceError)
    async def record_service_error_handler(request: Request, exc: RecordServiceError) -> JSONResponse:
        logger.info("%s sur %s %s : %s", exc.code, request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = to_field_errors(exc.errors())
        logger.info("Requête invalide sur %s : %d erreur(s)", request.url.path, len(errors))
        return JSONResponse(
            status_code=422,
            content={
                "detail": "Données invalides.",
                "errors": [e.model_dump() for e in errors],
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Intercepte toutes les exceptions non gérées (y compris les erreurs BDD) pour garantir
        que la réponse 500 passe bien par CORSMiddleware.
        """
        logger.error("Exception non gérée : %s", exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Une erreur interne est survenue."},
        )

# pokedex/errors.py
"""
Error hierarchy for the pokedex service.

Every error carries the HTTP status it maps to and the message sent to
the client.  ``register_error_handlers`` turns them into ``{"message": ...}``
JSON at the request boundary, so nothing escapes a single request.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body."


class PokedexError(Exception):
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"message": self.message}


class ValidationError(PokedexError):
    http_status = status.HTTP_400_BAD_REQUEST
    message = 'Both "name" and "category" fields are required.'


class NotFoundError(PokedexError):
    http_status = status.HTTP_404_NOT_FOUND
    message = "Pokémon not found."


class UpstreamError(PokedexError):
    # upstream status and detail are never exposed
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Unable to retrieve Pokémon data."


# ---------------------------
# FastAPI handlers
# ---------------------------
def register_error_handlers(app: FastAPI) -> None:
    """Register the domain and request-validation handlers on ``app``."""

    @app.exception_handler(PokedexError)
    async def pokedex_error_handler(request: Request, exc: PokedexError):
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.http_status, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_BODY_MESSAGE},
        )

"""
Erreurs métier du core (contrôle d'accès, annuaire, passages, résultats).

Chaque erreur porte un code stable et un statut HTTP ; le handler global
(register_error_handlers) les transforme en enveloppe JSON :
    {"error": {"code": ..., "message": ...}}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ExamError(Exception):
    code = "EXAM_ERROR"
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class Unauthorized(ExamError):
    code = "UNAUTHORIZED"
    http_status = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized"


class MissingIdentity(ExamError):
    code = "MISSING_IDENTITY"
    http_status = status.HTTP_401_UNAUTHORIZED
    default_message = "Caller identity missing"


class NotFound(ExamError):
    code = "NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class NoSuchUser(NotFound):
    code = "NO_SUCH_USER"
    default_message = "User not found"


class DuplicateMobile(ExamError):
    code = "DUPLICATE_MOBILE"
    http_status = status.HTTP_409_CONFLICT
    default_message = "Mobile number already registered"


class ProfileExists(ExamError):
    code = "PROFILE_EXISTS"
    http_status = status.HTTP_409_CONFLICT
    default_message = "A profile already exists for this caller"


class InvalidCredential(ExamError):
    code = "INVALID_CREDENTIAL"
    http_status = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid password"


class PasswordTooLong(ExamError):
    code = "PASSWORD_TOO_LONG"
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Password too long (bcrypt limit is 72 bytes)"


class InvalidInput(ExamError):
    code = "INVALID_INPUT"
    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


# =========================================================
# Handlers FastAPI
# =========================================================
def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ExamError)
    async def exam_error_handler(request: Request, exc: ExamError):
        if isinstance(exc, (Unauthorized, MissingIdentity)):
            logger.warning("%s on %s: %s", exc.code, request.url.path, exc.message)
        else:
            logger.info("%s on %s: %s", exc.code, request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Invalid request data",
                    "details": [
                        {
                            "field": ".".join(str(loc) for loc in e["loc"]),
                            "message": e["msg"],
                        }
                        for e in exc.errors()
                    ],
                }
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        # jamais de détails internes côté client
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}},
        )

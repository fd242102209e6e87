from fastapi import Security
from fastapi.security.api_key import APIKeyHeader

from typing_exam.core.config import get_settings
from typing_exam.core.errors import MissingIdentity

settings = get_settings()

caller_header = APIKeyHeader(name=settings.CALLER_HEADER, auto_error=False)


def get_caller(identity: str | None = Security(caller_header)) -> str:
    """
    Identité opaque de l'appelant, fournie par la plateforme en en-tête.
    """
    if identity and identity.strip():
        return identity.strip()
    raise MissingIdentity()

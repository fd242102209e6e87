from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Base
    APP_ENV: str = "dev"  # dev | staging | prod | test
    APP_NAME: str = "TYPING EXAM API"
    APP_VERSION: str = "0.1.0"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Identité appelant (fournie par la plateforme devant l'API)
    CALLER_HEADER: str = "x-caller-id"

    # Credentials: shift (legacy, NON sécurisé) | bcrypt
    CREDENTIAL_SCHEME: str = "shift"
    CREDENTIAL_SHIFT: int = 3

    # Sessions
    SESSION_TOKEN_BYTES: int = 24

    # Compte admin bien connu (bootstrap)
    ADMIN_MOBILE: str = "8055926965"
    ADMIN_NAME: str = "Admin"
    ADMIN_PASSWORD: str = "admin@123"

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    return Settings()

from enum import Enum
from pydantic import BaseModel, Field


class Role(str, Enum):
    admin = "admin"
    user = "user"
    guest = "guest"


class UserProfile(BaseModel):
    """
    Profil stocké (1 par identité). session_token == "" => déconnecté.
    """
    name: str
    mobile: str
    credential: str = Field(..., description="Mot de passe transformé par le CredentialCodec")
    session_token: str = ""


class LoginResult(BaseModel):
    name: str
    mobile: str
    session_token: str

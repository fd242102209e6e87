from typing import Optional
from pydantic import BaseModel, Field

from typing_exam.models.users import Role, UserProfile


# -------------------
# Comptes / sessions
# -------------------
class RegisterIn(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    mobile: str = Field(min_length=4, max_length=20, pattern=r"^\s*\+?[0-9]+\s*$")
    password: str = Field(min_length=1, max_length=256)


class RegisterOut(BaseModel):
    status: str = "OK"


class LoginIn(BaseModel):
    mobile: str = Field(min_length=1, max_length=20)
    password: str = Field(min_length=1, max_length=256)


class LoginOut(BaseModel):
    name: str
    mobile: str
    session_token: str


class SessionCheckIn(BaseModel):
    mobile: str
    session_token: str


class SessionCheckOut(BaseModel):
    valid: bool


class LogoutIn(BaseModel):
    mobile: str


# -------------------
# Profils / rôles
# -------------------
class ProfileIn(BaseModel):
    # credential et session ne sont jamais acceptés du client
    name: str = Field(min_length=1, max_length=120)
    mobile: str = Field(min_length=4, max_length=20, pattern=r"^\s*\+?[0-9]+\s*$")


class ProfileOut(BaseModel):
    name: str
    mobile: str
    logged_in: bool

    @classmethod
    def from_profile(cls, p: Optional[UserProfile]) -> Optional["ProfileOut"]:
        if p is None:
            return None
        return cls(name=p.name, mobile=p.mobile, logged_in=bool(p.session_token))


class RoleOut(BaseModel):
    role: Role


class IsAdminOut(BaseModel):
    is_admin: bool


class RoleAssignIn(BaseModel):
    identity: str = Field(min_length=1)
    role: Role


class OkOut(BaseModel):
    ok: bool = True

from typing import Optional

from fastapi import APIRouter, Depends

from typing_exam.core.deps import get_backend
from typing_exam.core.security import get_caller
from typing_exam.schemas.auth import (
    ProfileIn, ProfileOut,
    RoleOut, IsAdminOut, RoleAssignIn, OkOut,
)
from typing_exam.services.backend import ExamBackend

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=Optional[ProfileOut])
def get_my_profile(
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    return ProfileOut.from_profile(backend.get_caller_user_profile(caller))


@router.put("/me", response_model=ProfileOut)
def save_my_profile(
    payload: ProfileIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    p = backend.save_caller_user_profile(caller, payload.name, payload.mobile)
    return ProfileOut.from_profile(p)


@router.get("/me/role", response_model=RoleOut)
def get_my_role(
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    return RoleOut(role=backend.get_caller_user_role(caller))


@router.get("/me/is-admin", response_model=IsAdminOut)
def is_admin(
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    return IsAdminOut(is_admin=backend.is_caller_admin(caller))


@router.post("/roles", response_model=OkOut)
def assign_role(
    payload: RoleAssignIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    backend.assign_caller_user_role(caller, payload.identity, payload.role)
    return OkOut()


@router.get("/{identity}", response_model=Optional[ProfileOut])
def get_user_profile(
    identity: str,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    return ProfileOut.from_profile(backend.get_user_profile(caller, identity))

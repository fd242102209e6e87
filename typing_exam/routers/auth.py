from fastapi import APIRouter, Depends

from typing_exam.core.deps import get_backend
from typing_exam.core.security import get_caller
from typing_exam.schemas.auth import (
    RegisterIn, RegisterOut,
    LoginIn, LoginOut,
    SessionCheckIn, SessionCheckOut,
    LogoutIn, OkOut,
)
from typing_exam.services.backend import ExamBackend

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterOut)
def register(
    payload: RegisterIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    status = backend.register_user(caller, payload.name, payload.mobile, payload.password)
    return RegisterOut(status=status)


@router.post("/login", response_model=LoginOut)
def login(
    payload: LoginIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    res = backend.login(caller, payload.mobile, payload.password)
    return LoginOut(name=res.name, mobile=res.mobile, session_token=res.session_token)


@router.post("/session/check", response_model=SessionCheckOut)
def check_session(
    payload: SessionCheckIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    # appelé en polling par le client (kick des autres appareils)
    return SessionCheckOut(valid=backend.check_session_valid(caller, payload.mobile, payload.session_token))


@router.post("/logout", response_model=OkOut)
def logout(
    payload: LogoutIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    backend.logout(caller, payload.mobile)
    return OkOut()

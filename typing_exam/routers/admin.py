from fastapi import APIRouter, Depends

from typing_exam.core.deps import get_backend
from typing_exam.core.security import get_caller
from typing_exam.schemas.auth import OkOut
from typing_exam.services.backend import ExamBackend

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/seed", response_model=OkOut)
def seed_data(
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    # idempotent : ne fait rien si des passages existent déjà
    backend.seed_data(caller)
    return OkOut()


@router.post("/add-admin", response_model=OkOut)
def add_admin(
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    backend.add_admin(caller)
    return OkOut()

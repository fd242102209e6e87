from typing import List

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from typing_exam.core.deps import get_backend
from typing_exam.core.security import get_caller
from typing_exam.models.passages import Passage
from typing_exam.schemas.auth import OkOut
from typing_exam.schemas.exam import PassageIn, PassageCreatedOut
from typing_exam.services.backend import ExamBackend

router = APIRouter(prefix="/passages", tags=["passages"])


@router.get("", response_model=List[Passage])
def list_passages(
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    return backend.get_passages(caller)


@router.get("/{passage_id}", response_model=Passage)
def get_passage(
    passage_id: str,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    return backend.get_passage(caller, passage_id)


@router.post("", response_model=PassageCreatedOut, status_code=HTTP_201_CREATED)
def add_passage(
    payload: PassageIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    passage_id = backend.add_passage(caller, payload.title, payload.content, payload.time_minutes)
    return PassageCreatedOut(id=passage_id)


@router.put("/{passage_id}", response_model=OkOut)
def update_passage(
    passage_id: str,
    payload: PassageIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    backend.update_passage(caller, passage_id, payload.title, payload.content, payload.time_minutes)
    return OkOut()


@router.delete("/{passage_id}", response_model=OkOut)
def delete_passage(
    passage_id: str,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    backend.delete_passage(caller, passage_id)
    return OkOut()

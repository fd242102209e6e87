from typing import List

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from typing_exam.core.deps import get_backend
from typing_exam.core.security import get_caller
from typing_exam.models.results import TestResult
from typing_exam.schemas.exam import ResultIn, ResultCreatedOut
from typing_exam.services.backend import ExamBackend

router = APIRouter(prefix="/results", tags=["results"])


@router.post("", response_model=ResultCreatedOut, status_code=HTTP_201_CREATED)
def submit_result(
    payload: ResultIn,
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    result_id = backend.submit_test_result(
        caller,
        payload.user_name,
        payload.user_mobile,
        payload.passage_title,
        payload.wpm,
        payload.accuracy,
        payload.mistakes,
    )
    return ResultCreatedOut(id=result_id)


@router.get("", response_model=List[TestResult])
def list_results(
    caller: str = Depends(get_caller),
    backend: ExamBackend = Depends(get_backend),
):
    return backend.get_test_results(caller)

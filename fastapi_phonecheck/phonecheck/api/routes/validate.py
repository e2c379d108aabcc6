from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from phonecheck.api.deps import get_store
from phonecheck.db.store import NumberStore
from phonecheck.schemas.validation import BatchResult, ValidateRequest
from phonecheck.services.validation_service import validate_batch

router = APIRouter(tags=["validation"])


@router.post("/validate", response_model=BatchResult)
def validate_numbers(
    payload: ValidateRequest | None = Body(default=None),
    store: NumberStore = Depends(get_store),
):
    """
    번호 목록을 검증한다. 건별 오류는 응답 데이터에 포함되며 항상 200 을 반환한다.
    """
    numbers = payload.numbers if payload else []
    return validate_batch(numbers, store=store)

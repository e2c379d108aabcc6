from __future__ import annotations

import logging
from collections.abc import Iterator

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from phonecheck.db.session import get_db
from phonecheck.db.store import NumberStore, StoreUnavailableError
from phonecheck.services.validator_client import ValidatorClient

logger = logging.getLogger(__name__)


def get_store(db: Session = Depends(get_db)) -> Iterator[NumberStore]:
    store = NumberStore(db)
    try:
        store.ping()
    except StoreUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    yield store


def get_best_effort_store(db: Session = Depends(get_db)) -> Iterator[NumberStore]:
    """
    저장소 연결이 안 돼도 요청을 막지 않는다. 이후 insert 실패는 호출하는 쪽에서 로그만 남긴다.
    """
    store = NumberStore(db)
    try:
        store.ping()
    except StoreUnavailableError as exc:
        logger.warning("저장소 연결 불가, 저장 없이 진행: %s", exc)
    yield store


def get_validator_client() -> ValidatorClient:
    return ValidatorClient()

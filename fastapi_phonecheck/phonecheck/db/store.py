from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from phonecheck.models.domain import GeneratedNumber, NumberValidation


class StoreUnavailableError(RuntimeError):
    """저장소 연결 불가."""


class NumberStore:
    """
    생성 번호/검증 결과 두 레코드 집합에 대한 단건 insert 전용 저장소.

    요청마다 세션 하나를 감싸며, insert 는 건별로 커밋한다. 배치 단위 트랜잭션은
    없으므로 중간에 실패한 건만 유실되고 앞서 커밋된 건은 그대로 남는다.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def ping(self) -> None:
        try:
            self.session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreUnavailableError(f"저장소에 연결할 수 없습니다: {exc}") from exc

    def add_generated_number(
        self,
        number: str,
        country_code: str,
        *,
        created_at: datetime | None = None,
    ) -> GeneratedNumber:
        record = GeneratedNumber(
            number=number,
            country_code=country_code,
            created_at=created_at or datetime.now(timezone.utc),
        )
        self._insert(record)
        return record

    def add_validation(
        self,
        number: str,
        *,
        country_code: str | None = None,
        number_type: str | None = None,
        is_possible: bool | None = None,
        is_valid: bool | None = None,
        error: str | None = None,
        validated_at: datetime | None = None,
    ) -> NumberValidation:
        record = NumberValidation(
            number=number,
            country_code=country_code,
            number_type=number_type,
            is_possible=is_possible,
            is_valid=is_valid,
            error=error,
            validated_at=validated_at or datetime.now(timezone.utc),
        )
        self._insert(record)
        return record

    def _insert(self, record: GeneratedNumber | NumberValidation) -> None:
        self.session.add(record)
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

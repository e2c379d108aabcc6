from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from phonecheck.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# SQLite 는 BIGINT 자동 증가를 지원하지 않으므로 INTEGER 로 대체
_PK = BigInteger().with_variant(Integer(), "sqlite")


class GeneratedNumber(Base):
    """생성기가 만든 후보 번호. 중복 허용, 수정/삭제 없음."""

    __tablename__ = "generated_numbers"

    id: Mapped[int] = mapped_column(_PK, primary_key=True, autoincrement=True)
    number: Mapped[str] = mapped_column(String(32), nullable=False)
    country_code: Mapped[str] = mapped_column(String(8), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )


class NumberValidation(Base):
    """검증 결과. 파싱 실패 건은 error 만 채워진다."""

    __tablename__ = "number_validations"

    id: Mapped[int] = mapped_column(_PK, primary_key=True, autoincrement=True)
    number: Mapped[str] = mapped_column(String(64), nullable=False)
    country_code: Mapped[str | None] = mapped_column(String(8))
    number_type: Mapped[str | None] = mapped_column("type", String(32))
    is_possible: Mapped[bool | None] = mapped_column(Boolean)
    is_valid: Mapped[bool | None] = mapped_column(Boolean)
    error: Mapped[str | None] = mapped_column(Text)
    validated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

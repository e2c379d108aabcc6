from __future__ import annotations

from pydantic import BaseModel, Field

NOT_AVAILABLE = "N/A"


class ReportedOutcome(BaseModel):
    """검증 서비스 응답의 한 건. 필드가 빠져도 표에는 N/A 로 표시한다."""

    number: str
    country_code: str | None = None
    type: str | None = None
    is_possible: bool | None = None
    is_valid: bool = False
    error: str | None = None


class ReportedBatch(BaseModel):
    numbers: list[ReportedOutcome] = Field(default_factory=list)
    valid_count: int = Field(default=0, ge=0)


class ResultRow(BaseModel):
    index: int = Field(..., ge=1)
    number: str
    country_code: str = NOT_AVAILABLE
    type: str = NOT_AVAILABLE
    is_valid: bool = False
    error: str | None = None


class ResultSummary(BaseModel):
    total: int = Field(..., ge=0)
    valid_count: int = Field(..., ge=0)
    percentage: str
    rows: list[ResultRow]

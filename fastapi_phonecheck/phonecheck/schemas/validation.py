from __future__ import annotations

from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    numbers: list[str] = Field(default_factory=list)


class ValidationOutcome(BaseModel):
    number: str
    country_code: str
    type: str
    is_possible: bool
    is_valid: bool


class ValidationFailure(BaseModel):
    number: str
    error: str


class BatchResult(BaseModel):
    numbers: list[ValidationOutcome | ValidationFailure] = Field(default_factory=list)
    valid_count: int = Field(default=0, ge=0)

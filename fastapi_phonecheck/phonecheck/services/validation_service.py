from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberType
from sqlalchemy.exc import SQLAlchemyError

from phonecheck.db.store import NumberStore
from phonecheck.schemas.validation import BatchResult, ValidationFailure, ValidationOutcome

logger = logging.getLogger(__name__)

PHONE_NUMBER_TYPE_NAMES = {
    value: name
    for name, value in vars(PhoneNumberType).items()
    if name.isupper() and isinstance(value, int)
}


@dataclass(frozen=True)
class NumberCheck:
    number: str
    country_code: str
    type: str
    is_possible: bool
    is_valid: bool


@dataclass(frozen=True)
class NumberCheckError:
    number: str
    error: str


def number_type_name(value: int) -> str:
    return PHONE_NUMBER_TYPE_NAMES.get(value, "UNKNOWN")


def check_number(number: str) -> NumberCheck | NumberCheckError:
    """
    번호 하나를 파싱/분류한다. 지역 힌트 없이 '+' 국제 접두사로만 국가를 판별하므로
    접두사가 없는 번호는 파싱 오류가 된다.
    """
    try:
        parsed = phonenumbers.parse(number, None)
    except NumberParseException as exc:
        return NumberCheckError(number=number, error=str(exc))

    return NumberCheck(
        number=number,
        country_code=f"+{parsed.country_code}",
        type=number_type_name(phonenumbers.number_type(parsed)),
        is_possible=phonenumbers.is_possible_number(parsed),
        is_valid=phonenumbers.is_valid_number(parsed),
    )


def validate_batch(numbers: Iterable[str], *, store: NumberStore | None = None) -> BatchResult:
    """
    입력 순서대로 한 건씩 검증하고 결과를 저장한다.

    건별 파싱 오류는 결과 목록에 데이터로 남기고 다음 건으로 진행한다.
    저장 실패도 로그만 남기고 배치를 중단하지 않는다.
    """
    outcomes: list[ValidationOutcome | ValidationFailure] = []
    valid_count = 0

    for number in numbers:
        result = check_number(number)
        validated_at = datetime.now(timezone.utc)

        if isinstance(result, NumberCheckError):
            logger.warning("Validation error for %s: %s", number, result.error)
            outcomes.append(ValidationFailure(number=result.number, error=result.error))
        else:
            outcomes.append(
                ValidationOutcome(
                    number=result.number,
                    country_code=result.country_code,
                    type=result.type,
                    is_possible=result.is_possible,
                    is_valid=result.is_valid,
                )
            )
            if result.is_valid:
                valid_count += 1

        if store is not None:
            _save_result(store, result, validated_at)

    return BatchResult(numbers=outcomes, valid_count=valid_count)


def _save_result(
    store: NumberStore,
    result: NumberCheck | NumberCheckError,
    validated_at: datetime,
) -> None:
    try:
        if isinstance(result, NumberCheckError):
            store.add_validation(result.number, error=result.error, validated_at=validated_at)
        else:
            store.add_validation(
                result.number,
                country_code=result.country_code,
                number_type=result.type,
                is_possible=result.is_possible,
                is_valid=result.is_valid,
                validated_at=validated_at,
            )
    except SQLAlchemyError:
        logger.exception("검증 결과 저장 실패 (number=%s)", result.number)

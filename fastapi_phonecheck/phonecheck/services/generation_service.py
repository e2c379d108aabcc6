from __future__ import annotations

import logging
import random

from sqlalchemy.exc import SQLAlchemyError

from phonecheck.db.store import NumberStore
from phonecheck.schemas.results import ReportedBatch
from phonecheck.services.number_generator import generate_numbers
from phonecheck.services.validator_client import ValidatorClient

logger = logging.getLogger(__name__)


def run_generation(
    store: NumberStore,
    validator: ValidatorClient,
    *,
    quantity: int,
    country_code: str,
    rng: random.Random | None = None,
) -> ReportedBatch | None:
    """
    번호 생성 -> 저장 -> 검증 서비스 호출까지 한 번에 처리한다.

    국가 코드가 잘못되면 generate_numbers 단계에서 예외가 나므로 저장/호출은 일어나지 않는다.
    """
    numbers = generate_numbers(quantity, country_code, rng=rng)

    saved = 0
    for number in numbers:
        try:
            store.add_generated_number(number, country_code)
            saved += 1
        except SQLAlchemyError:
            logger.exception("생성 번호 저장 실패 (number=%s)", number)
    logger.info("번호 생성 완료 (country_code=%s, generated=%s, saved=%s)", country_code, len(numbers), saved)

    return validator.validate(numbers)

from __future__ import annotations

import random

from phonecheck.core.phone import MAX_QUANTITY, MIN_QUANTITY, get_country_format


def generate_numbers(
    quantity: int,
    country_code: str,
    *,
    rng: random.Random | None = None,
) -> list[str]:
    """
    국가 접두사 뒤에 고정 길이의 무작위 로컬 번호를 붙여 후보 번호를 만든다.
    지원하지 않는 국가 코드면 아무것도 만들지 않고 즉시 예외를 던진다.
    """
    country = get_country_format(country_code)
    if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
        raise ValueError(f"수량은 {MIN_QUANTITY}~{MAX_QUANTITY} 사이여야 합니다.")

    rng = rng or random.Random()
    upper = 10 ** country.local_length - 1
    return [
        f"{country.dialing_code}{rng.randint(0, upper):0{country.local_length}d}"
        for _ in range(quantity)
    ]

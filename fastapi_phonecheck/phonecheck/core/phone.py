from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CountryFormat:
    dialing_code: str
    name: str
    local_length: int

    @property
    def label(self) -> str:
        return f"{self.dialing_code} ({self.name})"


# 생성기가 지원하는 국가 목록 (폼의 select 옵션 순서와 동일)
SUPPORTED_COUNTRIES: dict[str, CountryFormat] = {
    "+27": CountryFormat("+27", "South Africa", 9),
    "+234": CountryFormat("+234", "Nigeria", 10),
    "+254": CountryFormat("+254", "Kenya", 9),
    "+263": CountryFormat("+263", "Zimbabwe", 9),
    "+212": CountryFormat("+212", "Morocco", 9),
}

MIN_QUANTITY = 1
MAX_QUANTITY = 100


class UnsupportedCountryCodeError(ValueError):
    """지원하지 않는 국가 코드."""

    def __init__(self, country_code: str | None) -> None:
        super().__init__("Unsupported country code selected.")
        self.country_code = country_code


def get_country_format(country_code: str | None) -> CountryFormat:
    if not country_code or country_code not in SUPPORTED_COUNTRIES:
        raise UnsupportedCountryCodeError(country_code)
    return SUPPORTED_COUNTRIES[country_code]

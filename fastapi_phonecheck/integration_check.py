from __future__ import annotations

import argparse

from phonecheck.services.number_generator import generate_numbers
from phonecheck.services.presenter_service import summarize_results
from phonecheck.services.validator_client import ValidatorClient


def main() -> None:
    parser = argparse.ArgumentParser(description="검증 서비스 연동 점검 스크립트")
    parser.add_argument("--base-url", help="검증 서비스 주소 (기본값: VALIDATOR_BASE_URL)")
    parser.add_argument("--numbers", nargs="+", metavar="NUMBER", help="검증할 번호 목록")
    parser.add_argument("--generate", nargs=2, metavar=("COUNTRY_CODE", "QUANTITY"), help="번호 생성 후 검증")
    args = parser.parse_args()

    numbers: list[str] = list(args.numbers or [])
    if args.generate:
        country_code, quantity = args.generate
        numbers.extend(generate_numbers(int(quantity), country_code))

    client = ValidatorClient(args.base_url)
    summary = summarize_results(client.validate(numbers))
    if summary is None:
        print("검증 서비스 호출 실패:", client.validate_url)
        return

    print(f"총 {summary.total}건 중 {summary.valid_count}건 유효 ({summary.percentage}%)")
    for row in summary.rows:
        print(row.index, row.number, row.country_code, row.type, row.is_valid)


if __name__ == "__main__":
    main()

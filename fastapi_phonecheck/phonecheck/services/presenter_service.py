from __future__ import annotations

from phonecheck.schemas.results import NOT_AVAILABLE, ReportedBatch, ResultRow, ResultSummary


def format_percentage(valid_count: int, total: int) -> str:
    percentage = (valid_count / total) * 100 if total > 0 else 0
    return f"{percentage:.2f}"


def summarize_results(batch: ReportedBatch | None) -> ResultSummary | None:
    if batch is None:
        return None

    rows: list[ResultRow] = []
    for index, item in enumerate(batch.numbers, start=1):
        if item.error is not None:
            rows.append(ResultRow(index=index, number=item.number, error=item.error))
            continue
        rows.append(
            ResultRow(
                index=index,
                number=item.number,
                country_code=item.country_code or NOT_AVAILABLE,
                type=item.type or NOT_AVAILABLE,
                is_valid=item.is_valid,
            )
        )

    total = len(rows)
    return ResultSummary(
        total=total,
        valid_count=batch.valid_count,
        percentage=format_percentage(batch.valid_count, total),
        rows=rows,
    )

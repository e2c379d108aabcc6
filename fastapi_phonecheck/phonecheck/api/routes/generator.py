from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from phonecheck.api.deps import get_best_effort_store, get_validator_client
from phonecheck.core.phone import (
    MAX_QUANTITY,
    MIN_QUANTITY,
    SUPPORTED_COUNTRIES,
    UnsupportedCountryCodeError,
    get_country_format,
)
from phonecheck.db.store import NumberStore
from phonecheck.schemas.results import ResultSummary
from phonecheck.services.generation_service import run_generation
from phonecheck.services.presenter_service import summarize_results
from phonecheck.services.validator_client import ValidatorClient

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["generator"])


def _render(request: Request, summary: ResultSummary | None = None) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "countries": list(SUPPORTED_COUNTRIES.values()),
            "min_quantity": MIN_QUANTITY,
            "max_quantity": MAX_QUANTITY,
            "summary": summary,
        },
    )


@router.get("/", response_class=HTMLResponse)
def show_form(request: Request):
    return _render(request)


@router.post("/", response_class=HTMLResponse)
def generate(
    request: Request,
    quantity: int = Form(default=1, ge=MIN_QUANTITY, le=MAX_QUANTITY),
    country_code: str | None = Form(default=None),
    validator: ValidatorClient = Depends(get_validator_client),
    store: NumberStore = Depends(get_best_effort_store),
):
    """
    번호를 생성/저장한 뒤 검증 서비스 결과를 표로 렌더링한다.
    지원하지 않는(또는 누락된) 국가 코드는 저장소를 건드리기 전에 텍스트 오류로 종료한다.
    """
    try:
        country = get_country_format(country_code)
    except UnsupportedCountryCodeError as exc:
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    batch = run_generation(store, validator, quantity=quantity, country_code=country.dialing_code)
    return _render(request, summarize_results(batch))

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from phonecheck.core.config import settings
from phonecheck.schemas.results import ReportedBatch

logger = logging.getLogger(__name__)


class ValidatorClient:
    """검증 마이크로서비스 호출 클라이언트. 재시도 없이 한 번만 호출한다."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.validator_base_url).rstrip("/")
        self.timeout = settings.validator_timeout if timeout is None else timeout
        self.transport = transport

    @property
    def validate_url(self) -> str:
        return f"{self.base_url}/validate"

    def validate(self, numbers: list[str]) -> ReportedBatch | None:
        """실패 시 예외 대신 None 을 돌려준다 (화면은 결과 없음으로 표시)."""
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.validate_url, json={"numbers": numbers})
        except httpx.HTTPError as exc:  # 네트워크/타임아웃 오류
            logger.warning("검증 서비스 호출 실패 (%s): %s", self.validate_url, exc)
            return None

        if response.status_code >= 400:
            logger.warning("검증 서비스 HTTP 오류: %s", response.status_code)
            return None

        try:
            return ReportedBatch.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("검증 서비스 응답 파싱 실패: %s", exc)
            return None

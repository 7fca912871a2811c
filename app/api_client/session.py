from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0


class ApiError(Exception):
    """
    API 호출 실패.

    - status_code: HTTP 상태 코드 (네트워크 에러면 None)
    - message: 응답 envelope의 message (없으면 기본 문구)
    - payload: 파싱된 응답 바디 (있을 때만)
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload or {}


class MarketplaceApi:
    """
    /api/v1 에 대한 얇은 HTTP 래퍼.

    토큰이 있으면 모든 요청에 Authorization: Bearer 헤더를 붙이고,
    success=false 이거나 2xx가 아닌 응답은 ApiError로 올립니다.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (
            base_url or os.getenv("MARKETPLACE_API_URL", DEFAULT_BASE_URL)
        ).rstrip("/")
        self.timeout = timeout or float(
            os.getenv("MARKETPLACE_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
        )
        self.token = token
        self.session = session or requests.Session()

    def set_token(self, token: Optional[str]) -> None:
        self.token = token

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.strip('/')}/"

    def request(self, method: str, path: str, **kwargs: Any) -> dict:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = self._url(path)
        try:
            response = self.session.request(
                method, url, headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(f"Request to {path} failed") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if not response.ok or payload.get("success") is False:
            message = payload.get("message") or f"HTTP {response.status_code}"
            logger.warning(f"{method} {url} -> {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code, payload=payload)

        return payload

    def get(self, path: str, params: Optional[dict] = None) -> dict:
        return self.request("GET", path, params=params)

    def post(self, path: str, data: Optional[dict] = None) -> dict:
        return self.request("POST", path, json=data or {})

    def put(self, path: str, data: Optional[dict] = None) -> dict:
        return self.request("PUT", path, json=data or {})

    def delete(self, path: str) -> dict:
        return self.request("DELETE", path)

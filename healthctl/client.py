# healthctl/client.py
"""
HTTP-клиент к сервису зоны.

Идея:
- check() НЕ падает, если web недоступен: возвращает результат с ошибкой;
- enable()/disable() падают HealthClientError — деплой-скрипту важно знать, что не получилось;
- короткие таймауты, X-Request-ID для связки с логами сервера.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger("healthctl.client")


class HealthClientError(Exception):
    pass


@dataclass(frozen=True)
class HealthCheckResult:
    ok: bool
    status: Optional[int]
    error: Optional[str]
    duration_ms: int
    request_id: str


@dataclass(frozen=True)
class ToggleResult:
    changed: bool
    message: str


# Ответы сервера, при которых состояние реально поменялось
_CHANGED_MESSAGES = {"DISABLING the server", "ENABLING the server"}


class HealthClient:
    def __init__(
        self,
        base_url: str,
        timeout_s: float = 2.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._session = session or requests.Session()

    def check(self) -> HealthCheckResult:
        """HEAD /health: ok только при 2xx (503 = выключен из балансировки)."""
        request_id = str(uuid.uuid4())
        t0 = time.perf_counter()
        try:
            r = self._session.head(
                f"{self.base_url}/health",
                headers={"X-Request-ID": request_id},
                timeout=self.timeout_s,
            )
            dt = int((time.perf_counter() - t0) * 1000)
            ok = 200 <= r.status_code < 300
            return HealthCheckResult(ok=ok, status=r.status_code, error=None, duration_ms=dt, request_id=request_id)
        except requests.RequestException as e:
            dt = int((time.perf_counter() - t0) * 1000)
            logger.debug("health check failed: request_id=%s error=%s", request_id, e)
            return HealthCheckResult(ok=False, status=None, error=str(e), duration_ms=dt, request_id=request_id)

    def _toggle(self, action: str) -> ToggleResult:
        url = f"{self.base_url}/health/{action}"
        try:
            r = self._session.post(url, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise HealthClientError(f"POST {url} failed: {e}") from e

        if r.status_code != 200:
            raise HealthClientError(f"POST {url} returned HTTP {r.status_code}")

        message = r.text.strip()
        result = ToggleResult(changed=message in _CHANGED_MESSAGES, message=message)
        logger.info("health %s: %s", action, message)
        return result

    def disable(self) -> ToggleResult:
        return self._toggle("disable")

    def enable(self) -> ToggleResult:
        return self._toggle("enable")

    def banner(self) -> str:
        url = f"{self.base_url}/js/deployment-bar.js"
        try:
            r = self._session.get(url, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise HealthClientError(f"GET {url} failed: {e}") from e
        if r.status_code != 200:
            raise HealthClientError(f"GET {url} returned HTTP {r.status_code}")
        return r.text

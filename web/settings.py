"""
web/settings.py — конфигурация web-сервиса из окружения.

Всё берём из env (как и в остальном проекте), без отдельных конфиг-файлов.
Исключение — ZONE: её читаем заново на каждый запрос баннера (см. web/zone.py),
поэтому здесь она хранится только для стартового сравнения с файлом-маркером.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_CURRENT_ZONE_FILE = "/usr/local/lib/cs/current_zone"


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _env_optional(name: str) -> Optional[str]:
    value = _env(name)
    return value or None


@dataclass(frozen=True)
class Settings:
    zone: Optional[str]
    current_zone_file: str
    secret_key: Optional[str]
    app_version: Optional[str]
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            zone=_env_optional("ZONE"),
            current_zone_file=_env("CURRENT_ZONE_FILE", DEFAULT_CURRENT_ZONE_FILE),
            secret_key=_env_optional("SECRET_KEY"),
            app_version=_env_optional("APP_VERSION"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            host=_env("WEB_HOST", "0.0.0.0"),
            port=int(_env("WEB_PORT", "8000")),
        )

"""
Пакет healthctl — клиентская сторона сервиса зоны.

Для деплой-скриптов и ручной работы оператора:
- проверить /health (как это делает балансировщик);
- выключить/включить сервер через /health/disable и /health/enable.
"""

from __future__ import annotations

import os

# Базовый URL web-сервиса берём из окружения; завершающий '/' срезает HealthClient.
WEB_BASE_URL: str = os.getenv("WEB_BASE_URL", "http://web:8000")


__all__ = [
    "WEB_BASE_URL",
]

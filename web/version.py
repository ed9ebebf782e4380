"""Версия приложения для баннера."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Optional

DISTRIBUTION_NAME = "zone-health"


def implementation_version(override: Optional[str] = None) -> Optional[str]:
    """
    APP_VERSION из окружения, иначе версия установленного пакета.

    None — если запускаемся не из установленного пакета (например, прямо из репо).
    """
    if override:
        return override
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return None

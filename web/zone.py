"""
Зоны blue/green.

- get_zone() читает ZONE каждый раз заново (никакого кэша);
- other_zone() — куда переключаться;
- read_zone_file() — первая строка файла-маркера текущей зоны.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger("web.zone")

BLUE = "blue"
GREEN = "green"


def get_zone() -> Optional[str]:
    """Зона, в которую задеплоен этот процесс (blue или green), или None."""
    value = os.getenv("ZONE", "").strip()
    return value or None


def other_zone(zone: Optional[str]) -> str:
    # Всё, что не blue (включая "undefined"), переключаем на blue.
    return GREEN if zone == BLUE else BLUE


def read_zone_file(path: str) -> Optional[str]:
    """
    Возвращает первую строку файла без перевода строки.

    None — если файла нет, он не читается или пустой.
    Ошибки не пробрасываем: для вызывающего это значит "считаем себя текущей версией".
    """
    try:
        with open(path, encoding="utf-8") as f:
            line = f.readline()
    except OSError as e:
        logger.info("Current zone file %s not readable (%s); assuming newest version.", path, e)
        return None

    if not line:
        logger.info("Current zone file %s is empty; assuming newest version.", path)
        return None

    return line.rstrip("\r\n")

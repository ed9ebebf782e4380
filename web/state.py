"""
web/state.py — состояние процесса: флаг доступности для балансировщика.

Флаг один на процесс, живёт столько же, сколько процесс.
Меняется только через /health/enable и /health/disable, читается /health и баннером.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from web.settings import Settings
from web.zone import read_zone_file

logger = logging.getLogger("web.state")


class AtomicFlag:
    """
    Булев флаг с атомарным get_and_set.

    Все чтения и read-modify-write идут под одним lock,
    поэтому параллельные toggle не теряют обновлений.
    """

    def __init__(self, value: bool = True) -> None:
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> bool:
        with self._lock:
            return self._value

    def get_and_set(self, value: bool) -> bool:
        """Ставит новое значение и возвращает предыдущее."""
        with self._lock:
            previous = self._value
            self._value = value
            return previous


@dataclass
class ServerState:
    available: AtomicFlag = field(default_factory=AtomicFlag)
    started_at: datetime = field(default_factory=datetime.now)
    zone_file_zone: Optional[str] = None

    def is_available(self) -> bool:
        return self.available.get()

    def disable(self) -> bool:
        """True, если сервер был доступен (то есть реально выключили)."""
        return self.available.get_and_set(False)

    def enable(self) -> bool:
        """True, если сервер уже был доступен (то есть ничего не поменялось)."""
        return self.available.get_and_set(True)


def initialize(settings: Settings) -> ServerState:
    """
    Создаём состояние один раз при старте.

    Сравниваем свою зону с содержимым файла-маркера:
    - файла нет / не читается / пустой -> считаем себя новейшей версией;
    - содержимое отличается от нашей зоны -> стартуем "недоступными".
    """
    zone_from_file = read_zone_file(settings.current_zone_file)

    available = True
    if zone_from_file is not None and zone_from_file != settings.zone:
        available = False

    logger.info(
        "Server state initialized: zone=%s current_zone_file=%s zone_from_file=%s available=%s",
        settings.zone,
        settings.current_zone_file,
        zone_from_file,
        available,
    )
    return ServerState(available=AtomicFlag(available), zone_file_zone=zone_from_file)

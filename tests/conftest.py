from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest
from flask import Flask

from app import create_app
from web.settings import Settings


@pytest.fixture
def make_app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., Flask]:
    """
    Собирает приложение под тест.

    marker=None — файла-маркера нет вообще.
    """

    def _make(zone: Optional[str] = "blue", marker: Optional[str] = None, version: str = "1.2.3") -> Flask:
        if zone is None:
            monkeypatch.delenv("ZONE", raising=False)
        else:
            monkeypatch.setenv("ZONE", zone)

        marker_path = tmp_path / "current_zone"
        if marker is not None:
            marker_path.write_text(marker, encoding="utf-8")

        settings = Settings(
            zone=zone,
            current_zone_file=str(marker_path),
            secret_key="test-secret",
            app_version=version,
        )
        flask_app = create_app(settings)
        flask_app.testing = True
        return flask_app

    return _make

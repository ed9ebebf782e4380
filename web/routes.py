"""
HTTP-ручки сервиса зоны:

- GET  /js/deployment-bar.js — скрипт баннера;
- HEAD /health               — 200/503 для балансировщика (HAProxy);
- POST /health/disable       — начать отвечать 503;
- POST /health/enable        — снова отвечать 200.

Состояние не глобальное: блюпринт создаётся под конкретный ServerState.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from flask import Blueprint, Response, abort, request, session

from web.deployment_bar import render_deployment_bar
from web.state import ServerState
from web.zone import get_zone

logger = logging.getLogger("web.routes")

DEPLOYMENT_BAR_URL = "/js/deployment-bar.js"
HEALTH_URL = "/health"

GET_NOT_FOUND_TEXT = f"Only {DEPLOYMENT_BAR_URL} is served via GET here.\n"

NO_CACHE_HEADERS = {
    # Этого не всегда достаточно, поэтому зона обычно ещё и входит в URL
    "Cache-Control": "public, max-age=0, no-cache",
    "Expires": "Sat, 26 Jul 1997 00:00:00 GMT",
}


def _text(body: str, status: int = 200) -> Response:
    return Response(f"{body}\n", status=status, mimetype="text/plain")


def _get_not_found() -> Response:
    return Response(GET_NOT_FOUND_TEXT, status=404, mimetype="text/plain")


def create_blueprint(state: ServerState, version: Optional[str]) -> Blueprint:
    bp = Blueprint("zone_health", __name__)

    @bp.route(DEPLOYMENT_BAR_URL, methods=["GET"])
    def deployment_bar() -> Response:
        # Отметка в сессии — только чтобы проверять, что перезагрузка не ломает сессии
        if "session_start" not in session:
            session["session_start"] = datetime.now().isoformat()

        zone = get_zone()
        if zone is None:
            logger.warning("ZONE is not configured; serving deployment bar with a config alert.")

        body = render_deployment_bar(zone=zone, available=state.is_available(), version=version)
        return Response(body, status=200, mimetype="application/javascript", headers=NO_CACHE_HEADERS)

    @bp.route(HEALTH_URL, methods=["GET", "HEAD"])
    def health() -> Response:
        if request.method != "HEAD":
            return _get_not_found()
        status = 200 if state.is_available() else 503
        return Response(status=status)

    # GET (и автоматический HEAD) под /health/* ничего не меняют, только 404
    @bp.route(f"{HEALTH_URL}/<path:action>", methods=["GET"])
    def health_action_get(action: str) -> Response:
        return _get_not_found()

    @bp.route(f"{HEALTH_URL}/<path:action>", methods=["POST"])
    def health_action(action: str) -> Response:
        if action == "disable":
            was_enabled = state.disable()
            if was_enabled:
                logger.info("Health DISABLED: /health now answers 503.")
                return _text("DISABLING the server")
            logger.debug("Health disable requested, already disabled.")
            return _text("NoOp, already disabled")

        if action == "enable":
            was_enabled = state.enable()
            if was_enabled:
                logger.debug("Health enable requested, already enabled.")
                return _text("NoOp, already enabled")
            logger.info("Health ENABLED: /health now answers 200.")
            return _text("ENABLING the server")

        abort(405)

    return bp

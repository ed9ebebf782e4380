from __future__ import annotations

import logging
import os
from typing import Optional

from flask import Flask

from web.routes import create_blueprint
from web.settings import Settings
from web.state import initialize
from web.version import implementation_version

logger = logging.getLogger("web.app")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    flask_app = Flask(__name__)

    if settings.secret_key:
        flask_app.secret_key = settings.secret_key
    else:
        # без SECRET_KEY сессии не переживут рестарт процесса
        logger.warning("SECRET_KEY is not set; using a random per-process session key.")
        flask_app.secret_key = os.urandom(32)

    state = initialize(settings)
    version = implementation_version(settings.app_version)
    logger.info("Starting zone-health: zone=%s version=%s", settings.zone, version)

    flask_app.extensions["zone_health_state"] = state
    flask_app.register_blueprint(create_blueprint(state, version))
    return flask_app


app = create_app()


if __name__ == "__main__":
    s = Settings.from_env()
    # threaded: проверки HAProxy и переключения приходят параллельно
    app.run(host=s.host, port=s.port, threaded=True)

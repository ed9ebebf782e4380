import logging
import os
import time
from typing import Optional

from healthctl import WEB_BASE_URL
from healthctl.client import HealthClient

INTERVAL = float(os.getenv("PROBE_INTERVAL", "5"))  # секунды между проверками
TIMEOUT = float(os.getenv("PROBE_TIMEOUT", "2"))

logger = logging.getLogger("probe")


def run(client: HealthClient, interval_s: float = INTERVAL, max_iterations: Optional[int] = None) -> int:
    """Крутим HEAD /health как балансировщик. Возвращает число успешных проверок."""
    ok_count = 0
    i = 0
    while max_iterations is None or i < max_iterations:
        res = client.check()
        if res.ok:
            ok_count += 1
            logger.info("[probe] %s UP (%s ms)", res.status, res.duration_ms)
        elif res.status is not None:
            logger.info("[probe] %s DOWN (%s ms)", res.status, res.duration_ms)
        else:
            logger.warning("[probe] ERROR: %s", res.error)

        i += 1
        if max_iterations is None or i < max_iterations:
            time.sleep(interval_s)
    return ok_count


def main():
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper(), format="%(asctime)s %(message)s")
    client = HealthClient(WEB_BASE_URL, timeout_s=TIMEOUT)
    logger.info("[probe] Starting healthcheck loop for %s/health, interval=%ss", client.base_url, INTERVAL)
    run(client)


if __name__ == "__main__":
    main()

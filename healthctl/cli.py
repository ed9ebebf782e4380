"""
CLI оператора: python -m healthctl <status|enable|disable|banner>

Коды выхода:
- 0 — ок (для status: сервер доступен);
- 1 — ошибка запроса;
- 2 — status: сервер отвечает не 2xx (обычно 503 = выключен).
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from healthctl import WEB_BASE_URL
from healthctl.client import HealthClient, HealthClientError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="healthctl", description="Blue/green zone health control")
    parser.add_argument("--base-url", default=WEB_BASE_URL, help="web service base URL (env WEB_BASE_URL)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=float(os.getenv("PROBE_TIMEOUT", "2")),
        help="request timeout in seconds",
    )
    parser.add_argument("command", choices=["status", "enable", "disable", "banner"])
    return parser


def main(argv: Optional[Sequence[str]] = None, client: Optional[HealthClient] = None) -> int:
    args = build_parser().parse_args(argv)
    client = client or HealthClient(args.base_url, timeout_s=args.timeout)

    if args.command == "status":
        res = client.check()
        if res.error:
            print(f"ERROR: {res.error}", file=sys.stderr)
            return 1
        print(f"{res.status} {'available' if res.ok else 'unavailable'} ({res.duration_ms} ms)")
        return 0 if res.ok else 2

    try:
        if args.command == "banner":
            print(client.banner(), end="")
            return 0
        toggle = client.enable() if args.command == "enable" else client.disable()
    except HealthClientError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(toggle.message)
    return 0

from __future__ import annotations

from pathlib import Path

REQUIRED_KEYS = {
    "ZONE",
    "CURRENT_ZONE_FILE",
    "SECRET_KEY",
    "LOG_LEVEL",
    "WEB_PORT",
}

TEMPLATE_FILES = [
    Path(".envs/.env.blue.example"),
    Path(".envs/.env.green.example"),
]


def parse_env(text: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            values[key] = value.strip()
    return values


def check_template(path: Path) -> list[str]:
    if not path.exists():
        return [f"Template file not found: {path}"]

    errors: list[str] = []
    values = parse_env(path.read_text(encoding="utf-8"))
    missing = REQUIRED_KEYS - set(values)
    if missing:
        errors.append(f"{path}: missing keys: {', '.join(sorted(missing))}")

    zone = values.get("ZONE")
    if zone is not None and zone not in ("blue", "green"):
        errors.append(f"{path}: ZONE must be blue or green, got {zone!r}")
    return errors


def main() -> None:
    errors: list[str] = []
    for p in TEMPLATE_FILES:
        errors.extend(check_template(p))

    if errors:
        raise SystemExit("ENV template check failed:\n" + "\n".join(errors))

    print("ENV template check passed.")


if __name__ == "__main__":
    main()

"""
Генерация deployment-bar.js: баннер сверху страницы с текущей зоной/версией
и ссылкой "переключиться" через cookie X-Force-Zone.

Всё собирается строками на каждый запрос (ничего не кэшируем):
available/zone/version могут отличаться между вызовами.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from web.zone import other_zone

UNDEFINED_ZONE = "undefined"

CONFIG_ERROR_ALERT = (
    "alert('Application configuration ERROR: env (blue/green) not specified "
    "via the setting \\'ZONE\\' as expected');"
)

FORCE_ZONE_COOKIE = "X-Force-Zone"


@dataclass(frozen=True)
class BarStyle:
    message: str
    other_version_label: str
    bgr_color: str


def bar_style(available: bool, version: Optional[str]) -> BarStyle:
    # version=None рендерится как "None" — так и задумано вне собранного пакета
    if available:
        return BarStyle(
            message=f"You are running the newest version {version}",
            other_version_label="previous",
            bgr_color="darksalmon",
        )
    return BarStyle(
        message=f"You are running an old version ({version}), consider switching",
        other_version_label="newest",
        bgr_color="darkred",
    )


def switch_zone_url(zone: str) -> str:
    # Path=/ обязателен, иначе на разных страницах появятся разные cookie
    return (
        f'javascript:document.cookie="{FORCE_ZONE_COOKIE}={other_zone(zone)}; Path=/";'
        "document.location.reload(true);false"
    )


def bar_html(zone: str, style: BarStyle) -> str:
    # zone идёт в CSS как есть, без санитизации
    return (
        f"<div id='deploymentBar' style='background-color:{style.bgr_color};"
        "position:absolute;top:0px;left:0px;width:100%;'>"
        f"{style.message}"
        f"<span style='float:right'>[<a href='{switch_zone_url(zone)}'>"
        f"Switch to the {style.other_version_label} version</a>]"
        f" <span style='color:{zone}'>&#x25CF;</span></span>"
        "</div>"
    )


def _js_single_quoted(text: str) -> str:
    return text.replace("'", "\\'")


def bar_creation_js(html: str) -> str:
    """Скрипт: на window.onload вставляем баннер первым ребёнком body и зовём старый onload."""
    return (
        "var onloadOld=window.onload;window.onload=(function(){\n"
        "var body=document.getElementsByTagName('body')[0];\n"
        "var elm=document.createElement('div');\n"
        f"elm.innerHTML='{_js_single_quoted(html)}';\n"
        "var jsDiv=elm.firstChild;\n"
        "body.insertBefore(jsDiv, body.firstChild);\n"
        "if (onloadOld) onloadOld();\n"
        "});"
    )


def render_deployment_bar(zone: Optional[str], available: bool, version: Optional[str]) -> str:
    """
    Полное тело ответа /js/deployment-bar.js.

    Если зона не задана — первой строкой идёт alert() с ошибкой конфигурации,
    а в баннере показываем "undefined".
    """
    lines: list[str] = []
    if zone is None:
        lines.append(CONFIG_ERROR_ALERT)
        zone = UNDEFINED_ZONE

    html = bar_html(zone, bar_style(available, version))
    lines.append(bar_creation_js(html))
    return "".join(f"{line}\n" for line in lines)

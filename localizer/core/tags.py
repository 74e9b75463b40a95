from __future__ import annotations

import locale as _platform_locale
import logging

log = logging.getLogger(__name__)

BASE_LOCALE = "en"


def normalize(tag: str) -> str:
    """Return the canonical key for a locale tag.

    ``"en_US.UTF-8"``, ``"EN-us"`` and ``"en-US"`` all map to ``"en-us"``.
    """
    s = (tag or "").strip()
    # POSIX style: language_TERRITORY.codeset@modifier
    s = s.split(".", 1)[0].split("@", 1)[0]
    s = s.replace("_", "-").lower()
    if not s:
        raise ValueError("Locale tag must not be empty")
    return s


def language_of(tag: str) -> str:
    return normalize(tag).split("-", 1)[0]


def platform_default() -> str:
    """Best effort lookup of the process locale, ``en`` when unknown."""
    try:
        code = _platform_locale.getlocale()[0]
    except ValueError as e:
        log.debug("Unparseable platform locale: %s", e)
        code = None
    if not code or code in {"C", "POSIX"}:
        return BASE_LOCALE
    return normalize(code)

from __future__ import annotations

import locale
import logging
import os
from functools import lru_cache
from importlib import resources
from typing import Any

import yaml

from whatpicturepath.constants import DEFAULT_CULTURE, SUPPORTED_CULTURES

LOGGER = logging.getLogger(__name__)

# gettext order: LANGUAGE (a colon separated list) wins over the LC_* variables
_LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def _system_locale_name() -> str:
    for name in _LOCALE_ENV_VARS:
        value = os.environ.get(name, "").split(":", 1)[0].strip()
        if value and value not in {"C", "POSIX"}:
            return value
    try:
        system_name, _ = locale.getlocale()
    except ValueError:
        system_name = None
    return system_name or ""


def resolve_culture(requested: str | None = None) -> str:
    """Map a requested language (or ``auto``) onto a shipped catalog.

    Anything Chinese resolves to ``zh-CN``; everything else to ``en-US``.
    """
    name = (requested or "auto").strip()
    if name.lower() == "auto":
        name = _system_locale_name()
    lowered = name.lower()
    if lowered.startswith("zh") or lowered.startswith("chinese"):
        culture = "zh-CN"
    else:
        culture = DEFAULT_CULTURE
    LOGGER.debug("culture requested=%r resolved=%s", requested, culture)
    return culture


@lru_cache(maxsize=None)
def load_catalog(culture: str) -> dict[str, str]:
    if culture not in SUPPORTED_CULTURES:
        raise ValueError(f"unsupported culture: {culture!r}")
    resource = resources.files("whatpicturepath.locales") / f"{culture}.yaml"
    data = yaml.safe_load(resource.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"message catalog is not a dict: {culture}")
    return {str(key): str(value) for key, value in data.items()}


class Messages:
    """Culture-bound message lookup with ``str.format`` placeholders."""

    def __init__(self, culture: str = DEFAULT_CULTURE) -> None:
        if culture not in SUPPORTED_CULTURES:
            LOGGER.warning("unknown culture %r, falling back to %s", culture, DEFAULT_CULTURE)
            culture = DEFAULT_CULTURE
        self.culture = culture
        self._catalog = load_catalog(culture)
        self._fallback = load_catalog(DEFAULT_CULTURE)

    def get(self, key: str, *args: Any) -> str:
        template = self._catalog.get(key)
        if template is None:
            template = self._fallback.get(key)
        if template is None:
            LOGGER.debug("missing message key %r for %s", key, self.culture)
            return key
        if not args:
            return template
        return template.format(*args)

    __call__ = get

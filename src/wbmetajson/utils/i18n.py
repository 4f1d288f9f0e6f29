from __future__ import annotations

"""
Internationalization (i18n) Utility.

Message catalog for the command line interface. Keys use dot-notation over
nested JSON locale files; values may contain str.format placeholders.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES = ("en", "es")
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


class I18n:
    """Loads a locale file and resolves message keys against it."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Load a locale file, leaving the catalog empty if it is missing or invalid.

        Args:
            locale: ISO identifier of the language ('en', 'es').
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: locale file missing at '{file_path}'.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"I18n: invalid locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False
            return

        self._locale = locale
        self.is_loaded = True

    def t(self, key: str, default: str = "", **kwargs: Any) -> str:
        """
        Resolve and format a message.

        Args:
            key: Dot-notation key (e.g. 'cli.status.success').
            default: Text used when the key is missing (the key itself if empty).
            **kwargs: Placeholder values.

        Returns:
            str: The formatted message.
        """
        current: Any = self._translations
        for part in key.split("."):
            current = current.get(part) if isinstance(current, dict) else None

        template = current if isinstance(current, str) else (default or key)
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            logger.debug(f"I18n: cannot format '{key}' with {sorted(kwargs)}")
            return template


i18n = I18n(DEFAULT_LOCALE)

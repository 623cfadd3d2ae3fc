"""Localized text lookup.

Each bundled locale lives in its own module exposing a ``TEXTS`` dict. Keys
in ``MANDATORY_KEYS`` label navigation and menus; a locale missing any of
them cannot be used. Other keys fall back to English and then to the key
itself.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from lunitool.exceptions import MissingTextError

from . import de, en

FALLBACK_LOCALE = "en"

BUNDLED_LOCALES: Dict[str, Mapping[str, str]] = {
    "de": de.TEXTS,
    "en": en.TEXTS,
}

MANDATORY_KEYS = (
    "LANG_LANGUAGE_SELECT",
    "LANG_KEYBOARD_SELECT",
    "LANG_MAIN_MENU",
    "LANG_INSTALL",
    "LANG_BACKUP",
    "LANG_KEYS",
    "LANG_QUIT",
    "LANG_EXIT_CONFIRM",
    "LANG_YES",
    "LANG_NO",
    "LANG_SELECT",
    "LANG_BACK",
)


class TextProvider:
    def __init__(
        self,
        tables: Optional[Mapping[str, Mapping[str, str]]] = None,
        *,
        mandatory_keys: Iterable[str] = MANDATORY_KEYS,
    ) -> None:
        self._tables = dict(tables if tables is not None else BUNDLED_LOCALES)
        self._mandatory = tuple(mandatory_keys)

    @property
    def locales(self) -> list[str]:
        return sorted(self._tables)

    def validate(self, locale: str) -> None:
        """Raise :class:`MissingTextError` if ``locale`` lacks mandatory keys."""
        table = self._tables.get(locale, {})
        missing = [key for key in self._mandatory if not table.get(key)]
        if missing:
            raise MissingTextError(locale, missing)

    def lookup(self, key: str, locale: str) -> str:
        table = self._tables.get(locale, {})
        if key in table:
            return table[key]
        fallback = self._tables.get(FALLBACK_LOCALE, {})
        return fallback.get(key, key)


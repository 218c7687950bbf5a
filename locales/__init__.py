"""
i18n module - dict-based translation with fallback to French.
French is the language of the back office; English is kept for API consumers.
"""

from locales.en import EN_STRINGS
from locales.fr import FR_STRINGS

DEFAULT_LANG = "fr"

_STRINGS = {"fr": FR_STRINGS, "en": EN_STRINGS}


def t(key: str, lang: str = DEFAULT_LANG, **kwargs) -> str:
    """Get translated string. Falls back to FR if key missing."""
    strings = _STRINGS.get(lang, _STRINGS[DEFAULT_LANG])
    text = strings.get(key, _STRINGS[DEFAULT_LANG].get(key, key))
    return text.format(**kwargs) if kwargs else text


def month_label(year: int, month: int, lang: str = DEFAULT_LANG) -> str:
    """Short month label with year, e.g. 'févr. 2026'."""
    return f"{t(f'month_{month}', lang)} {year}"


def add_language(code: str, strings: dict):
    """Register a new language at runtime."""
    _STRINGS[code] = strings

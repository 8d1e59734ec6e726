"""Translation service for internationalization support."""

from __future__ import annotations
from tracking import t

from typing import Any, List, Optional

from .languages import DEFAULT_LANGUAGE, Language
from .strings import MONTH_NAMES, STRINGS, WEEKDAY_NAMES


class Translator:
    """Resolves message keys for one language, falling back to the default."""

    def __init__(self, language: str | Language = DEFAULT_LANGUAGE):
        t('clientapp.i18n.translator.Translator.__init__')
        self.language = _language_code(language)

    def t(self, key: str, **params: Any) -> str:
        """Translate a key with optional ``str.format`` substitution.

        Example:
            >>> Translator('en').t('submit.invalid_time')
            'Invalid time format'
        """
        t('clientapp.i18n.translator.Translator.t')
        default_code = DEFAULT_LANGUAGE.value
        lang_strings = STRINGS.get(self.language, STRINGS[default_code])
        translated = lang_strings.get(key)

        if translated is None:
            translated = STRINGS[default_code].get(key, f"[{key}]")

        if params:
            try:
                translated = translated.format(**params)
            except KeyError:
                pass

        return translated

    def weekday_names(self) -> List[str]:
        t('clientapp.i18n.translator.Translator.weekday_names')
        return WEEKDAY_NAMES.get(self.language, WEEKDAY_NAMES[DEFAULT_LANGUAGE.value])

    def month_names(self) -> List[str]:
        t('clientapp.i18n.translator.Translator.month_names')
        return MONTH_NAMES.get(self.language, MONTH_NAMES[DEFAULT_LANGUAGE.value])


def _language_code(language: str | Language) -> str:
    if isinstance(language, Language):
        return language.value
    return str(language)


def create_translator(language: Optional[str | Language] = None) -> Translator:
    """Factory returning a translator for ``language`` (default language if None)."""
    t('clientapp.i18n.translator.create_translator')
    if language is None:
        language = DEFAULT_LANGUAGE
    return Translator(language)


_default_translator = Translator(DEFAULT_LANGUAGE)


def translate(key: str, language: Optional[str | Language] = None, **params: Any) -> str:
    """Convenience function to translate a single key."""
    t('clientapp.i18n.translator.translate')
    if language is None:
        return _default_translator.t(key, **params)
    return Translator(language).t(key, **params)

"""Internationalization (i18n) for user-facing booking messages.

Indonesian is the default language, English is available as a fallback.

Usage:
    from clientapp.i18n import translate, Translator

    text = translate('submit.invalid_time', language='en')
    translator = Translator('id')
    text = translator.t('status.enter_id')
"""

from .languages import DEFAULT_LANGUAGE, LANGUAGE_NAMES, Language
from .translator import Translator, create_translator, translate

__all__ = [
    'Language',
    'DEFAULT_LANGUAGE',
    'LANGUAGE_NAMES',
    'Translator',
    'create_translator',
    'translate',
]

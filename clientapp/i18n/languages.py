"""Language constants and enums for internationalization."""

from enum import Enum


class Language(str, Enum):
    """Supported languages."""
    INDONESIAN = "id"
    ENGLISH = "en"


# Default language for new sessions
DEFAULT_LANGUAGE = Language.INDONESIAN

LANGUAGE_NAMES = {
    Language.INDONESIAN: "Bahasa Indonesia",
    Language.ENGLISH: "English",
}

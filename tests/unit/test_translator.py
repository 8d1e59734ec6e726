from clientapp.i18n import Language, Translator, create_translator, translate


def test_default_language_is_indonesian():
    assert create_translator().language == "id"
    assert translate("submit.invalid_time") == "Format waktu tidak valid"


def test_english_translation():
    assert Translator(Language.ENGLISH).t("status.fetch_failed") == "Failed to fetch booking status"


def test_unknown_language_and_key_fall_back():
    translator = Translator("fr")

    assert translator.t("submit.invalid_time") == "Format waktu tidak valid"
    assert translator.t("missing.key") == "[missing.key]"
    assert translator.weekday_names()[0] == "Senin"

from pathlib import Path

from infrastructure.settings import load_settings


def test_load_settings_defaults():
    settings = load_settings({})

    assert settings.api_base_url == "http://localhost:3000/api"
    assert settings.api_timeout_seconds == 15.0
    assert settings.timezone == "Asia/Jakarta"
    assert settings.language == "id"
    assert settings.production_mode is False
    assert settings.last_booking_path == Path("data") / "last_booking.json"
    assert settings.telegram_bot_token is None


def test_load_settings_reads_environment_overrides(tmp_path):
    settings = load_settings(
        {
            "API_BASE_URL": "https://api.example.com/",
            "API_TIMEOUT_SECONDS": "not-a-number",
            "BOOKING_TIMEZONE": "Asia/Makassar",
            "LANGUAGE_CODE": "en",
            "PRODUCTION_MODE": "yes",
            "DATA_DIRECTORY": str(tmp_path),
            "SESSION_FILE": "auth.json",
            "LAST_BOOKING_FILE": str(tmp_path / "abs.json"),
            "TELEGRAM_CHAT_ID": "12345",
        }
    )

    assert settings.api_base_url == "https://api.example.com"
    assert settings.api_timeout_seconds == 15.0
    assert settings.timezone == "Asia/Makassar"
    assert settings.production_mode is True
    assert settings.session_path == tmp_path / "auth.json"
    assert settings.last_booking_path == tmp_path / "abs.json"
    assert settings.telegram_chat_id == "12345"

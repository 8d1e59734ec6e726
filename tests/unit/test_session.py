import pytest

from users.session import SessionStore


def test_get_current_user_without_session_file(tmp_path):
    store = SessionStore(str(tmp_path / "session.json"))

    assert store.get_current_user() is None
    assert store.get_token() is None


def test_save_and_read_session(tmp_path):
    store = SessionStore(str(tmp_path / "session.json"))
    store.save({"id": "17", "name": "Budi", "email": "budi@example.com"}, token="tok")

    user = SessionStore(str(tmp_path / "session.json")).get_current_user()

    assert user.id == "17"
    assert user.name == "Budi"
    assert user.token == "tok"
    assert store.get_token() == "tok"


def test_save_requires_user_id(tmp_path):
    store = SessionStore(str(tmp_path / "session.json"))

    with pytest.raises(ValueError):
        store.save({"name": "No Id"})


def test_corrupt_or_cleared_session_means_signed_out(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{broken", encoding="utf-8")
    store = SessionStore(str(path))

    assert store.get_current_user() is None

    store.save({"id": 3})
    store.clear()

    assert store.get_current_user() is None
    assert not path.exists()

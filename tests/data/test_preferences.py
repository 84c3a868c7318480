"""Tests for the SQLite preferences store."""

import pytest

from src.data.preferences import PreferenceStore
from src.models.preferences import Theme, UserPreferences


@pytest.fixture
def store(tmp_path):
    return PreferenceStore(str(tmp_path / "nested" / "prefs.db"))


class TestPreferenceStore:
    def test_defaults_when_empty(self, store):
        assert store.load() == UserPreferences()

    def test_save_and_reload(self, store, tmp_path):
        prefs = UserPreferences(locale="en", theme=Theme.DARK, default_currency="USD", display_name="Alex")
        store.save(prefs)
        reopened = PreferenceStore(store.db_path)
        assert reopened.load() == prefs

    def test_update_partial(self, store):
        prefs = store.update(theme="DARK")
        assert prefs.theme is Theme.DARK
        assert prefs.locale == "ru"
        assert store.load().theme is Theme.DARK

    def test_avatar_round_trip(self, store):
        store.update(avatar_url="https://cdn.example/a.png")
        assert store.load().avatar_url == "https://cdn.example/a.png"
        store.update(avatar_url=None)
        assert store.load().avatar_url is None

    def test_unknown_field(self, store):
        with pytest.raises(ValueError, match="Unknown preference"):
            store.update(font_size=14)

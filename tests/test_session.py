"""Unit tests for client session state."""

import json

from culinarycompanion.client.session import (
    PREFERENCES_KEY,
    RECENT_SEARCHES_KEY,
    Preferences,
    RecentSearches,
    SessionStore,
)


class TestRecentSearches:
    """Tests for RecentSearches."""

    def test_save_moves_duplicates_to_front(self) -> None:
        recent = RecentSearches(SessionStore())
        recent.save("chicken, rice")
        recent.save("tofu")
        recent.save("Chicken, Rice")
        assert recent.items == ["Chicken, Rice", "tofu"]

    def test_capped_at_ten_and_persisted(self) -> None:
        store = SessionStore()
        recent = RecentSearches(store)
        for i in range(12):
            recent.save(f"search {i}")
        assert len(recent.items) == 10
        assert recent.items[0] == "search 11"
        assert json.loads(store.get(RECENT_SEARCHES_KEY)) == recent.items

    def test_blank_searches_ignored(self) -> None:
        store = SessionStore()
        recent = RecentSearches(store)
        recent.save("   ")
        assert recent.items == []
        assert store.get(RECENT_SEARCHES_KEY) is None

    def test_loads_at_start(self) -> None:
        store = SessionStore()
        RecentSearches(store).save("pasta")
        assert RecentSearches(store).items == ["pasta"]

    def test_corrupt_cache_is_ignored(self) -> None:
        store = SessionStore()
        store.set(RECENT_SEARCHES_KEY, "{not json")
        assert RecentSearches(store).items == []

    def test_suggestions(self) -> None:
        recent = RecentSearches(SessionStore())
        for s in ("beef stew", "beef", "tofu", "Beef tacos"):
            recent.save(s)
        assert recent.suggestions("beef") == ["Beef tacos", "beef stew"]
        assert recent.suggestions("") == ["Beef tacos", "tofu", "beef", "beef stew"]


class TestPreferences:
    """Tests for Preferences."""

    def test_absent(self) -> None:
        assert Preferences.load(SessionStore()) is None

    def test_save_and_load(self) -> None:
        store = SessionStore()
        Preferences(input_language="fr", output_language="es", preferred_mode="text").save(store)
        loaded = Preferences.load(store)
        assert loaded == Preferences(input_language="fr", output_language="es", preferred_mode="text")

    def test_invalid_cache_is_ignored(self) -> None:
        store = SessionStore()
        store.set(PREFERENCES_KEY, '{"preferred_mode": "smoke signals"}')
        assert Preferences.load(store) is None

"""
Tests for user preferences and recent searches.
"""

from domain.entities import UserPreferences
from stores import PreferencesStore, RecentSearchesStore, StorageKeys


class TestPreferencesStore:
    """Test cases for PreferencesStore."""

    def test_defaults(self, preferences_store):
        assert preferences_store.get() == UserPreferences()

    def test_save_and_get(self, preferences_store):
        prefs = UserPreferences(diet="vegetarian", cuisine="italian", max_time="30")

        assert preferences_store.save(prefs)
        assert preferences_store.get() == prefs

    def test_update_single_field(self, preferences_store):
        preferences_store.save(UserPreferences(diet="vegan"))

        assert preferences_store.update("maxTime", 45)

        prefs = preferences_store.get()
        assert prefs.diet == "vegan"
        assert prefs.max_time == "45"

    def test_update_allergies_from_string(self, preferences_store):
        assert preferences_store.update("allergies", "peanuts, shellfish,,")
        assert preferences_store.get().allergies == ["peanuts", "shellfish"]

    def test_update_unknown_key(self, preferences_store, storage):
        assert not preferences_store.update("color", "blue")
        assert StorageKeys.USER_PREFERENCES not in storage

    def test_storage_failure(self, failing_storage):
        store = PreferencesStore(failing_storage)

        assert store.get() == UserPreferences()
        assert store.save(UserPreferences(diet="keto")) is False

    def test_failed_read_keeps_preferences(self, flaky_storage):
        store = PreferencesStore(flaky_storage)
        store.save(UserPreferences(diet="vegan", cuisine="thai"))

        flaky_storage.fail_reads = 1
        assert store.update("maxTime", "20") is False

        assert store.get() == UserPreferences(diet="vegan", cuisine="thai")


class TestRecentSearchesStore:
    """Test cases for RecentSearchesStore."""

    def test_most_recent_first(self, recent_searches_store):
        for query in ("pasta", "soup", "salad"):
            recent_searches_store.add(query)

        assert recent_searches_store.list() == ["salad", "soup", "pasta"]

    def test_repeat_moves_to_front(self, recent_searches_store):
        for query in ("pasta", "soup", "pasta"):
            recent_searches_store.add(query)

        assert recent_searches_store.list() == ["pasta", "soup"]

    def test_capped_at_limit(self, recent_searches_store):
        for i in range(15):
            recent_searches_store.add(f"query {i}")

        searches = recent_searches_store.list()
        assert len(searches) == 10
        assert searches[0] == "query 14"
        assert searches[-1] == "query 5"

    def test_blank_queries_ignored(self, recent_searches_store):
        assert not recent_searches_store.add("")
        assert not recent_searches_store.add("   ")
        assert recent_searches_store.list() == []

    def test_custom_limit(self, storage):
        store = RecentSearchesStore(storage, limit=2)
        for query in ("a", "b", "c"):
            store.add(query)

        assert store.list() == ["c", "b"]

    def test_clear(self, recent_searches_store):
        recent_searches_store.add("pasta")

        assert recent_searches_store.clear()
        assert recent_searches_store.list() == []

    def test_failed_read_keeps_log(self, flaky_storage):
        store = RecentSearchesStore(flaky_storage)
        store.add("soup")
        store.add("salad")

        flaky_storage.fail_reads = 1
        assert store.add("curry") is False

        assert store.list() == ["salad", "soup"]

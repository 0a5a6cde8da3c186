"""Unit tests for configuration and service wiring."""

from culinarycompanion.features.recipes.infra import entities
from culinarycompanion.features.recipes.infra.entities import NullEntitySearch, QlooEntitySearch, build_entity_search
from culinarycompanion.shared.config.settings import Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("QLOO_API_KEY", "MONGO_URI", "MONGO_DB", "HISTORY_LIMIT", "PROBE_RESULT_LIMIT"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.HISTORY_LIMIT == 10
        assert s.PROBE_RESULT_LIMIT == 5
        assert s.QLOO_API_KEY == ""
        assert s.QLOO_BASE_URL == "https://api.qloo.com/v1"
        assert s.DEFAULT_LANGUAGE == "en"

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
        monkeypatch.setenv("mongo_db", "recipes")
        monkeypatch.setenv("PROBE_TIMEOUT", "2.5")
        s = Settings(_env_file=None)
        assert s.MONGODB_URI == "mongodb://db:27017"
        assert s.MONGODB_DB == "recipes"
        assert s.PROBE_TIMEOUT == 2.5


class TestBuildEntitySearch:
    """The entity search is only live when an API key is configured."""

    def test_without_key(self, monkeypatch) -> None:
        monkeypatch.setattr(entities.settings, "QLOO_API_KEY", "")
        assert isinstance(build_entity_search(), NullEntitySearch)

    def test_with_key(self, monkeypatch) -> None:
        monkeypatch.setattr(entities.settings, "QLOO_API_KEY", "k")
        monkeypatch.setattr(entities.settings, "PROBE_RESULT_LIMIT", 3)
        search = build_entity_search()
        assert isinstance(search, QlooEntitySearch)
        assert search.limit == 3

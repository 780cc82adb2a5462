"""Unit tests for application settings."""

from quotes.config import APISettings, Settings


class TestAPISettings:
    """Tests for the computed CORS settings."""

    def test_wildcard_origin_disables_credentials(self):
        api = APISettings(cors_origin="*")

        assert api.cors_origins == ["*"]
        assert api.cors_allow_credentials is False

    def test_explicit_origin_allows_credentials(self):
        api = APISettings(cors_origin="https://quotes.example.com")

        assert api.cors_origins == ["https://quotes.example.com"]
        assert api.cors_allow_credentials is True


class TestSettings:
    """Tests for environment loading."""

    def test_nested_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/q")
        monkeypatch.setenv("API__BACKEND_MARKER", "python-test")
        monkeypatch.setenv("RANKING__WEEKLY_WINDOW_DAYS", "14")

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/q"
        assert settings.api.backend_marker == "python-test"
        assert settings.ranking.weekly_window_days == 14

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE__URL", "API__BACKEND_MARKER", "PAGINATION__MAX_PAGE_SIZE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.pagination.default_page_size == 10
        assert settings.pagination.max_page_size == 100
        assert settings.api.backend_marker == "python"
        assert settings.api.root_path == "/api"

"""
Tests for settings and Supabase client creation.
"""

import pytest

from recipe_studio import config
from recipe_studio.errors import ConfigurationError


class TestSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.delenv("NOTIFY_FUNCTION_NAME", raising=False)

        settings = config.get_settings()

        assert settings.supabase_url == "https://example.supabase.co"
        assert settings.supabase_key == "anon"
        assert settings.notify_function == config.DEFAULT_NOTIFY_FUNCTION

    def test_edge_function_names(self, monkeypatch):
        monkeypatch.delenv("PROCESS_FUNCTION_NAME", raising=False)
        monkeypatch.setenv("ADMIN_REPORT_FUNCTION_NAME", "admin-report-v2")
        settings = config.get_settings()
        assert settings.process_function == "process-recipe"
        assert settings.report_function == "admin-report-v2"

    def test_service_role_key_preferred(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        assert config.get_settings().supabase_key == "service"


class TestSupabaseClient:
    def test_missing_credentials(self):
        settings = config.Settings(supabase_url=None, supabase_key=None)
        with pytest.raises(ConfigurationError):
            config.get_supabase_client(settings)

    def test_creates_client(self, monkeypatch):
        calls = []
        monkeypatch.setattr(config, "create_client", lambda url, key: calls.append((url, key)) or "client")
        settings = config.Settings(supabase_url="https://example.supabase.co", supabase_key="k")

        assert config.get_supabase_client(settings) == "client"
        assert calls == [("https://example.supabase.co", "k")]

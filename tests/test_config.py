from api_blueprint.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("API_BLUEPRINT_SCHEME", "API_BLUEPRINT_HOST", "API_BLUEPRINT_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.scheme == "http"
        assert settings.host == "localhost"
        assert settings.log_level == "WARNING"

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("API_BLUEPRINT_SCHEME", "https")
        monkeypatch.setenv("API_BLUEPRINT_HOST", "api.example.com")
        settings = Settings()
        assert settings.scheme == "https"
        assert settings.host == "api.example.com"

    def test_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("API_BLUEPRINT_HOST", raising=False)
        (tmp_path / ".env").write_text("API_BLUEPRINT_HOST=docs.internal:8080\n", encoding="utf-8")
        assert Settings().host == "docs.internal:8080"

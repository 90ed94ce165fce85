"""Tests for startup configuration."""

import pytest
from pydantic import ValidationError

from app import config, main
from app.config import Settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.setattr(config, "POSSIBLE_ENV_PATHS", [])
    monkeypatch.chdir(tmp_path)


class TestSettings:

    def test_defaults(self):
        settings = Settings(DATABASE_URL="sqlite://", SECRET_KEY="k")
        assert settings.ALGORITHM == "HS256"
        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60

    def test_secret_key_is_required(self, clean_env, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        with pytest.raises(ValidationError):
            config.load_settings()

    def test_database_url_is_required(self, clean_env, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "k")
        with pytest.raises(ValidationError):
            config.load_settings()

    def test_empty_secret_is_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(DATABASE_URL="sqlite://", SECRET_KEY="")

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.setenv("SECRET_KEY", "from-env")
        settings = config.load_settings()
        assert settings.SECRET_KEY == "from-env"

    def test_reads_env_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("DATABASE_URL=sqlite://\nSECRET_KEY=from-file\n")
        assert config.load_settings().SECRET_KEY == "from-file"


def test_run_exits_on_missing_config(clean_env):
    with pytest.raises(SystemExit) as exc_info:
        main.run()
    assert exc_info.value.code == 1


def test_token_ttl_follows_settings():
    settings = Settings(DATABASE_URL="sqlite://", SECRET_KEY="k", ACCESS_TOKEN_EXPIRE_MINUTES=5)
    app = main.create_app(settings)
    assert app.state.token_service.ttl.total_seconds() == 300

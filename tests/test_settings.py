"""
Tests for configuration loading and logging setup
"""

import sys
import logging
from pathlib import Path
import pytest
from pydantic import ValidationError as PydanticValidationError

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from config.exceptions import ConfigurationError
from config.logging_config import setup_logging
from config.settings import Settings, load_settings, API_BASE_URL, REQUEST_TIMEOUT


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("PROJECT_ID", "proj_123")
    monkeypatch.setenv("PAT", "pat_secret")


def test_load_settings_reads_environment(credentials):
    settings = load_settings(env_file=None)

    assert settings.project_id == "proj_123"
    assert settings.pat == "pat_secret"
    assert settings.base_url == API_BASE_URL
    assert settings.timeout == REQUEST_TIMEOUT == 30


def test_missing_project_id_fails(monkeypatch):
    monkeypatch.delenv("PROJECT_ID", raising=False)
    monkeypatch.setenv("PAT", "pat_secret")

    with pytest.raises(ConfigurationError, match="PROJECT_ID"):
        load_settings(env_file=None)


def test_missing_both_credentials_names_both(monkeypatch):
    monkeypatch.delenv("PROJECT_ID", raising=False)
    monkeypatch.delenv("PAT", raising=False)

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(env_file=None)

    assert "PROJECT_ID" in str(exc_info.value)
    assert "PAT" in str(exc_info.value)


def test_blank_token_counts_as_missing(monkeypatch):
    monkeypatch.setenv("PROJECT_ID", "proj_123")
    monkeypatch.setenv("PAT", "   ")

    with pytest.raises(ConfigurationError, match="PAT"):
        load_settings(env_file=None)


def test_base_url_is_not_overridable(credentials, monkeypatch):
    monkeypatch.setenv("BASE_URL", "http://localhost:9999")
    monkeypatch.setenv("API_BASE_URL", "http://localhost:9999")

    settings = load_settings(env_file=None)

    assert settings.base_url == "https://api.jamaibase.com/v1"


def test_env_file_is_read(monkeypatch, tmp_path):
    monkeypatch.delenv("PROJECT_ID", raising=False)
    monkeypatch.delenv("PAT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PROJECT_ID=from_file\nPAT=file_token\n")

    settings = load_settings(env_file=str(env_file))

    assert settings.project_id == "from_file"
    assert settings.pat == "file_token"


def test_settings_are_immutable(credentials):
    settings = load_settings(env_file=None)

    with pytest.raises(PydanticValidationError):
        settings.project_id = "other"


def test_log_level_default(credentials, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"


def test_logging_setup_creates_log_dir(tmp_path):
    log_dir = tmp_path / "logs"

    log_file = setup_logging("DEBUG", log_dir)

    assert log_dir.is_dir()
    assert log_file == log_dir / "application.log"
    assert logging.getLogger("requests").level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_env_example_lists_every_setting():
    example = Path(__file__).parent.parent / ".env.example"
    names = {
        line.split("=", 1)[0].strip()
        for line in example.read_text().splitlines()
        if "=" in line
    }

    assert names == {field.upper() for field in Settings.model_fields}

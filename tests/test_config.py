"""Tests for config loading and token resolution."""

from pathlib import Path

import pytest

from prstats.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("GITHUB_TOKEN", "GITHUB_TOKEN_FILE", "GITHUB_API_URL", "GITHUB_TIMEOUT", "LOGGING_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.yaml")

    assert isinstance(config, AppConfig)
    assert config.github.api_url == "https://api.github.com"
    assert config.github.timeout == 30
    assert config.logging.level == "INFO"
    assert config.github_token_resolved is None


def test_yaml_values_and_env_substitution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MY_TOKEN", "from-env-var")
    path = tmp_path / "config.yaml"
    path.write_text(
        "github:\n"
        "  token: ${MY_TOKEN}\n"
        "  api_url: https://ghe.example.com/api/v3\n"
        "  timeout: 10\n"
        "logging:\n"
        "  level: DEBUG\n"
    )

    config = load_config(path)

    assert config.github.api_url == "https://ghe.example.com/api/v3"
    assert config.github.timeout == 10
    assert config.logging.level == "DEBUG"
    assert config.github_token_resolved == "from-env-var"


def test_unresolved_placeholder_falls_back_to_github_token(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  token: ${UNSET_TOKEN_VAR}\n")
    config = load_config(path)
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")

    # Env is captured at load time.
    assert config.github_token_resolved is None
    assert load_config(path).github_token_resolved == "env-token"


def test_token_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    secret = tmp_path / "token.txt"
    secret.write_text("file-token\n")
    monkeypatch.setenv("GITHUB_TOKEN_FILE", str(secret))

    assert load_config(tmp_path / "absent.yaml").github_token_resolved == "file-token"


def test_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).github.api_url == "https://api.github.com"

"""Tests for AppConfig loading from config.toml and the environment."""

from __future__ import annotations

from spanish_quiz.config import DEFAULT_TIMEOUT, DEFAULT_TITLE, AppConfig


def test_defaults_when_file_missing(tmp_path):
    cfg = AppConfig.load(tmp_path / "missing.toml", environ={})

    assert cfg.api_base_url == ""
    assert cfg.request_timeout == DEFAULT_TIMEOUT
    assert cfg.app_title == DEFAULT_TITLE
    assert cfg.log_level == "INFO"


def test_reads_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[app]\ntitle = "Quiz"\n\n'
        '[api]\nbase_url = "http://api.test"\ntimeout_seconds = 4\n\n'
        '[logging]\nlevel = "DEBUG"\njson = true\n',
        encoding="utf-8",
    )

    cfg = AppConfig.load(path, environ={})

    assert cfg.app_title == "Quiz"
    assert cfg.api_base_url == "http://api.test"
    assert cfg.request_timeout == 4.0
    assert cfg.log_level == "DEBUG"
    assert cfg.log_json is True


def test_environment_overrides_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[api]\nbase_url = "http://api.test"\n', encoding="utf-8")

    cfg = AppConfig.load(
        path,
        environ={
            "QUIZ_API_BASE_URL": "https://prod.test/v1",
            "QUIZ_REQUEST_TIMEOUT": "2.5",
            "QUIZ_LOG_LEVEL": "WARNING",
        },
    )

    assert cfg.api_base_url == "https://prod.test/v1"
    assert cfg.request_timeout == 2.5
    assert cfg.log_level == "WARNING"


def test_invalid_timeout_keeps_previous_value(tmp_path):
    cfg = AppConfig.load(tmp_path / "missing.toml", environ={"QUIZ_REQUEST_TIMEOUT": "soon"})
    assert cfg.request_timeout == DEFAULT_TIMEOUT

    cfg = AppConfig.load(tmp_path / "missing.toml", environ={"QUIZ_REQUEST_TIMEOUT": "-1"})
    assert cfg.request_timeout == DEFAULT_TIMEOUT


def test_broken_toml_is_ignored(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[api]\nbase_url = "http://api.test\n', encoding="utf-8")

    cfg = AppConfig.load(path, environ={})

    assert cfg.api_base_url == ""


def test_quiz_endpoint_strips_trailing_slash():
    assert AppConfig(api_base_url="http://api.test/").quiz_endpoint == "http://api.test/generate-quiz"
    assert AppConfig(api_base_url="http://api.test").quiz_endpoint == "http://api.test/generate-quiz"

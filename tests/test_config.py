"""Tests for settings and the user `.env` writer."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jira_cloud.core import config
from jira_cloud.core.config import JiraSettings, get_user_config_dir, read_env_file, write_user_env_vars

pytestmark = pytest.mark.unit


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("JIRA_CLOUD_SITE", "https://example.atlassian.net")
    monkeypatch.setenv("JIRA_CLOUD_MAIL", "me@example.com")
    monkeypatch.setenv("JIRA_CLOUD_TOKEN", "secret")
    monkeypatch.setenv("JIRA_CLOUD_API_VERSION", "2")

    settings = JiraSettings(_env_file=None)

    assert settings.site == "https://example.atlassian.net"
    assert settings.api_version == "2"
    assert settings.has_basic_auth is True
    assert settings.has_bearer_token is False
    assert "secret" not in repr(settings)


def test_settings_defaults(monkeypatch):
    for name in ("SITE", "MAIL", "TOKEN", "BEARER_TOKEN", "API_VERSION"):
        monkeypatch.delenv(f"JIRA_CLOUD_{name}", raising=False)

    settings = JiraSettings(_env_file=None)

    assert settings.site == ""
    assert settings.api_version == "3"
    assert settings.user_agent
    assert settings.has_basic_auth is False


def test_settings_reject_unknown_api_version():
    with pytest.raises(ValidationError):
        JiraSettings(_env_file=None, api_version="4")


def test_settings_read_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("JIRA_CLOUD_SITE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("JIRA_CLOUD_SITE=https://from-file.atlassian.net\n", encoding="utf-8")

    settings = JiraSettings(_env_file=env_file)

    assert settings.site == "https://from-file.atlassian.net"


def test_write_user_env_vars_merges_and_sorts(tmp_path):
    env_path = tmp_path / "jira-cloud" / ".env"
    env_path.parent.mkdir()
    env_path.write_text('# old\nJIRA_CLOUD_TOKEN="old-token"\nJIRA_CLOUD_SITE=https://old.atlassian.net\n', encoding="utf-8")

    written = write_user_env_vars(
        {"JIRA_CLOUD_SITE": "https://new.atlassian.net", "JIRA_CLOUD_MAIL": None, "JIRA_CLOUD_API_VERSION": "3"},
        env_path,
    )

    assert written == env_path
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == [
        "JIRA_CLOUD_API_VERSION=3",
        "JIRA_CLOUD_SITE=https://new.atlassian.net",
        "JIRA_CLOUD_TOKEN=old-token",
    ]


def test_write_user_env_vars_creates_parent(tmp_path):
    env_path = tmp_path / "nested" / "dir" / ".env"
    write_user_env_vars({"JIRA_CLOUD_SITE": "https://x.atlassian.net"}, env_path)
    assert env_path.exists()


def test_write_user_env_vars_defaults_to_user_file(tmp_path, monkeypatch):
    user_env = tmp_path / "user" / ".env"
    monkeypatch.setattr(config, "get_user_env_file", lambda: user_env)

    written = write_user_env_vars({"JIRA_CLOUD_MAIL": "me@example.com"})

    assert written == user_env
    assert read_env_file(user_env) == {"JIRA_CLOUD_MAIL": "me@example.com"}


def test_explicit_env_path_leaves_user_file_alone(tmp_path, monkeypatch):
    user_env = tmp_path / "user" / ".env"
    monkeypatch.setattr(config, "get_user_env_file", lambda: user_env)

    write_user_env_vars({"JIRA_CLOUD_SITE": "https://x.atlassian.net"}, tmp_path / "project.env")

    assert not user_env.exists()


def test_read_env_file_skips_noise(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n# comment\n#JIRA_CLOUD_SITE=hidden\nnot a pair\n=orphan\n JIRA_CLOUD_TOKEN = 'quoted' \nJIRA_CLOUD_JQL=a=b\n",
        encoding="utf-8",
    )

    assert read_env_file(env_file) == {"JIRA_CLOUD_TOKEN": "quoted", "JIRA_CLOUD_JQL": "a=b"}


def test_read_env_file_missing(tmp_path):
    assert read_env_file(tmp_path / "absent.env") == {}


def test_user_config_dir_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "jira-cloud"

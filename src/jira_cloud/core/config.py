"""Configuration for the Jira Cloud client.

Why here:
- Environment variables are read once, through pydantic-settings, and the
  library and the CLI share that contract.
- Adapters receive a `JiraSettings` instance instead of reading `os.environ`.

Lookup order for `.env` files: the working directory first (development),
then the per-user config directory written by `jira-cloud setup`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_API_VERSIONS = ("2", "3")

APP_DIR_NAME = "jira-cloud"
ENV_FILE_HEADER = "# jira-cloud user config (.env)"


def get_user_config_dir() -> Path:
    """Per-user configuration directory: APPDATA, Application Support or XDG."""

    home = Path.home()
    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or home)
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """`KEY=value` pairs of a `.env` file; comments, blank and malformed lines are skipped."""

    if not path.exists():
        return {}
    pairs: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        pairs[key] = value.strip().strip("\"'")
    return pairs


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` into a `.env` file, the user's one unless `env_path` is given.

    Keys missing from `values` keep their old value; `None` values are skipped.
    The file is rewritten with its keys sorted.
    """

    target = env_path or get_user_env_file()
    merged = read_env_file(target)
    merged.update({key: value for key, value in values.items() if value is not None})

    target.parent.mkdir(parents=True, exist_ok=True)
    body = [ENV_FILE_HEADER, *(f"{key}={merged[key]}" for key in sorted(merged))]
    target.write_text("\n".join(body) + "\n", encoding="utf-8")
    return target


class JiraSettings(BaseSettings):
    """Central configuration for `JiraClient` and the CLI.

    Why pydantic-settings:
    - Values are typed and validated at the edge, when the environment is read.
    - Secrets stay wrapped in `SecretStr` and never show up in a repr.
    """

    model_config = SettingsConfigDict(
        env_prefix="JIRA_CLOUD_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    site: str = Field(
        default="",
        description="Atlassian site URL, e.g. https://your-domain.atlassian.net.",
    )
    mail: str = Field(
        default="",
        description="Account e-mail used for basic authentication.",
    )
    token: SecretStr = Field(
        default=SecretStr(""),
        description="API token paired with `mail` for basic authentication.",
    )
    bearer_token: SecretStr = Field(
        default=SecretStr(""),
        description="OAuth 2.0 access token. Takes precedence over basic auth when set.",
    )
    user_agent: str = Field(
        default="jira-cloud-python/0.1",
        min_length=1,
        description="User-Agent header sent with every request.",
    )
    api_version: str = Field(
        default="3",
        pattern=r"^[23]$",
        description="REST API version used to build endpoints (2 or 3).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ERROR).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file written next to the console output.",
    )

    @property
    def has_basic_auth(self) -> bool:
        return bool(self.mail) and bool(self.token.get_secret_value())

    @property
    def has_bearer_token(self) -> bool:
        return bool(self.bearer_token.get_secret_value())

"""SDK configuration.

`PactSettings` reads `PACT_*` variables from the environment, a project
`.env` and the per-user `.env` that `pact doctor setup-token` writes.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "PACT_"


def get_user_config_dir() -> Path:
    """Per-user directory holding the SDK `.env`."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / "pact-sdk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: Mapping[str, str | None]) -> Path:
    """Store `PACT_*` settings in the user `.env`, updating keys in place.

    Values are always double-quoted so a token containing `#` or spaces is
    read back unchanged. Keys mapped to `None` are left as they are.
    """

    foreign = sorted(key for key in values if not key.upper().startswith(ENV_PREFIX))
    if foreign:
        raise ValueError(f"Only {ENV_PREFIX}* keys can be stored, got: {', '.join(foreign)}")

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        if value is not None:
            set_key(env_path, key.upper(), value, quote_mode="always")
    return env_path


class PactSettings(BaseSettings):
    """Settings shared by the HTTP client and the CLI (prefix `PACT_`)."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the per-user one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_token: str | None = Field(
        default=None,
        description="Private API token (X-Private-Api-Token header).",
    )
    base_url: str = Field(
        default="https://api.pact.im/p1/",
        min_length=8,
        description="Base URL of the Pact API.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="pact-python-sdk/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

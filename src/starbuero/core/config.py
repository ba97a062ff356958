"""Client configuration.

Two layers:
- `ClientConfig`: the immutable per-client state the request pipeline reads
  (token, debug flag, API root).
- `ClientSettings`: environment / `.env` loading (pydantic-settings), used
  only by `StarbueroClient.from_settings` and the CLI.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://backend.starbuero.de/external/api/v1"


def get_user_config_dir() -> Path:
    """Per-user configuration directory, as resolved by click for the CLI app."""

    return Path(typer.get_app_dir("starbuero"))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's `.env` file.

    Existing keys not present in `values` are kept. The file is read with
    python-dotenv, the parser pydantic-settings uses when loading it.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged: dict[str, str] = {}
    if env_path.exists():
        merged = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
    merged.update({k: v for k, v in values.items() if v is not None})

    lines = ["# starbuero user config (.env)"]
    lines.extend(f"{key}={merged[key]}" for key in sorted(merged))
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientConfig(BaseModel):
    """Immutable state shared by every call of one client."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(
        ...,
        min_length=1,
        description="Bearer token sent with every request.",
    )
    debug: bool = Field(
        default=False,
        description="Log request lines and response bodies for diagnostics.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Versioned API root all resource paths are appended to.",
    )

    @property
    def auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }


class ClientSettings(BaseSettings):
    """Settings read from the environment.

    Lookup order: process environment, project `.env`, user config `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="STARBUERO_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_token: str | None = Field(
        default=None,
        description="API token issued by Starbüro.",
    )
    debug: bool = Field(
        default=False,
        description="Enable diagnostic logging of requests and failures.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="API root, e.g. a staging backend.",
    )

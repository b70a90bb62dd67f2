"""Settings for the sample app.

Read from ``YOTI_*`` environment variables or a local ``.env`` file.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_HERE = Path(__file__).resolve().parent


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="YOTI_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    scenario_id: str = Field(default="", description="Scenario ID from the Yoti Hub.")
    client_sdk_id: str = Field(default="", description="Client SDK ID from the Yoti Hub.")
    key_file_path: Path | None = Field(default=None, description="Path to the application's PEM key.")
    static_dir: Path = Field(default=_HERE / "static", description="Where shared selfies are written.")
    host: str = Field(default="0.0.0.0", min_length=1)
    port: int = Field(default=9443, ge=1, le=65535)
    ssl_keyfile: Path | None = None
    ssl_certfile: Path | None = None

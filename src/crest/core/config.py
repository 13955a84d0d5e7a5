"""Crest configuration — reads from crest.toml, env vars, and CLI args."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Dict, Any
from pydantic_settings import BaseSettings
from pydantic import Field

logger = logging.getLogger("crest")

DEFAULT_BADGE_TEMPLATE = "https://img.shields.io/badge/build-{{status}}-{{color}}.svg"


class CrestSettings(BaseSettings):
    """Daemon settings."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8410
    log_level: str = "info"

    # Database (SQLite by default for zero-setup)
    database_url: str = Field(
        default="sqlite+aiosqlite:///crest.db",
        alias="CREST_DATABASE_URL",
    )

    # Auth
    api_key: str = Field(default="crest_dev_key", alias="CREST_API_KEY")

    # Badges — template needs {{status}} and {{color}}
    badge_template: str = DEFAULT_BADGE_TEMPLATE

    # Upper bound on workflow traversal depth
    max_graph_depth: int = Field(default=256, ge=1)

    # crest.toml values are applied by assignment and must be validated too
    model_config = {"env_prefix": "CREST_", "env_file": ".env", "validate_assignment": True}


class ClientSettings(BaseSettings):
    """CLI client settings."""

    host: str = Field(default="http://localhost:8410", alias="CREST_HOST")
    api_key: str = Field(default="crest_dev_key", alias="CREST_API_KEY")

    model_config = {"env_prefix": "CREST_"}


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}


def _load_toml_config() -> Dict[str, Any]:
    """Load configuration from crest.toml files.

    Searches for crest.toml in:
    1. CREST_HOME (~/.crest/crest.toml by default)
    2. Current directory (./crest.toml)

    Returns:
        Combined configuration dict; the local file takes precedence
    """
    config: Dict[str, Any] = {}

    crest_home = Path(os.environ.get("CREST_HOME", "~/.crest")).expanduser()
    for path in (crest_home / "crest.toml", Path("crest.toml")):
        if path.exists():
            config.update(_read_toml(path))

    return config


def get_settings() -> CrestSettings:
    settings = CrestSettings()

    # crest.toml only fills keys that map onto known settings
    for key, value in _load_toml_config().items():
        if key in CrestSettings.model_fields:
            setattr(settings, key, value)

    return settings


def get_client_settings() -> ClientSettings:
    return ClientSettings()

"""
Configuration loader for the Connect server client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "connect_config.yml"

ENV_OVERRIDES = {
    "CONNECT_SERVER_URL": "server_url",
    "CONNECT_API_VERSION": "api_version",
    "CONNECT_TIMEOUT_SECONDS": "timeout_seconds",
}


class StoreConfig(BaseModel):
    """Static store profile used by the development store environment"""

    site_name: str = ""
    site_url: str = ""
    locale: str = "en_US"
    platform_version: str = ""
    runtime_version: str = ""
    currency: str = "USD"
    first_name: str = ""
    last_name: str = ""
    country: str = ""
    state: str = ""
    city: str = ""
    postcode: str = ""
    street_address: str = ""
    full_address_available: bool = True


class ConnectConfig(BaseModel):
    """Connect server client configuration"""

    server_url: str = "https://api.woocommerce.com/"
    api_version: str = "3"
    service_name: str = "woocommerce-connect"
    timeout_seconds: float = Field(default=60.0, gt=0)
    time_limit_margin_seconds: float = Field(default=10.0, ge=0)
    store: Optional[StoreConfig] = None

    @field_validator("server_url")
    @classmethod
    def _require_http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"server_url must be an http(s) URL, got {value!r}")
        return value

    @property
    def accept_header(self) -> str:
        return f"application/vnd.{self.service_name}.v{self.api_version}"


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name, "").strip()
        if value:
            overrides[field_name] = value
    return overrides


def load_connect_config(config_path: Optional[Path] = None) -> ConnectConfig:
    """
    Load and validate Connect client configuration.

    Values come from the YAML file first, then CONNECT_* environment variables
    (a local .env file is honored).

    Args:
        config_path: Path to config file. Defaults to config/connect_config.yml;
            a missing default file means "use built-in defaults".

    Returns:
        Validated ConnectConfig object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        explicit = False
    else:
        explicit = True

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    elif explicit:
        raise FileNotFoundError(f"Connect config file not found: {config_path}")

    data.update(_env_overrides())

    try:
        config = ConnectConfig(**data)
        logger.info("Loaded Connect config (server_url=%s, api_version=%s)", config.server_url, config.api_version)
        return config
    except ValidationError as e:
        logger.error(f"Connect config validation failed: {e}")
        raise

"""YAML config loader with environment override and dotted-key lookup."""

import hashlib
import os
from pathlib import Path
from typing import Any

import yaml

from skycast.config.schema import SkycastConfig

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path | None = None) -> SkycastConfig:
    """Load and validate config from a YAML file.

    A missing path yields the defaults. An empty ``api.api_key`` is filled
    from the OPENWEATHER_API_KEY environment variable.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    config = SkycastConfig(**raw)
    if not config.api.api_key and os.environ.get(API_KEY_ENV):
        config = config.model_copy(
            update={
                "api": config.api.model_copy(
                    update={"api_key": os.environ[API_KEY_ENV]}
                )
            }
        )
    return config


def config_hash(config: SkycastConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: SkycastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.timeout'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted(config: SkycastConfig) -> SkycastConfig:
    """Copy of the config with the API key masked, for display."""
    if not config.api.api_key:
        return config
    return config.model_copy(
        update={"api": config.api.model_copy(update={"api_key": "***"})}
    )

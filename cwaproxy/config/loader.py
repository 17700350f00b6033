"""YAML config loader with environment override and dotted-key reads."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from cwaproxy.config.schema import ProxyConfig

API_KEY_ENV = "CWA_API_KEY"
DEFAULT_CONFIG = "ops/configs/default.yaml"


def load_config(path: str | Path | None = None) -> ProxyConfig:
    """Load and validate config from a YAML file.

    With no path, DEFAULT_CONFIG is read if present, else defaults apply.
    An explicit path must exist. CWA_API_KEY from the environment
    overrides cwa.api_key when set.
    """
    if path is None and Path(DEFAULT_CONFIG).exists():
        path = DEFAULT_CONFIG

    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    env_key = os.environ.get(API_KEY_ENV, "")
    if env_key:
        raw["cwa"] = {**(raw.get("cwa") or {}), "api_key": env_key}

    return ProxyConfig(**raw)


def get_config_value(config: ProxyConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'cwa.base_url'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def masked_config_json(config: ProxyConfig) -> str:
    """Dump config as JSON with the API key redacted."""
    data = json.loads(config.model_dump_json())
    if data["cwa"]["api_key"]:
        data["cwa"]["api_key"] = "****"
    return json.dumps(data, indent=2, ensure_ascii=False)

"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger

from gitpreview.config.schema import Config

# Flat plugin settings from older releases, mapped to their preview.* names.
_LEGACY_PREVIEW_KEYS = {
    "defaultHighlight": "defaultHighlight",
    "defaultLength": "defaultLines",
    "defaultLines": "defaultLines",
    "maximumLength": "maxLines",
    "maxLines": "maxLines",
    "messageFormat": "messageFormat",
    "replaceTripleBackticks": "replaceTripleBackticks",
    "sendAsFile": "sendFile",
    "sendFile": "sendFile",
}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".gitpreview" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")

    # Move legacy flat settings -> preview.*; an explicit preview value wins.
    preview_cfg = data.setdefault("preview", {})
    if not isinstance(preview_cfg, dict):
        raise ValueError("preview must be an object")
    for legacy_key, key in _LEGACY_PREVIEW_KEYS.items():
        if legacy_key not in data:
            continue
        value = data.pop(legacy_key)
        if key not in preview_cfg:
            preview_cfg[key] = value

    # Rename legacy keys written inside the preview section itself
    for legacy_key in ("defaultLength", "maximumLength", "sendAsFile"):
        if legacy_key in preview_cfg:
            value = preview_cfg.pop(legacy_key)
            preview_cfg.setdefault(_LEGACY_PREVIEW_KEYS[legacy_key], value)

    # Move legacy top-level proxy -> fetch.proxy
    legacy_proxy = data.pop("proxy", None)
    if legacy_proxy:
        fetch_cfg = data.setdefault("fetch", {})
        if not isinstance(fetch_cfg, dict):
            raise ValueError("fetch must be an object")
        if not fetch_cfg.get("proxy"):
            fetch_cfg["proxy"] = legacy_proxy

    return data

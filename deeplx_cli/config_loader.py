
import logging
import os
from pathlib import Path

import yaml

from deeplx_cli.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".deeplx-cli.yml"
DEFAULT_API_URL = "https://deeplx.vercel.app/translate"
DEFAULT_SOURCE_LANG = "auto"
DEFAULT_TARGET_LANG = "EN"

# Written to disk on first run and used when nothing else is set
DEFAULT_CONFIG = {
    "url": DEFAULT_API_URL,
    "source_lang": DEFAULT_SOURCE_LANG,
    "target_lang": DEFAULT_TARGET_LANG,
}

CONFIG_KEYS = tuple(DEFAULT_CONFIG)


def default_config_path():
    """Returns <home>/.deeplx-cli.yml."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigError(f"failed to get current user home directory: {e}") from e
    return home / CONFIG_FILE_NAME


def ensure_config(config_path):
    """
    Writes the default config if the file does not exist yet.
    Returns True when a default file was generated (or attempted), False if
    the file was already there. A failed write is only logged.
    """
    if os.path.exists(config_path):
        return False

    logger.info("Config file %s does not exist, generating default config.", config_path)
    try:
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        logger.warning("Failed to write default config file %s: %s", config_path, e)
    else:
        logger.info("Default config file generated: %s", config_path)
    return True


def load_config(config_path):
    """
    Parses the YAML config file.
    Scalars are kept as their literal text (BaseLoader), so values such as
    NO or on stay strings. Only the known keys are kept.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except OSError as e:
        raise ConfigError(f"failed to read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"failed to parse config file {config_path}: expected a mapping, got {type(data).__name__}"
        )

    config = {}
    for key in CONFIG_KEYS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigError(
                f"failed to parse config file {config_path}: {key} must be a string, got {type(value).__name__}"
            )
        config[key] = value
    return config


def read_config(config_path):
    """
    Loads the config for a CLI run, generating the default file first if needed.
    Never raises: on any load failure the defaults (fresh file) or an empty
    config (existing file) are used instead.
    """
    generated = ensure_config(config_path)
    fallback = dict(DEFAULT_CONFIG) if generated else {}

    try:
        return load_config(config_path)
    except ConfigError as e:
        logger.warning("%s; using default values or command-line arguments", e)
        return fallback


def get_config_value(config, key, default=None):
    """
    Helper to get a config value, treating empty strings as unset.
    """
    value = config.get(key) if config else None
    return value if value else default


def resolve_settings(config, url=None, source_lang=None, source_lang_short=None,
                     target_lang=None, target_lang_short=None):
    """
    Merges CLI flags with the config file.
    Priority: long flag > short flag > config file > built-in default.
    """
    final_url = url or get_config_value(config, "url", DEFAULT_API_URL)
    final_source = (
        source_lang
        or source_lang_short
        or get_config_value(config, "source_lang", DEFAULT_SOURCE_LANG)
    )
    final_target = (
        target_lang
        or target_lang_short
        or get_config_value(config, "target_lang", DEFAULT_TARGET_LANG)
    )
    return {
        "url": final_url,
        "source_lang": final_source,
        "target_lang": final_target,
    }

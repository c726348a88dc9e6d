import logging
import os

import toml
from dotenv import dotenv_values

logger = logging.getLogger(__name__)

ENV_PREFIX = "VEOBRIEF_"


def _project_root():
    # veobrief/config/config.py -> veobrief/config -> veobrief -> repo root
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def get_default_config():
    """Get default configuration"""
    project_root = _project_root()

    return {
        # Logging
        "log_file": os.path.join(project_root, "logs/veobrief.log"),
        "log_level": "INFO",
        "log_console": False,

        # Export ("copy JSON") behaviour
        "copy_status_seconds": 1.8,
        "export_path": os.path.join(project_root, "exports/prompt.json"),

        # HTTP API
        "server_host": "0.0.0.0",
        "server_port": 8000,
    }


def _coerce(raw, default):
    if isinstance(default, bool):
        return str(raw).strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    return str(raw)


def apply_env_overrides(config, env_vars):
    """
    Override config keys from VEOBRIEF_<KEY> variables.
    Values that cannot be converted to the default's type are ignored.
    """
    defaults = get_default_config()
    for key, default in defaults.items():
        raw = env_vars.get(ENV_PREFIX + key.upper())
        if raw is None or raw == "":
            continue
        try:
            config[key] = _coerce(raw, default)
        except ValueError:
            logger.warning("Ignoring invalid value %r for %s%s", raw, ENV_PREFIX, key.upper())
    return config


def load_config(config_file=None, env_file=None, environ=None):
    """
    Load configuration.

    Precedence, lowest first: built-in defaults, TOML file, .env file,
    process environment.
    """
    config = get_default_config()

    config_file = config_file or os.path.join(_project_root(), "veobrief/config/config.toml")
    if os.path.exists(config_file):
        with open(config_file, "r", encoding="utf-8") as f:
            loaded = toml.load(f)
        for key, value in loaded.items():
            if key in config:
                config[key] = value
            else:
                logger.warning("Unknown config key %r in %s", key, config_file)

    env_vars = {}
    env_file = env_file or os.path.join(_project_root(), ".env")
    if os.path.exists(env_file):
        env_vars.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    env_vars.update(os.environ if environ is None else environ)

    apply_env_overrides(config, env_vars)

    config["log_file"] = os.path.expanduser(config["log_file"]) if config["log_file"] else ""
    config["export_path"] = os.path.expanduser(config["export_path"])
    return config

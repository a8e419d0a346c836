"""Loading and saving the TOML file of monitored applications and versions."""

import logging
import tomllib
from pathlib import Path

import tomli_w

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the configuration cannot be read, parsed or written."""


def default_config_path():
    """Return the default location of the versions file."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        logger.warning(
            "Error getting user home directory: %s. Using current directory for config file.",
            exc,
        )
        return Path("versions.toml")
    return home / ".config" / "shepherd" / "versions.toml"


def load_config(path=None):
    """Return the application-to-version mapping; empty if the file does not exist."""
    path = Path(path) if path is not None else default_config_path()
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        logger.info(
            "Config file '%s' not found. A new one will be created upon adding an application.",
            path,
        )
        return {}
    except OSError as exc:
        logger.debug("Error reading config file %s: %s", path, exc)
        raise ConfigError(f"could not read config file '{path}': {exc}") from exc

    try:
        document = tomllib.loads(data.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        logger.debug("Error unmarshalling TOML from %s: %s", path, exc)
        raise ConfigError(
            f"could not parse config file '{path}' (TOML format error): {exc}"
        ) from exc

    for name, version in document.items():
        if not isinstance(version, str):
            raise ConfigError(
                f"could not parse config file '{path}' (TOML format error): "
                f"value for '{name}' is not a string"
            )
    return dict(document)


def save_config(config, path=None):
    """Write the mapping to the versions file, creating its directory if needed."""
    path = Path(path) if path is not None else default_config_path()
    try:
        text = tomli_w.dumps(dict(config))
    except (TypeError, ValueError) as exc:
        logger.debug("Error marshalling config to TOML: %s", exc)
        raise ConfigError(f"could not format configuration for saving: {exc}") from exc

    directory = path.parent
    try:
        directory.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        logger.debug("Error creating directory structure %s: %s", directory, exc)
        raise ConfigError(f"could not create config directory '{directory}': {exc}") from exc

    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.debug("Error writing config to file %s: %s", path, exc)
        raise ConfigError(f"could not write configuration to file '{path}': {exc}") from exc
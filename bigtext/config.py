"""
Configuration for bigtext.

Settings are resolved from built-in defaults, then an optional JSON/YAML
settings file, then ``BIGTEXT_*`` environment variables. Command-line
options are applied on top by the CLI.
"""

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .exceptions import ConfigError
from .litlogger import ConsoleHandler, LogFormat, Logger, LogLevel

# Configuration constants
DEFAULT_CHARSET = "printables"
DEFAULT_LOG_LEVEL = "WARNING"
ENV_PREFIX = "BIGTEXT_"
CONFIG_ENV_VAR = "BIGTEXT_CONFIG"

# Setup logger
logger = Logger(
    name="bigtext",
    level=LogLevel.WARNING,
    handlers=[ConsoleHandler()],
    fmt=LogFormat.DEFAULT
)

_TRUE = ("true", "t", "yes", "y", "1", "on")
_FALSE = ("false", "f", "no", "n", "0", "off")


def _to_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value}")


@dataclass
class Settings:
    """Resolved runtime settings."""
    charset: str = DEFAULT_CHARSET
    glyph_file: Optional[str] = None
    show_header: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def level(self) -> LogLevel:
        try:
            return LogLevel.from_name(self.log_level)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def update(self, values: Mapping[str, Any], source: str = "settings") -> "Settings":
        """Return a copy with ``values`` applied; ``None`` values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown {source} keys: {', '.join(unknown)}")
        changes: Dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if key == "show_header":
                value = _to_bool(value, key)
            else:
                value = str(value)
            changes[key] = value
        return replace(self, **changes)

    def glyph_table(self):
        """Load the glyph table these settings select."""
        from .charmaps import load_category, load_glyph_file

        if self.glyph_file:
            return load_glyph_file(self.glyph_file)
        return load_category(self.charset)


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load settings from a JSON or YAML file.

    :param path: Path to a ``.json``, ``.yaml`` or ``.yml`` file
    :return: Mapping of setting names to values
    """
    path = Path(os.path.expanduser(str(path)))
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    fmt = path.suffix.lstrip(".").lower()
    if fmt not in ("json", "yaml", "yml"):
        raise ConfigError(f"Unsupported config format: {fmt}")

    try:
        with open(path, encoding="utf-8") as f:
            if fmt == "json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Error loading config file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    logger.debug(f"Loaded settings from {path}")
    return data


def _from_environ(environ: Mapping[str, str]) -> Dict[str, Any]:
    values = {}
    for f in fields(Settings):
        value = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if value:
            values[f.name] = value
    return values


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None
) -> Settings:
    """
    Resolve settings from defaults, a settings file and the environment.

    :param config_path: Settings file; falls back to ``$BIGTEXT_CONFIG``
    :param environ: Environment mapping (defaults to ``os.environ``)
    """
    environ = os.environ if environ is None else environ
    settings = Settings()

    config_path = config_path or environ.get(CONFIG_ENV_VAR)
    if config_path:
        settings = settings.update(load_config_file(config_path), source="config file")

    settings = settings.update(_from_environ(environ), source="environment")
    settings.level()
    return settings

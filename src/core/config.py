"""Configuration management for Browser Selector."""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from .constants import (
    CONFIG_FILE,
    DEFAULT_DISPLAY,
    DEFAULT_TRACKING_PARAMS,
)
from .models import DisplaySettings

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be saved."""
    pass


class ConfigManager:
    """Manages configuration loading, validation, and persistence.

    An unreadable config file is not fatal: defaults are used for the run and
    the file is left untouched (``recovered`` is set and ``save`` is a no-op).
    """

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or CONFIG_FILE
        self._config: dict[str, Any] = {}
        self.recovered = False
        self.load()

    def _create_default_config(self) -> dict[str, Any]:
        """Generate default configuration."""
        return {
            "last_browser": "",
            "blacklist": {
                "tracking_params": list(DEFAULT_TRACKING_PARAMS),
            },
            "display": DEFAULT_DISPLAY.copy(),
        }

    def _validate_tracking_param(self, entry: Any) -> bool:
        """A tracking prefix must be a non-empty string."""
        return isinstance(entry, str) and bool(entry.strip())

    def _merge_with_defaults(self, loaded: dict[str, Any]) -> dict[str, Any]:
        """Overlay loaded values on defaults, keeping defaults for bad fields."""
        config = self._create_default_config()

        last_browser = loaded.get("last_browser", "")
        if isinstance(last_browser, str):
            config["last_browser"] = last_browser
        elif last_browser is not None:
            logger.warning("Config field 'last_browser' is not a string, ignoring")

        blacklist = loaded.get("blacklist", {})
        params = blacklist.get("tracking_params") if isinstance(blacklist, dict) else None
        if isinstance(params, list):
            valid = [p for p in params if self._validate_tracking_param(p)]
            if len(valid) != len(params):
                logger.warning("Ignoring %d invalid tracking param entries", len(params) - len(valid))
            config["blacklist"]["tracking_params"] = valid
        elif params is not None:
            logger.warning("Config field 'blacklist.tracking_params' is not a list, using defaults")

        display = loaded.get("display", {})
        if isinstance(display, dict):
            for key in DEFAULT_DISPLAY:
                value = display.get(key)
                if value is None:
                    continue
                if isinstance(value, int) and not isinstance(value, bool) and value > 0:
                    config["display"][key] = value
                else:
                    logger.warning("Config field 'display.%s' must be a positive integer, using default", key)

        return config

    def load(self) -> None:
        """Load configuration from file, creating defaults if needed."""
        self.recovered = False

        if not self.config_path.exists():
            logger.info("Config file not found, creating defaults at %s", self.config_path)
            self._config = self._create_default_config()
            try:
                self.save()
            except ConfigError as e:
                logger.warning("Could not write default config: %s", e)
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Config file %s unreadable, using defaults: %s", self.config_path, e)
            self._config = self._create_default_config()
            self.recovered = True
            return

        if not isinstance(loaded_config, dict):
            logger.warning("Config file %s is not a JSON object, using defaults", self.config_path)
            self._config = self._create_default_config()
            self.recovered = True
            return

        self._config = self._merge_with_defaults(loaded_config)
        logger.debug("Configuration loaded from %s", self.config_path)

    def save(self) -> None:
        """Atomically replace the config file with the current configuration."""
        if self.recovered:
            logger.warning("Not saving config: %s was unreadable at load time", self.config_path)
            return

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.config_path.parent, prefix=".config-", suffix=".json"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(self._config, f, indent=2)
                    f.write("\n")
                os.replace(tmp_name, self.config_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise ConfigError(f"Failed to save config to {self.config_path}: {e}") from e
        logger.debug("Configuration saved to %s", self.config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Return a copy of the current configuration."""
        return copy.deepcopy(self._config)

    @property
    def last_browser(self) -> str:
        """Return the id of the last browser chosen, or an empty string."""
        return self._config.get("last_browser", "")

    @property
    def tracking_params(self) -> list[str]:
        """Return the configured tracking parameter prefixes."""
        return list(self._config.get("blacklist", {}).get("tracking_params", []))

    @property
    def display(self) -> DisplaySettings:
        """Return the display limits."""
        return DisplaySettings.from_dict(self._config.get("display", {}))

    def set_last_browser(self, browser_id: str) -> None:
        """Record the last browser chosen."""
        self._config["last_browser"] = browser_id

    def set_tracking_params(self, entries: list[str]) -> None:
        """Replace the tracking parameter prefixes after validation."""
        for entry in entries:
            if not self._validate_tracking_param(entry):
                raise ConfigError(f"Invalid tracking param entry {entry!r}: must be a non-empty string")
        self._config.setdefault("blacklist", {})["tracking_params"] = list(entries)

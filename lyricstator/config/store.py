"""
Configuration store for Lyricstator.

Handles loading, saving, and accessing application configuration.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from PySide6.QtCore import QCoreApplication, QSettings, QStandardPaths

from .defaults import APPLICATION_NAME, CONFIG_EXTENSION, build_default_table
from .values import ConfigValue, Scalar, ValueKind, coerce

logger = logging.getLogger(__name__)


class ConfigStore:
    """
    Application configuration store.

    Values are looked up in the open INI file first, then in the default
    table, then in the caller's fallback. When no file is open the default
    table doubles as the mutable store.

    Path:
        Linux: ~/.config/<organization>/<application>/Lyricstator.ini
        macOS: ~/Library/Preferences/<organization>/<application>/Lyricstator.ini
        Windows: %LOCALAPPDATA%\\<organization>\\<application>\\Lyricstator.ini
    """

    def __init__(self, config_path: Optional[str] = None, load: bool = True):
        """
        Initialize the store.

        Args:
            config_path: INI file to open, or None for the per-user default
            load: If False, start with the default table only
        """
        self._defaults: Dict[str, Scalar] = build_default_table()
        self._kinds: Dict[str, ValueKind] = {}
        self._settings: Optional[QSettings] = None
        self._initial_path = config_path
        if load:
            self.load_config(config_path)

    def __enter__(self) -> "ConfigStore":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    @property
    def is_loaded(self) -> bool:
        """True when a backing file is open."""
        return self._settings is not None

    @property
    def config_path(self) -> Optional[str]:
        """Path of the open backing file, or None."""
        if self._settings is None:
            return None
        return self._settings.fileName()

    def keys(self) -> List[str]:
        """Get all keys known to the default table."""
        return list(self._defaults)

    def load_config(self, path: Optional[str] = None) -> bool:
        """
        Open an INI file as the backing store.

        The previously open file is released only once the new one has
        opened, so a failed load leaves the store as it was.

        Args:
            path: File to open; empty or None uses get_config_path()

        Returns:
            True if the file was opened
        """
        try:
            config_path = path or self.get_config_path()
            Path(config_path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to load configuration: {e}")
            return False

        settings = QSettings(config_path, QSettings.Format.IniFormat)
        if settings.status() != QSettings.Status.NoError:
            logger.error(
                f"Failed to load configuration from {config_path}: "
                f"{settings.status().name}"
            )
            return False
        if not settings.isWritable():
            logger.error(f"Failed to load configuration: {config_path} is not writable")
            return False

        self._release()
        self._settings = settings
        logger.info(f"Configuration loaded from: {config_path}")
        return True

    def save_config(self, path: Optional[str] = None) -> bool:
        """
        Flush the open backing store to disk.

        The path argument does not redirect output; the currently open
        file is always the one written.

        Args:
            path: Ignored

        Returns:
            True if the flush succeeded
        """
        if self._settings is None:
            logger.warning("No configuration loaded")
            return False

        if path and Path(path).resolve() != Path(self._settings.fileName()).resolve():
            logger.warning(
                f"save_config() writes to {self._settings.fileName()}, not {path}"
            )

        try:
            self._settings.sync()
        except RuntimeError as e:
            logger.error(f"Failed to save configuration: {e}")
            return False

        status = self._settings.status()
        if status != QSettings.Status.NoError:
            logger.error(f"Failed to save configuration: {status.name}")
            return False

        logger.info("Configuration saved")
        return True

    def get_value(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Setting key ("group/name", relative to the current group)
            default: Value returned when the key is found nowhere

        Returns:
            Stored value, table default, or the given default
        """
        full_key = self._qualify(key)
        fallback = self._defaults.get(full_key, default)

        if self._settings is None:
            return fallback

        raw = self._settings.value(key)
        if raw is None:
            return fallback

        try:
            kind = self._kinds.get(full_key) or self._kind_for(fallback)
            return coerce(raw, kind)
        except (TypeError, ValueError):
            logger.debug(f"Ignoring invalid stored value for {full_key}: {raw!r}")
            return fallback

    def set_value(self, key: str, value: Scalar):
        """
        Set a setting value.

        Writes through to the backing file if one is open, otherwise
        overrides the default table for the lifetime of this store.

        Args:
            key: Setting key
            value: A str, int, float or bool

        Raises:
            TypeError: If the value type is not supported
        """
        tagged = ConfigValue.of(value)
        self._kinds[self._qualify(key)] = tagged.kind

        if self._settings is None:
            self._defaults[key] = tagged.value
            return

        self._settings.setValue(key, tagged.encode())

    def begin_group(self, name: str):
        """
        Scope subsequent keys under a group.

        Nesting is handled by the backing store's own group stack.
        """
        if self._settings is not None:
            self._settings.beginGroup(name)

    def end_group(self):
        """Leave the innermost group."""
        if self._settings is not None:
            self._settings.endGroup()

    @contextmanager
    def group(self, name: str) -> Iterator["ConfigStore"]:
        """Context manager around begin_group()/end_group()."""
        self.begin_group(name)
        try:
            yield self
        finally:
            self.end_group()

    def has_key(self, key: str) -> bool:
        """Check whether a key exists in the active store."""
        if self._settings is None:
            return key in self._defaults
        return self._settings.contains(key)

    def reset_to_defaults(self):
        """
        Discard all stored values and overrides.

        Clears the backing file, restores the default table, and reopens
        the file the store was using.
        """
        path = self._initial_path
        if self._settings is not None:
            path = self._settings.fileName()
            self._settings.clear()

        self._defaults = build_default_table()
        self._kinds.clear()
        self.load_config(path)
        logger.info("Configuration reset to defaults")

    @staticmethod
    def get_config_path() -> str:
        """
        Get the per-user configuration file path.

        Creates the configuration directory if it doesn't exist.

        Returns:
            Path to the INI file
        """
        app_name = QCoreApplication.applicationName() or APPLICATION_NAME
        config_dir = Path(
            QStandardPaths.writableLocation(
                QStandardPaths.StandardLocation.AppConfigLocation
            )
        )

        config_dir.mkdir(parents=True, exist_ok=True)

        return str(config_dir / f"{app_name}{CONFIG_EXTENSION}")

    def close(self):
        """Flush and release the backing store."""
        self._release()

    def _release(self):
        if self._settings is not None:
            self._settings.sync()
            self._settings = None

    def _qualify(self, key: str) -> str:
        if self._settings is None:
            return key
        prefix = self._settings.group()
        return f"{prefix}/{key}" if prefix else key

    @staticmethod
    def _kind_for(fallback: Any) -> Optional[ValueKind]:
        try:
            return ValueKind.of(fallback)
        except TypeError:
            return None

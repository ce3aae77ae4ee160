"""Server settings for the BZCalc HTTP calculation service."""

from dataclasses import dataclass, field
from enum import Enum, auto
import json
import os
from typing import Any, Dict, List

from bzcalc.bzcalc_tokenizer import DEFAULT_MAX_LITERAL


class BZCalcDispatchMode(Enum):
    """How evaluations are scheduled onto threads."""
    POOL = auto()
    THREAD_PER_REQUEST = auto()


class BZCalcSettingsError(Exception):
    """Raised when a settings file holds values the server cannot use."""


@dataclass
class BZCalcServerSettings:
    """
    Settings for the calculation server.
    """
    host: str = "0.0.0.0"
    port: int = 49212
    resource_path: str = ""  # Empty means static pages are not served
    dispatch_mode: BZCalcDispatchMode = BZCalcDispatchMode.POOL
    max_workers: int | None = None  # None means 4 workers per CPU
    static_extensions: List[str] = field(default_factory=lambda: [".html"])
    max_literal: int = DEFAULT_MAX_LITERAL

    @classmethod
    def create_default(cls) -> "BZCalcServerSettings":
        """Create a new settings object with default values."""
        return cls()

    def worker_count(self) -> int:
        """Return the number of pool threads to use."""
        if self.max_workers is not None:
            return self.max_workers

        return max(2, (os.cpu_count() or 1) * 4)

    def validate(self) -> None:
        """
        Check that the settings are usable.

        Raises:
            BZCalcSettingsError: If any value is out of range
        """
        if not 1 <= self.port <= 65535:
            raise BZCalcSettingsError(f"Port must be between 1 and 65535, got {self.port}")

        if self.max_workers is not None and self.max_workers < 1:
            raise BZCalcSettingsError(f"max_workers must be at least 1, got {self.max_workers}")

        if self.max_literal < 0:
            raise BZCalcSettingsError(f"max_literal must not be negative, got {self.max_literal}")

        for extension in self.static_extensions:
            if not extension.startswith("."):
                raise BZCalcSettingsError(f"Static extension must start with '.', got {extension!r}")

    @classmethod
    def parse_dispatch_mode(cls, name: str) -> BZCalcDispatchMode:
        """
        Convert a dispatch mode name such as "pool" or "thread" into a BZCalcDispatchMode.

        Raises:
            BZCalcSettingsError: If the name is not recognised
        """
        aliases = {
            "pool": BZCalcDispatchMode.POOL,
            "thread": BZCalcDispatchMode.THREAD_PER_REQUEST,
            "thread_per_request": BZCalcDispatchMode.THREAD_PER_REQUEST,
        }

        mode = aliases.get(name.lower().replace("-", "_"))
        if mode is None:
            raise BZCalcSettingsError(f"Unknown dispatch mode: {name!r}")

        return mode

    @classmethod
    def load(cls, path: str) -> "BZCalcServerSettings":
        """
        Load server settings from file.

        Args:
            path: Path to the settings file

        Returns:
            BZCalcServerSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            BZCalcSettingsError: If file contains invalid values
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise BZCalcSettingsError(f"Settings file {path} must contain a JSON object")

        try:
            settings.host = str(data.get("host", settings.host))
            settings.port = int(data.get("port", settings.port))
            settings.resource_path = str(data.get("resourcePath", settings.resource_path))

            if "dispatchMode" in data:
                settings.dispatch_mode = cls.parse_dispatch_mode(str(data["dispatchMode"]))

            max_workers = data.get("maxWorkers")
            settings.max_workers = int(max_workers) if max_workers is not None else None

            if "staticExtensions" in data:
                settings.static_extensions = [str(extension) for extension in data["staticExtensions"]]

            settings.max_literal = int(data.get("maxLiteral", settings.max_literal))

        except (TypeError, ValueError) as e:
            raise BZCalcSettingsError(f"Invalid value in settings file {path}: {e}") from e

        settings.validate()
        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to the JSON file layout."""
        return {
            "host": self.host,
            "port": self.port,
            "resourcePath": self.resource_path,
            "dispatchMode": "pool" if self.dispatch_mode == BZCalcDispatchMode.POOL else "thread",
            "maxWorkers": self.max_workers,
            "staticExtensions": self.static_extensions,
            "maxLiteral": self.max_literal
        }

    def save(self, path: str) -> None:
        """
        Save server settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            OSError: If there's an error writing the file
        """
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)

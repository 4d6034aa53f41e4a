"""Top-level linkhook configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from .ConfigurationError import ConfigurationError
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig


class LinkhookConfig(BaseModel):
    """Top-level configuration for linkhook."""

    model_config = ConfigDict(extra="forbid")

    link: LinkConfig = Field(default_factory=LinkConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get linkhook home directory based on LINKHOOK_HOME or default to ~/.linkhook."""
        home_env = os.environ.get("LINKHOOK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".linkhook"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the linkhook home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "LinkhookConfig":
        """Load and validate config from file.

        Raises:
            ConfigurationError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ConfigurationError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigurationError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary for serialization."""
        return {
            "link": self.link.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e

"""Link resolution configuration."""

from __future__ import annotations

__all__ = ["ERROR_LEVELS", "LinkConfig"]

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .ConfigurationError import ConfigurationError

ERROR_LEVELS = ("ignore", "warning", "error")


class LinkConfig(BaseModel):
    """Process-wide settings for the render-link hook.

    Passed explicitly to every resolution call; never read from ambient state by the resolver.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    error_level: str = Field(
        "ignore",
        alias="errorLevel",
        description="How unresolved links and fragments are reported: ignore, warning or error",
    )
    highlight_broken: bool = Field(
        False,
        alias="highlightBroken",
        description="Add class=broken to unresolved links (warning level, development runs only)",
    )

    def __init__(self, **data: Any) -> None:
        """Validate settings.

        Raises:
            ConfigurationError: If a value is invalid or an unknown key is given
        """
        try:
            super().__init__(**data)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(x) for x in first.get("loc", ()))
            raise ConfigurationError(f"Invalid link configuration: {field}: {first.get('msg', str(e))}") from e

    @field_validator("error_level", mode="before")
    @classmethod
    def _normalize_error_level(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError(f"error_level must be a string, got {type(v).__name__}")
        level = v.strip().lower()
        if level not in ERROR_LEVELS:
            raise ValueError(f"error_level must be one of {', '.join(ERROR_LEVELS)}; got {v!r}")
        return level

    @classmethod
    def from_config_dict(cls, config: dict[str, Any]) -> LinkConfig:
        """Load link config from config dict.

        A missing ``link`` section yields the defaults.

        Raises:
            ConfigurationError: If the section holds an invalid value
        """
        return cls(**(config.get("link") or {}))

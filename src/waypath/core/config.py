"""Runtime configuration for waypath.

Settings are plain pydantic models so they can be built explicitly in code
or read from ``WAYPATH_*`` environment variables with :func:`load_settings`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from waypath.core.constants import (
    DEFAULT_MAX_RENAME_ATTEMPTS,
    ENV_DEBUG,
    ENV_FOLDER_DIR_TEMPLATE,
    ENV_MAX_RENAME_ATTEMPTS,
    ENV_PLATFORM,
    TRUTHY_VALUES,
)
from waypath.locations.models import PlatformFamily, WellKnownFolder

__all__ = ["WaypathSettings", "get_settings", "load_settings"]


class WaypathSettings(BaseModel):
    """Library-wide settings.

    Attributes:
        debug: Emit debug-level log events
        max_rename_attempts: Bound on the AutoRenameIfExists candidate search
        platform_family: Force a platform family instead of detecting it
        folder_overrides: Base directory overrides per well-known folder
    """

    debug: bool = False
    max_rename_attempts: int = Field(default=DEFAULT_MAX_RENAME_ATTEMPTS, gt=0)
    platform_family: PlatformFamily | None = None
    folder_overrides: dict[WellKnownFolder, Path] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("platform_family", mode="before")
    @classmethod
    def normalize_platform(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    @field_validator("folder_overrides", mode="after")
    @classmethod
    def expand_overrides(
        cls, value: dict[WellKnownFolder, Path]
    ) -> dict[WellKnownFolder, Path]:
        return {kind: path.expanduser() for kind, path in value.items()}


def load_settings(environ: Mapping[str, str] | None = None) -> WaypathSettings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Validated settings; unset variables keep their defaults

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    env = os.environ if environ is None else environ

    values: dict[str, object] = {
        "debug": env.get(ENV_DEBUG, "").strip().lower() in TRUTHY_VALUES,
    }

    max_attempts = env.get(ENV_MAX_RENAME_ATTEMPTS)
    if max_attempts:
        values["max_rename_attempts"] = max_attempts

    platform = env.get(ENV_PLATFORM)
    if platform:
        values["platform_family"] = platform

    overrides: dict[WellKnownFolder, str] = {}
    for kind in WellKnownFolder:
        override = env.get(ENV_FOLDER_DIR_TEMPLATE.format(kind=kind.name))
        if override:
            overrides[kind] = override
    values["folder_overrides"] = overrides

    return WaypathSettings.model_validate(values)


@lru_cache(maxsize=1)
def get_settings() -> WaypathSettings:
    """Return the process-wide settings, read once from the environment."""
    return load_settings()

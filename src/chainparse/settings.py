# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings applied to a parse run, optionally loaded from a YAML file.

Example settings file::

    max-recursion-depth: 200
    trace: false
    require-complete: true
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############


class SettingsError(Exception):
    """Raised when a settings file cannot be read or is invalid."""


class ParserSettings(BaseModel):
    """Options for :func:`chainparse.runner.run`.

    Attributes:
        max_recursion_depth: Maximum nesting of recursive rules. None disables
            the guard, which leaves runaway recursion to Python's own limit.
        trace: Write every parser attempt to the ``chainparse`` logger at
            DEBUG level.
        require_complete: Treat unconsumed input after a successful parse as a
            failure.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    max_recursion_depth: int | None = Field(default=None, alias="max-recursion-depth", gt=0)
    trace: bool = False
    require_complete: bool = Field(default=False, alias="require-complete")


def load_settings(path: Path) -> ParserSettings:
    """Load and validate parser settings from a YAML file.

    An empty file yields the default settings.

    Args:
        path: Path to the settings file.

    Returns:
        A validated ParserSettings instance.

    Raises:
        SettingsError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file '{path}': {exc}") from exc

    return _parse_settings(raw, source_label=str(path))


# ################
# Implementation
# ################


def _parse_settings(text: str, source_label: str = "<string>") -> ParserSettings:
    """Parse settings YAML text into a ParserSettings instance."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"{source_label}: settings must be a YAML mapping")

    try:
        return ParserSettings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings in {source_label}: {exc}") from exc

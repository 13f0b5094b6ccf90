"""Base Pydantic model shared by indicator and tool configurations.

Classes:
    ConfigBaseModel: Base model with strict validation for all configurations

Functions:
    normalize_str: Trim and lower-case enum-like string input
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ConfigBaseModel(BaseModel):
    """Base model for all indicator and tool configurations.

    Uses extra='forbid' so that misspelled properties are rejected when a
    deserialized configuration is read, and populate_by_name so tests and
    callers may use either the Python attribute or its JSON alias.

    Field values are not range checked during model validation; every
    configuration exposes check() which raises ConfigInvalidError.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


def normalize_str(value: Any) -> Any:
    """Trim and lower-case string values, leaving anything else untouched."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


__all__ = ["ConfigBaseModel", "normalize_str"]

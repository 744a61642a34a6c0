"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, resolution.toml only contains
overrides.  An empty (or missing) file gives the default behavior.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """[store] section — location of the backing CSV file, relative to the root."""

    model_config = {"frozen": True}

    directory: str = "files"
    filename: str = "resolutions.csv"


class EditConfig(BaseModel):
    """[edit] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    # Off: edit stores new values as given, without the create-time checks.
    validate_fields: bool = Field(default=False, alias="validate")


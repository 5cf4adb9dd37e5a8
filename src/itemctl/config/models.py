"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``itemctl.toml`` only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class ItemsConfig(BaseModel):
    """[items] section."""

    model_config = {"frozen": True}

    # The build engine joins item lists with ';'.
    separator: str = ";"

    @field_validator("separator")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            msg = "separator must not be empty"
            raise ValueError(msg)
        return value


"""Runtime settings for the wangtiles command line.

Values come from the environment (optionally via a .env file loaded by the
entry point); command line flags override them.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "WANGTILES_"


class TilerSettings(BaseModel):
    """Defaults for a tiling run."""

    model_config = ConfigDict(frozen=True)

    size: int = 4
    max_steps: int | None = Field(default=None, ge=0)
    data_dir: Path = Path("data")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TilerSettings:
        """Build settings from WANGTILES_* variables, ignoring unset or empty ones."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{field_name.upper()}", "").strip()
            if raw:
                values[field_name] = raw
        return cls.model_validate(values)

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from specbench.matchers import EPSILON


class RunConfig(BaseModel):
    """Settings for one suite run.

    Only ``epsilon`` affects matching; the rest shape the report and
    debug logging.
    """

    model_config = ConfigDict(extra="forbid")

    epsilon: float = EPSILON
    verbose: bool = False
    debug_log: str | None = None
    pass_glyph: str = "✓"
    fail_glyph: str = "𝙓"

    @field_validator("epsilon")
    @classmethod
    def epsilon_must_be_positive(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("epsilon must be greater than zero")
        return v

    @field_validator("pass_glyph", "fail_glyph")
    @classmethod
    def glyph_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("glyph must not be empty")
        return v


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"config file {path} must contain a mapping")

    config = RunConfig(**raw)

    # Resolve relative debug log path relative to config file location
    if config.debug_log:
        debug_path = Path(config.debug_log)
        if not debug_path.is_absolute():
            config.debug_log = str((config_dir / debug_path).resolve())

    return config

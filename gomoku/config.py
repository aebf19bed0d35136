from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from dotenv import dotenv_values
from pydantic import BaseModel, Field, field_validator

from gomoku.core.board import Marker

ENV_PREFIX = "GOMOKU_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

OpponentKind = Literal["random", "human"]


class GameSettings(BaseModel):
    rows: int = Field(10, ge=1)
    cols: int = Field(10, ge=1)
    first_marker: Marker = Marker.X
    # Who plays the second marker in the console game.
    opponent: OpponentKind = "random"
    seed: int | None = None
    log_level: str = "WARNING"

    @field_validator("first_marker", mode="before")
    @classmethod
    def _marker_upper(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level


def load_settings(environ: Mapping[str, str] | None = None, *, dotenv_path: Path | None = None) -> GameSettings:
    """Build settings from `GOMOKU_*` variables.

    Values from a `.env` file (cwd by default) fill in anything the real
    environment does not set; they never override it.
    """

    env_path = dotenv_path if dotenv_path is not None else Path.cwd() / ".env"
    merged: dict[str, str | None] = {}
    if env_path.exists():
        merged.update(dotenv_values(env_path))
    merged.update(os.environ if environ is None else environ)

    raw: dict[str, str] = {}
    for field_name in GameSettings.model_fields:
        value = merged.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value is not None and value.strip():
            raw[field_name] = value.strip()

    return GameSettings.model_validate(raw)

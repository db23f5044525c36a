"""Library settings using pydantic-settings with an env prefix."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class EFTSettings(BaseSettings):
    """Defaults for EFT file generation, overridable through EFTGEN_* variables."""

    model_config = {"env_prefix": "EFTGEN_"}

    profile: str = "cpa005"  # destination-bank layout, see formats.cpa005.profiles
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    fail_on_warnings: bool = False

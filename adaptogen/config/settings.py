"""Runtime settings for the parser registry."""

import os
from enum import Enum
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import CONFLICT_POLICY_ENV_VAR, DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


class ConflictPolicy(str, Enum):
    """What happens when two parsers claim the same model identifier."""
    REPLACE = "replace"  # last registration wins
    REJECT = "reject"    # second registration raises ParserConflictError


class RegistrySettings(BaseModel):
    """Registry configuration, usually read from the environment."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    conflict_policy: ConflictPolicy = Field(
        default=ConflictPolicy.REPLACE,
        description="Resolution for duplicate model identifiers"
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Log level used by the CLI")

    @field_validator('conflict_policy', mode='before')
    def normalize_policy(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('log_level')
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RegistrySettings":
        """Build settings from environment variables, ignoring unset ones."""
        if environ is None:
            environ = os.environ

        values = {}
        if environ.get(CONFLICT_POLICY_ENV_VAR):
            values["conflict_policy"] = environ[CONFLICT_POLICY_ENV_VAR]
        if environ.get(LOG_LEVEL_ENV_VAR):
            values["log_level"] = environ[LOG_LEVEL_ENV_VAR]
        return cls(**values)


def load_settings() -> RegistrySettings:
    """Load ``.env`` (if present) and read settings from the environment."""
    load_dotenv()
    return RegistrySettings.from_env()

"""
Configuration for the NIS2 exposure assessment.
Values come from the environment (optionally a .env file).
"""

import os
from dataclasses import dataclass
from typing import Annotated
from dotenv import find_dotenv, load_dotenv
from pydantic import Field, TypeAdapter, ValidationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_BOOL = TypeAdapter(bool)
_DELAY = TypeAdapter(Annotated[float, Field(ge=0, allow_inf_nan=False)])


@dataclass
class AssessmentConfig:
    """Configuration for step navigation and scoring."""
    advance_delay: float = 0.0  # Pause (seconds) before auto-advancing to the next step
    strict_validation: bool = False  # Raise MissingAnswer instead of scoring with fallbacks
    raise_on_invalid: bool = False  # Raise InvalidTransition instead of ignoring the request
    log_level: str = "WARNING"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return _BOOL.validate_python(value.strip())
    except ValidationError:
        return default


def _env_delay(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return _DELAY.validate_python(value.strip())
    except ValidationError:
        return default


def _env_log_level(name: str, default: str) -> str:
    value = os.getenv(name, "").strip().upper()
    return value if value in LOG_LEVELS else default


def load_config() -> AssessmentConfig:
    """
    Build an AssessmentConfig from environment variables.

    Reads ASSESSMENT_ADVANCE_DELAY, ASSESSMENT_STRICT, ASSESSMENT_RAISE_ON_INVALID
    and ASSESSMENT_LOG_LEVEL. Unparseable values fall back to the defaults.
    """
    load_dotenv(find_dotenv(usecwd=True))
    return AssessmentConfig(
        advance_delay=_env_delay("ASSESSMENT_ADVANCE_DELAY", 0.3),
        strict_validation=_env_bool("ASSESSMENT_STRICT", False),
        raise_on_invalid=_env_bool("ASSESSMENT_RAISE_ON_INVALID", False),
        log_level=_env_log_level("ASSESSMENT_LOG_LEVEL", "WARNING"),
    )

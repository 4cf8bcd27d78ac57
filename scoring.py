"""
Tier calculation for the NIS2 exposure assessment.

Each answer category adds points to a total score, which is then bucketed
into one of three exposure tiers:

    entity size            large 3, medium 2, otherwise 1
    service sensitivity    high 3, medium 2, otherwise 1
    infrastructure risk    cloud +1, no MFA +2, no incident process +2,
                           supply chain +1, capped at 3
    governance maturity    none +2, basic +1, structured -1, iso -2, otherwise 0

    total >= 6 -> High, total >= 4 -> Medium, otherwise Low
"""

import logging
from enum import IntEnum
from typing import List
from pydantic import BaseModel, ConfigDict

from models import AnswerSet, ENTITY_SIZES, SERVICE_SENSITIVITIES

logger = logging.getLogger(__name__)

INFRASTRUCTURE_CAP = 3
HIGH_THRESHOLD = 6
MEDIUM_THRESHOLD = 4

ENTITY_SIZE_POINTS = {"large": 3, "medium": 2}
SERVICE_SENSITIVITY_POINTS = {"high": 3, "medium": 2}
GOVERNANCE_POINTS = {
    "none": 2,
    "basic": 1,
    "structured": -1,
    "iso": -2,
    "iso27001": -2,
}


class Tier(IntEnum):
    """Exposure tiers, ordered from lowest to highest severity."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def style(self) -> str:
        """Badge style key, e.g. "tier-3"."""
        return f"tier-{self.value}"


class MissingAnswer(Exception):
    """Raised in strict mode when an answer is unset or not a known value."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__(f"Missing or unrecognized answers: {', '.join(fields)}")


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    entity_size: int
    service_sensitivity: int
    infrastructure_raw: int
    infrastructure: int
    governance: int

    @property
    def total(self) -> int:
        return self.entity_size + self.service_sensitivity + self.infrastructure + self.governance


def _points(table, value, fallback: int) -> int:
    # Non-string answers (or unhashable ones) never match a table entry
    if isinstance(value, str):
        return table.get(value, fallback)
    return fallback


def _is_known(value, known) -> bool:
    return isinstance(value, str) and value in known


def _warn_unrecognized(field: str, value, known) -> None:
    if value is not None and not _is_known(value, known):
        logger.warning("Unrecognized %s %r, scoring with fallback weight", field, value)


KNOWN_VALUES = {
    "entity_size": ENTITY_SIZES,
    "service_sensitivity": SERVICE_SENSITIVITIES,
    "governance_maturity": GOVERNANCE_POINTS,
}


def invalid_answers(answers: AnswerSet) -> List[str]:
    """Categorical fields that are unset, followed by those holding a value outside their options."""
    unrecognized = [
        name
        for name, known in KNOWN_VALUES.items()
        if getattr(answers, name) is not None and not _is_known(getattr(answers, name), known)
    ]
    return answers.missing_fields() + unrecognized


def check_answers(answers: AnswerSet) -> None:
    """Raise MissingAnswer unless every categorical answer is set to a known value."""
    invalid = invalid_answers(answers)
    if invalid:
        raise MissingAnswer(invalid)


def infrastructure_risk(answers: AnswerSet) -> int:
    """Uncapped infrastructure risk points."""
    infra = answers.digital_infrastructure
    risk = 0
    if infra.cloud:
        risk += 1
    if not infra.mfa:
        risk += 2  # Lack of MFA is high risk
    if not infra.incident_process:
        risk += 2
    if infra.supply_chain:
        risk += 1
    return risk


def score_answers(answers: AnswerSet) -> ScoreBreakdown:
    """Per-category points for an answer set. Never raises on unknown values."""
    for name, known in KNOWN_VALUES.items():
        _warn_unrecognized(name, getattr(answers, name), known)

    raw = infrastructure_risk(answers)
    breakdown = ScoreBreakdown(
        entity_size=_points(ENTITY_SIZE_POINTS, answers.entity_size, 1),
        service_sensitivity=_points(SERVICE_SENSITIVITY_POINTS, answers.service_sensitivity, 1),
        infrastructure_raw=raw,
        infrastructure=min(raw, INFRASTRUCTURE_CAP),
        governance=_points(GOVERNANCE_POINTS, answers.governance_maturity, 0),
    )
    logger.debug("Score breakdown: %s total=%d", breakdown, breakdown.total)
    return breakdown


def tier_for_score(total: int) -> Tier:
    if total >= HIGH_THRESHOLD:
        return Tier.HIGH
    if total >= MEDIUM_THRESHOLD:
        return Tier.MEDIUM
    return Tier.LOW


def calculate_tier(answers: AnswerSet, strict: bool = False) -> Tier:
    """
    Map a completed answer set to its exposure tier.

    Args:
        answers: The collected answers.
        strict: If True, raise MissingAnswer for unset or unrecognized
                categorical answers instead of using the fallback weights.
    """
    if strict:
        check_answers(answers)
    return tier_for_score(score_answers(answers).total)

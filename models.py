from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# -----------------------
# Answer values
# -----------------------

ENTITY_SIZES = ("small", "medium", "large")
SERVICE_SENSITIVITIES = ("low", "medium", "high")
GOVERNANCE_LEVELS = ("none", "basic", "structured", "iso")
CATEGORICAL_FIELDS = ("entity_size", "service_sensitivity", "governance_maturity")


class DigitalInfrastructure(BaseModel):
    # Accepts snake_case or camelCase keys (incidentProcess); anything else is an error
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    cloud: bool = False
    mfa: bool = False
    incident_process: bool = False
    supply_chain: bool = False


class AnswerSet(BaseModel):
    """
    Answers collected by the questionnaire.

    Categorical fields are plain strings so that unexpected values are kept
    and scored with the fallback weights instead of being rejected.
    """
    entity_size: Optional[str] = None
    service_sensitivity: Optional[str] = None
    digital_infrastructure: DigitalInfrastructure = Field(default_factory=DigitalInfrastructure)
    governance_maturity: Optional[str] = None

    def missing_fields(self) -> List[str]:
        """Names of the categorical answers that are still unset."""
        return [name for name in CATEGORICAL_FIELDS if getattr(self, name) is None]

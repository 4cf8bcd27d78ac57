"""
Step state machine for the NIS2 exposure questionnaire.

Steps 1, 2 and 4 take a single choice, step 3 takes the four infrastructure
flags, and step 5 shows the result. Each instance owns its own answers, so
several assessments can run side by side.
"""

import logging
import time
from typing import Callable, Dict, Mapping, Optional, Union
from pydantic import BaseModel, ConfigDict

from config import AssessmentConfig
from models import AnswerSet, DigitalInfrastructure
from scoring import ScoreBreakdown, Tier, check_answers, score_answers, tier_for_score
from tier_content import TierContent, tier_content

logger = logging.getLogger(__name__)

FIRST_STEP = 1
INFRASTRUCTURE_STEP = 3
RESULT_STEP = 5

# Step -> AnswerSet field for the single-choice steps
SINGLE_ANSWER_FIELDS = {
    1: "entity_size",
    2: "service_sensitivity",
    4: "governance_maturity",
}


class InvalidTransition(Exception):
    """Raised when an operation is requested for a step that is not active."""

    def __init__(self, operation: str, step: int):
        self.operation = operation
        self.step = step
        super().__init__(f"{operation} is not allowed at step {step}")


class AssessmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    tier: Tier
    breakdown: ScoreBreakdown
    content: TierContent


class AssessmentView:
    """
    Presentation side of the assessment. The state machine calls these hooks;
    subclasses override the ones they need.
    """

    def show_step(self, step: int) -> None:
        pass

    def show_selection(self, step: int, value: str) -> None:
        pass

    def show_result(self, result: AssessmentResult) -> None:
        pass

    def reset(self) -> None:
        pass


class AssessmentStateMachine:
    def __init__(
        self,
        view: Optional[AssessmentView] = None,
        config: Optional[AssessmentConfig] = None,
        delay: Callable[[float], None] = time.sleep,
    ):
        self.config = config or AssessmentConfig()
        self.view = view or AssessmentView()
        self._delay = delay
        self.step = FIRST_STEP
        self.answers = AnswerSet()
        self.selections: Dict[int, str] = {}
        self.result: Optional[AssessmentResult] = None

    def _reject(self, operation: str) -> bool:
        if self.config.raise_on_invalid:
            raise InvalidTransition(operation, self.step)
        logger.warning("Ignoring %s at step %d", operation, self.step)
        return False

    def _go_to_step(self, step: int) -> None:
        logger.debug("Step %d -> %d", self.step, step)
        self.step = step
        self.view.show_step(step)

    def _pause(self) -> None:
        if self.config.advance_delay > 0:
            self._delay(self.config.advance_delay)

    def _finish(self) -> None:
        if self.config.strict_validation:
            check_answers(self.answers)
        breakdown = score_answers(self.answers)
        tier = tier_for_score(breakdown.total)
        self.result = AssessmentResult(tier=tier, breakdown=breakdown, content=tier_content(tier))
        logger.info("Assessment complete: tier=%s score=%d", tier.name, breakdown.total)
        self.view.show_result(self.result)
        self._go_to_step(RESULT_STEP)

    def select_single_answer(self, step: int, value: str) -> bool:
        """
        Record the choice for step 1, 2 or 4 and move on.

        Completing step 4 calculates the tier and shows the result.
        Returns False if the request was ignored.
        """
        if step != self.step or step not in SINGLE_ANSWER_FIELDS:
            return self._reject(f"select_single_answer({step})")

        setattr(self.answers, SINGLE_ANSWER_FIELDS[step], value)
        self.selections[step] = value
        self.view.show_selection(step, value)
        self._pause()

        if step == 4:
            self._finish()
        else:
            self._go_to_step(step + 1)
        return True

    def record_infrastructure_flags(
        self, flags: Union[DigitalInfrastructure, Mapping[str, bool]]
    ) -> bool:
        """
        Replace all four infrastructure flags and move to step 4.

        Unknown flag names raise pydantic's ValidationError before anything
        is recorded.
        """
        if self.step != INFRASTRUCTURE_STEP:
            return self._reject("record_infrastructure_flags")

        if isinstance(flags, DigitalInfrastructure):
            infrastructure = flags.model_copy()
        else:
            infrastructure = DigitalInfrastructure.model_validate(dict(flags))
        self.answers.digital_infrastructure = infrastructure
        self._go_to_step(INFRASTRUCTURE_STEP + 1)
        return True

    def go_back(self) -> bool:
        """Return to the previous step, keeping the answers given so far."""
        if self.step <= FIRST_STEP:
            return self._reject("go_back")
        if self.step == RESULT_STEP:
            self.result = None
        self._go_to_step(self.step - 1)
        return True

    def restart(self) -> None:
        """Discard all answers and start again at step 1."""
        self.answers = AnswerSet()
        self.selections = {}
        self.result = None
        self.view.reset()
        self._go_to_step(FIRST_STEP)

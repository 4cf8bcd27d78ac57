"""
Tests for the assessment step state machine.
Run with: pytest test_assessment.py
"""

import pytest
from pydantic import ValidationError

from assessment import AssessmentStateMachine, AssessmentView, InvalidTransition
from config import AssessmentConfig
from models import AnswerSet, DigitalInfrastructure
from scoring import MissingAnswer, Tier


class RecordingView(AssessmentView):
    def __init__(self):
        self.events = []

    def show_step(self, step):
        self.events.append(("step", step))

    def show_selection(self, step, value):
        self.events.append(("selection", step, value))

    def show_result(self, result):
        self.events.append(("result", result.tier))

    def reset(self):
        self.events.append(("reset",))


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def machine(view):
    return AssessmentStateMachine(view=view, config=AssessmentConfig())


@pytest.fixture
def strict_machine():
    return AssessmentStateMachine(config=AssessmentConfig(raise_on_invalid=True))


def complete(machine, size="large", sensitivity="high", flags=None, governance="none"):
    machine.select_single_answer(1, size)
    machine.select_single_answer(2, sensitivity)
    machine.record_infrastructure_flags(flags or {})
    machine.select_single_answer(4, governance)


class TestForwardTransitions:
    def test_initial_state(self, machine):
        assert machine.step == 1
        assert machine.answers == AnswerSet()
        assert machine.result is None

    def test_select_entity_size_advances(self, machine, view):
        assert machine.select_single_answer(1, "large") is True
        assert machine.step == 2
        assert machine.answers.entity_size == "large"
        assert machine.selections == {1: "large"}
        assert view.events == [("selection", 1, "large"), ("step", 2)]

    def test_record_flags_replaces_all_flags(self, machine):
        machine.select_single_answer(1, "small")
        machine.select_single_answer(2, "low")
        assert machine.record_infrastructure_flags({"cloud": True, "mfa": True}) is True
        assert machine.step == 4
        assert machine.answers.digital_infrastructure == DigitalInfrastructure(cloud=True, mfa=True)

    def test_record_flags_rejects_unknown_flag(self, machine):
        machine.select_single_answer(1, "small")
        machine.select_single_answer(2, "low")
        with pytest.raises(ValidationError):
            machine.record_infrastructure_flags({"mfa": True, "incidentProces": True})
        assert machine.step == 3
        assert machine.answers.digital_infrastructure == DigitalInfrastructure()

    def test_record_flags_accepts_camel_case_names(self, machine):
        machine.select_single_answer(1, "small")
        machine.select_single_answer(2, "low")
        machine.record_infrastructure_flags({"mfa": True, "incidentProcess": True, "supplyChain": False})
        assert machine.answers.digital_infrastructure == DigitalInfrastructure(mfa=True, incident_process=True)
        machine.select_single_answer(4, "iso")
        assert machine.result.breakdown.total == 0

    def test_record_flags_accepts_model(self, machine):
        machine.select_single_answer(1, "small")
        machine.select_single_answer(2, "low")
        flags = DigitalInfrastructure(supply_chain=True)
        machine.record_infrastructure_flags(flags)
        flags.cloud = True
        assert machine.answers.digital_infrastructure == DigitalInfrastructure(supply_chain=True)

    def test_completing_step_four_shows_result(self, machine, view):
        complete(machine)
        assert machine.step == 5
        assert machine.result.tier == Tier.HIGH
        assert machine.result.breakdown.total == 11
        assert machine.result.content.obligations
        # result is delivered before the result step is shown
        assert view.events[-2:] == [("result", Tier.HIGH), ("step", 5)]

    def test_advance_delay_is_applied(self, view):
        pauses = []
        machine = AssessmentStateMachine(
            view=view, config=AssessmentConfig(advance_delay=0.3), delay=pauses.append
        )
        complete(machine)
        assert pauses == [0.3, 0.3, 0.3]

    def test_zero_delay_skips_pause(self, machine):
        machine._delay = lambda seconds: pytest.fail("delay called")
        complete(machine)
        assert machine.step == 5


class TestRejectedTransitions:
    def test_flags_rejected_at_step_one(self, machine):
        assert machine.record_infrastructure_flags({"cloud": True}) is False
        assert machine.step == 1
        assert machine.answers == AnswerSet()

    def test_single_answer_rejected_at_step_three(self, machine):
        machine.select_single_answer(1, "small")
        machine.select_single_answer(2, "low")
        assert machine.select_single_answer(3, "anything") is False
        assert machine.select_single_answer(4, "iso") is False
        assert machine.step == 3
        assert machine.answers.governance_maturity is None

    def test_answer_for_other_step_rejected(self, machine):
        assert machine.select_single_answer(2, "high") is False
        assert machine.answers.service_sensitivity is None

    def test_rejection_logs_warning(self, machine, caplog):
        machine.go_back()
        assert "Ignoring go_back at step 1" in caplog.text

    def test_raise_on_invalid(self, strict_machine):
        with pytest.raises(InvalidTransition) as excinfo:
            strict_machine.record_infrastructure_flags({})
        assert excinfo.value.step == 1
        assert excinfo.value.operation == "record_infrastructure_flags"
        assert strict_machine.step == 1

    def test_nothing_accepted_after_result_except_navigation(self, strict_machine):
        complete(strict_machine)
        with pytest.raises(InvalidTransition):
            strict_machine.select_single_answer(4, "iso")
        assert strict_machine.answers.governance_maturity == "none"


class TestGoBack:
    def test_go_back_at_step_one_is_noop(self, machine):
        assert machine.go_back() is False
        assert machine.step == 1

    def test_go_back_at_step_one_raises_when_configured(self, strict_machine):
        with pytest.raises(InvalidTransition):
            strict_machine.go_back()

    def test_go_back_keeps_answers(self, machine):
        machine.select_single_answer(1, "medium")
        machine.select_single_answer(2, "high")
        assert machine.go_back() is True
        assert machine.step == 2
        assert machine.answers.entity_size == "medium"
        assert machine.answers.service_sensitivity == "high"

    def test_reanswering_overwrites(self, machine):
        machine.select_single_answer(1, "medium")
        machine.go_back()
        machine.select_single_answer(1, "small")
        assert machine.answers.entity_size == "small"
        assert machine.selections[1] == "small"
        assert machine.step == 2

    def test_go_back_from_result_drops_result(self, machine):
        complete(machine)
        assert machine.go_back() is True
        assert machine.step == 4
        assert machine.result is None
        machine.select_single_answer(4, "iso")
        # 3 + 3 + 3 - 2 = 7
        assert machine.result.tier == Tier.HIGH
        assert machine.result.breakdown.governance == -2


class TestRestart:
    @pytest.mark.parametrize("steps_done", [0, 1, 2, 3, 4])
    def test_restart_from_any_step(self, machine, view, steps_done):
        actions = [
            lambda: machine.select_single_answer(1, "large"),
            lambda: machine.select_single_answer(2, "high"),
            lambda: machine.record_infrastructure_flags({"cloud": True}),
            lambda: machine.select_single_answer(4, "basic"),
        ]
        for action in actions[:steps_done]:
            action()
        machine.restart()
        assert machine.step == 1
        assert machine.answers == AnswerSet()
        assert machine.selections == {}
        assert machine.result is None
        assert view.events[-2:] == [("reset",), ("step", 1)]

    def test_instances_are_independent(self):
        first = AssessmentStateMachine()
        second = AssessmentStateMachine()
        first.select_single_answer(1, "large")
        assert second.answers.entity_size is None
        assert second.step == 1


class TestScoringIntegration:
    def test_low_tier_run(self, machine):
        complete(machine, "small", "low", {"mfa": True, "incident_process": True}, "iso")
        assert machine.result.tier == Tier.LOW
        assert machine.result.content.label == "Beperkte Blootstelling"

    def test_medium_tier_run(self, machine):
        complete(machine, "medium", "medium", {"mfa": True, "incident_process": True}, "basic")
        assert machine.result.tier == Tier.MEDIUM

    def test_unrecognized_value_scored_with_fallback(self, machine):
        complete(machine, "gigantic", "low", {"mfa": True, "incident_process": True}, "iso")
        assert machine.result.breakdown.entity_size == 1
        assert machine.result.tier == Tier.LOW

    def test_fallback_warning_logged_once(self, machine, caplog):
        complete(machine, "gigantic", "low", {"mfa": True}, "iso")
        warnings = [record for record in caplog.records if "gigantic" in record.getMessage()]
        assert len(warnings) == 1

    def test_strict_validation_raises_before_result(self):
        machine = AssessmentStateMachine(config=AssessmentConfig(strict_validation=True))
        with pytest.raises(MissingAnswer):
            complete(machine, governance="certified")
        assert machine.step == 4
        assert machine.result is None

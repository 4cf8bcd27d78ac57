"""
Console version of the NIS2 exposure assessment.
Run with: python text_mode.py
"""

import logging
import sys
from typing import Callable, Dict, Optional

from assessment import (
    AssessmentResult,
    AssessmentStateMachine,
    AssessmentView,
    FIRST_STEP,
    INFRASTRUCTURE_STEP,
    RESULT_STEP,
)
from config import AssessmentConfig, load_config
from questionnaire import questionnaire
from tier_content import result_sections, tier_badge

BACK = "t"
RESTART = "o"


class TextAssessmentView(AssessmentView):
    """Prints the assessment to the console."""

    def show_step(self, step: int) -> None:
        if step == RESULT_STEP:
            return
        info = questionnaire[step]
        print(f"\n--- Stap {step} van 4: {info['title']} ---")
        print(info["question"])
        for number, label in enumerate(info.get("options", {}).values(), start=1):
            print(f"  {number}. {label}")

    def show_selection(self, step: int, value: str) -> None:
        label = questionnaire[step]["options"].get(value, value)
        print(f"Keuze vastgelegd: {label}")

    def show_result(self, result: AssessmentResult) -> None:
        label, _ = tier_badge(result.tier)
        print(f"\n=== Resultaat: {label} (score {result.breakdown.total}) ===")
        for section in result_sections(result.content):
            print(f"\n{section.heading}")
            for paragraph in section.paragraphs:
                print(paragraph)
            for number, item in enumerate(section.items, start=1):
                print(f"  {number}. {item}")

    def reset(self) -> None:
        print("\nNieuwe beoordeling gestart.")


def _ask_choice(machine: AssessmentStateMachine, input_fn: Callable[[str], str]) -> None:
    options = list(questionnaire[machine.step]["options"])
    answer = input_fn(f"Uw keuze (1-{len(options)}, {BACK} = terug): ").strip().lower()
    if answer == BACK:
        _go_back(machine)
        return
    if not answer.isdigit() or not 1 <= int(answer) <= len(options):
        print("Ongeldige keuze, probeer opnieuw.")
        return
    machine.select_single_answer(machine.step, options[int(answer) - 1])


def _ask_flags(machine: AssessmentStateMachine, input_fn: Callable[[str], str]) -> None:
    flags: Dict[str, bool] = {}
    for key, label in questionnaire[INFRASTRUCTURE_STEP]["flags"].items():
        answer = input_fn(f"{label}? (j/n, {BACK} = terug): ").strip().lower()
        if answer == BACK:
            _go_back(machine)
            return
        flags[key] = answer.startswith("j")
    machine.record_infrastructure_flags(flags)


def _go_back(machine: AssessmentStateMachine) -> None:
    if machine.step == FIRST_STEP:
        print("U bent al bij de eerste vraag.")
        return
    machine.go_back()


def run_text_assessment(
    input_fn: Callable[[str], str] = input,
    config: Optional[AssessmentConfig] = None,
) -> Optional[AssessmentResult]:
    """
    Run the assessment in the console until the user leaves the result page.

    Returns the last result shown, or None if the user left without one.
    """
    print("=== NIS2 Blootstellingsprotocol (tekstmodus) ===")
    machine = AssessmentStateMachine(view=TextAssessmentView(), config=config)
    machine.view.show_step(machine.step)

    while True:
        if machine.step == RESULT_STEP:
            answer = input_fn(
                f"\n{RESTART} = opnieuw beginnen, {BACK} = terug, Enter = afsluiten: "
            ).strip().lower()
            if answer == RESTART:
                machine.restart()
            elif answer == BACK:
                machine.go_back()
            else:
                return machine.result
        elif machine.step == INFRASTRUCTURE_STEP:
            _ask_flags(machine, input_fn)
        else:
            _ask_choice(machine, input_fn)


if __name__ == "__main__":
    config = load_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        run_text_assessment(config=config)
    except KeyboardInterrupt:
        print("\n\nBeoordeling onderbroken door gebruiker.")
    except Exception as e:
        print(f"\nFout tijdens de beoordeling: {str(e)}")
        sys.exit(1)
    finally:
        print("\nToepassing afgesloten.")

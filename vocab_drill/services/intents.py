from collections.abc import Callable
from enum import Enum

from vocab_drill.services.drill import (
    DrillState,
    next_exercise,
    previous_exercise,
    restart,
    retry,
    submit_answer,
    toggle_meaning,
)


class Intent(str, Enum):
    SUBMIT = "submit"
    NEXT = "next"
    PREVIOUS = "previous"
    RETRY = "retry"
    TOGGLE_MEANING = "toggle_meaning"
    RESTART = "restart"


Transition = Callable[[DrillState], DrillState]

INTENT_HANDLERS: dict[Intent, Transition] = {
    Intent.SUBMIT: submit_answer,
    Intent.NEXT: next_exercise,
    Intent.PREVIOUS: previous_exercise,
    Intent.RETRY: retry,
    Intent.TOGGLE_MEANING: toggle_meaning,
    Intent.RESTART: restart,
}


def _enter_intent(state: DrillState) -> Intent:
    return Intent.NEXT if state.attempt.answered else Intent.SUBMIT


KEY_BINDINGS: dict[str, Callable[[DrillState], Intent]] = {
    "Enter": _enter_intent,
    "ArrowRight": lambda _: Intent.NEXT,
    "ArrowLeft": lambda _: Intent.PREVIOUS,
    "r": lambda _: Intent.RETRY,
    "R": lambda _: Intent.RETRY,
}


def dispatch(state: DrillState, intent: Intent) -> DrillState:
    return INTENT_HANDLERS[intent](state)


def resolve_key(state: DrillState, key: str) -> Intent | None:
    binding = KEY_BINDINGS.get(key)
    if binding is None:
        return None
    return binding(state)


def press_key(state: DrillState, key: str) -> DrillState:
    intent = resolve_key(state, key)
    if intent is None:
        return state
    return dispatch(state, intent)

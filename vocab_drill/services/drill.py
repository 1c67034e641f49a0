"""Drill session state machine.

A session is one frozen ``DrillState`` value. Every transition is a plain
function taking the current state and returning the next one; calls that do
not apply in the current mode return the state unchanged.
"""

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Literal

from vocab_drill.models.exercise import Exercise
from vocab_drill.services.exercise_set import ExerciseSet, build_exercise_set
from vocab_drill.services.score import Score
from vocab_drill.utils.normalize import normalize_answer

logger = logging.getLogger(__name__)

Mode = Literal["loading", "active", "review", "error"]

CORRECT_FEEDBACK = "Correct! 🎉"
PERFECT_REVIEW_MESSAGE = "Perfect score! You've mastered all the vocabulary words! 🎉"
REVIEW_MESSAGE = "Good job! Review the exercises again to improve your score."


def incorrect_feedback(word: str) -> str:
    return f'Not quite. The correct answer is "{word}"'


@dataclass(frozen=True)
class Attempt:
    userAnswer: str = ""
    isCorrect: bool | None = None
    feedbackText: str = ""
    meaningRevealed: bool = False

    @property
    def answered(self) -> bool:
        return self.isCorrect is not None


@dataclass(frozen=True)
class DrillState:
    mode: Mode = "loading"
    exercise_set: ExerciseSet = field(default_factory=ExerciseSet)
    attempt: Attempt = field(default_factory=Attempt)
    score: Score = field(default_factory=Score)
    error: str | None = None

    @property
    def current(self) -> Exercise | None:
        if self.mode not in ("active", "review"):
            return None
        return self.exercise_set.current

    def review_message(self) -> str | None:
        if self.mode != "review":
            return None
        return PERFECT_REVIEW_MESSAGE if self.score.is_perfect() else REVIEW_MESSAGE


def load(state: DrillState, exercises: Sequence[Exercise], rng: random.Random | None = None) -> DrillState:
    exercise_set = build_exercise_set(exercises, rng)
    logger.info("Loaded %d exercises", len(exercise_set))
    return DrillState(mode="active", exercise_set=exercise_set)


def fail_load(state: DrillState, message: str) -> DrillState:
    return DrillState(mode="error", error=message)


def restart(state: DrillState) -> DrillState:
    return DrillState()


def set_answer(state: DrillState, text: str) -> DrillState:
    if state.mode != "active" or state.attempt.answered:
        return state
    return replace(state, attempt=replace(state.attempt, userAnswer=text))


def submit_answer(state: DrillState) -> DrillState:
    exercise = state.current
    if state.mode != "active" or exercise is None:
        return state
    if state.attempt.answered or not state.attempt.userAnswer:
        return state

    is_correct = normalize_answer(exercise.word) == normalize_answer(state.attempt.userAnswer)
    feedback = CORRECT_FEEDBACK if is_correct else incorrect_feedback(exercise.word)
    return replace(
        state,
        attempt=replace(state.attempt, isCorrect=is_correct, feedbackText=feedback),
        score=state.score.record(is_correct),
    )


def next_exercise(state: DrillState) -> DrillState:
    if state.mode != "active" or len(state.exercise_set) == 0:
        return state
    if state.exercise_set.is_last:
        logger.info("Reached review with score %d/%d", state.score.correct, state.score.total)
        return replace(state, mode="review")
    return replace(state, exercise_set=state.exercise_set.advance(), attempt=Attempt())


def previous_exercise(state: DrillState) -> DrillState:
    # Score is kept: re-answering a revisited exercise counts again.
    if state.mode != "active" or state.exercise_set.cursor <= 0:
        return state
    return replace(state, exercise_set=state.exercise_set.back(), attempt=Attempt())


def retry(state: DrillState) -> DrillState:
    if state.mode != "active":
        return state
    return replace(state, attempt=Attempt())


def toggle_meaning(state: DrillState) -> DrillState:
    if state.mode != "active":
        return state
    return replace(state, attempt=replace(state.attempt, meaningRevealed=not state.attempt.meaningRevealed))

import random
from collections.abc import Sequence
from dataclasses import dataclass, replace

from vocab_drill.models.exercise import Exercise


@dataclass(frozen=True)
class ExerciseSet:
    exercises: tuple[Exercise, ...] = ()
    cursor: int = 0

    def __len__(self) -> int:
        return len(self.exercises)

    @property
    def current(self) -> Exercise | None:
        if 0 <= self.cursor < len(self.exercises):
            return self.exercises[self.cursor]
        return None

    @property
    def is_last(self) -> bool:
        return len(self.exercises) > 0 and self.cursor == len(self.exercises) - 1

    def advance(self) -> "ExerciseSet":
        if self.cursor >= len(self.exercises) - 1:
            return self
        return replace(self, cursor=self.cursor + 1)

    def back(self) -> "ExerciseSet":
        if self.cursor <= 0:
            return self
        return replace(self, cursor=self.cursor - 1)

    def progress_percent(self) -> float:
        if not self.exercises:
            return 0.0
        return (self.cursor + 1) / len(self.exercises) * 100


def build_exercise_set(exercises: Sequence[Exercise], rng: random.Random | None = None) -> ExerciseSet:
    shuffled = list(exercises)
    (rng or random).shuffle(shuffled)
    return ExerciseSet(exercises=tuple(shuffled), cursor=0)

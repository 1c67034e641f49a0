import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Score:
    correct: int = 0
    total: int = 0

    def record(self, is_correct: bool) -> "Score":
        return Score(correct=self.correct + (1 if is_correct else 0), total=self.total + 1)

    def percentage(self) -> int:
        if self.total == 0:
            return 0
        # Halves round up, like Math.round in the browser.
        return int(math.floor(100 * self.correct / self.total + 0.5))

    def is_perfect(self) -> bool:
        return self.total > 0 and self.correct == self.total

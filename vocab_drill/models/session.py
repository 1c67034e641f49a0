from pydantic import BaseModel, Field

from vocab_drill.services.drill import DrillState, Mode


class AnswerUpdate(BaseModel):
    userAnswer: str = ""


class KeyPress(BaseModel):
    key: str = Field(min_length=1)


class ExerciseOut(BaseModel):
    id: str | None
    sentence: str | None
    hint: str | None
    blankedWord: str | None
    pronunciation: str | None = None
    meaning: str | None = None


class AttemptOut(BaseModel):
    userAnswer: str
    isCorrect: bool | None
    feedbackText: str
    meaningRevealed: bool


class ScoreOut(BaseModel):
    correct: int
    total: int
    percentage: int


class SessionOut(BaseModel):
    id: str
    mode: Mode
    error: str | None
    cursor: int
    length: int
    exercise: ExerciseOut | None
    attempt: AttemptOut
    score: ScoreOut
    progressPercent: float
    reviewMessage: str | None


class SessionDeleted(BaseModel):
    deleted: bool


def session_to_out(session_id: str, state: DrillState) -> SessionOut:
    exercise = state.current
    attempt = state.attempt
    exercise_out = None
    if exercise is not None:
        exercise_out = ExerciseOut(
            id=exercise.id,
            sentence=exercise.sentence,
            hint=exercise.hint,
            blankedWord=exercise.blankedWord,
            pronunciation=exercise.pronunciation if attempt.meaningRevealed else None,
            meaning=exercise.meaning if attempt.meaningRevealed else None,
        )
    return SessionOut(
        id=session_id,
        mode=state.mode,
        error=state.error,
        cursor=state.exercise_set.cursor,
        length=len(state.exercise_set),
        exercise=exercise_out,
        attempt=AttemptOut(
            userAnswer=attempt.userAnswer,
            isCorrect=attempt.isCorrect,
            feedbackText=attempt.feedbackText,
            meaningRevealed=attempt.meaningRevealed,
        ),
        score=ScoreOut(
            correct=state.score.correct,
            total=state.score.total,
            percentage=state.score.percentage(),
        ),
        progressPercent=round(state.exercise_set.progress_percent(), 2),
        reviewMessage=state.review_message(),
    )

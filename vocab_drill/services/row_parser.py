from collections.abc import Iterable, Sequence
from typing import Any

from vocab_drill.models.exercise import Exercise
from vocab_drill.utils.normalize import after_first_line_break, cell_text

COL_ID = 0
COL_PRONUNCIATION = 2
COL_MEANING = 3
COL_EXAMPLE = 4
COL_WORD = 5
COL_BLANKED_WORD = 6
COL_HINT = 7
COL_QUESTION = 8


def _cell(row: Sequence[Any], index: int) -> str | None:
    if index >= len(row):
        return None
    return cell_text(row[index])


def derive_sentence(question: str | None, example: str | None) -> str | None:
    """Pick the prompt sentence for a row.

    The question cell may carry a label on its first line; only the text after
    the first line break is the prompt. An empty result falls back to the
    example cell.
    """
    sentence = question
    if question:
        remainder = after_first_line_break(question)
        if remainder is not None:
            sentence = remainder
    return sentence or example


def row_to_exercise(row: Sequence[Any]) -> Exercise:
    return Exercise(
        id=_cell(row, COL_ID),
        word=_cell(row, COL_WORD) or "",
        hint=_cell(row, COL_HINT),
        sentence=derive_sentence(_cell(row, COL_QUESTION), _cell(row, COL_EXAMPLE)),
        blankedWord=_cell(row, COL_BLANKED_WORD),
        meaning=_cell(row, COL_MEANING),
        pronunciation=_cell(row, COL_PRONUNCIATION),
    )


def parse_rows(rows: Iterable[Sequence[Any]]) -> list[Exercise]:
    exercises: list[Exercise] = []
    for index, row in enumerate(rows):
        if index == 0:
            continue
        if len(row) == 0:
            continue
        exercises.append(row_to_exercise(row))
    return exercises

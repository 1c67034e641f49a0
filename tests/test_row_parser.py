"""Unit tests for turning spreadsheet rows into exercises."""

from conftest import make_row

from vocab_drill.services.row_parser import derive_sentence, parse_rows, row_to_exercise


class TestDeriveSentence:
    """Tests for prompt sentence selection."""

    def test_question_without_line_break_is_verbatim(self):
        assert derive_sentence("The ___ sat on the mat.", "example") == "The ___ sat on the mat."

    def test_text_after_first_crlf(self):
        assert derive_sentence("Label\r\nThe ___ sat.", "example") == "The ___ sat."

    def test_text_after_first_lf(self):
        assert derive_sentence("Label\nThe ___ sat.", "example") == "The ___ sat."

    def test_keeps_everything_after_the_first_break(self):
        assert derive_sentence("Label\r\nLine one\r\nLine two", None) == "Line one\r\nLine two"

    def test_empty_after_break_falls_back_to_example(self):
        assert derive_sentence("Label\r\n", "The cat sat.") == "The cat sat."

    def test_missing_question_falls_back_to_example(self):
        assert derive_sentence(None, "The cat sat.") == "The cat sat."
        assert derive_sentence("", "The cat sat.") == "The cat sat."

    def test_both_missing(self):
        assert derive_sentence(None, None) is None


class TestRowToExercise:
    """Tests for positional column mapping."""

    def test_maps_columns_by_position(self):
        exercise = row_to_exercise(make_row())

        assert exercise.id == "1"
        assert exercise.pronunciation == "/kæt/"
        assert exercise.meaning == "a small domesticated feline"
        assert exercise.word == "cat"
        assert exercise.blankedWord == "c_t"
        assert exercise.hint == "c"
        assert exercise.sentence == "The ___ sat on the mat."

    def test_short_row_leaves_fields_empty(self):
        exercise = row_to_exercise(["7", None, None, "meaning only"])

        assert exercise.id == "7"
        assert exercise.meaning == "meaning only"
        assert exercise.word == ""
        assert exercise.hint is None
        assert exercise.sentence is None

    def test_numeric_cells_become_text(self):
        exercise = row_to_exercise(make_row(id=12, word=2024.0, question=None, example="In ___ it rained."))

        assert exercise.id == "12"
        assert exercise.word == "2024"
        assert exercise.sentence == "In ___ it rained."


class TestParseRows:
    """Tests for whole-sheet parsing."""

    def test_skips_header(self, header):
        exercises = parse_rows([header, make_row()])

        assert len(exercises) == 1
        assert exercises[0].word == "cat"

    def test_skips_rows_with_zero_cells(self, header):
        rows = [header, make_row(id="1"), [], make_row(id="2", word="dog"), []]

        exercises = parse_rows(rows)

        assert [e.id for e in exercises] == ["1", "2"]

    def test_preserves_input_order(self, header):
        words = ["apple", "banana", "cherry", "date"]
        rows = [header] + [make_row(id=str(i), word=w) for i, w in enumerate(words)]

        assert [e.word for e in parse_rows(rows)] == words

    def test_missing_word_is_kept(self, header):
        exercises = parse_rows([header, make_row(word=None)])

        assert len(exercises) == 1
        assert exercises[0].word == ""

    def test_header_only_gives_no_exercises(self, header):
        assert parse_rows([header]) == []
        assert parse_rows([]) == []

"""Shared pytest fixtures for the vocabulary drill test suite."""

import io
import sys
import zipfile
from pathlib import Path

import pytest
from openpyxl import Workbook

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vocab_drill.config import get_settings
from vocab_drill.models.exercise import Exercise
from vocab_drill.services.drill import DrillState
from vocab_drill.services.exercise_set import ExerciseSet
from vocab_drill.services.session_store import get_store

HEADER = [
    "ID",
    "Type",
    "Pronunciation",
    "Meaning",
    "Example",
    "Hidden Word",
    "Blanked Word",
    "First Letters",
    "Question",
]


def make_row(
    id="1",
    pronunciation="/kæt/",
    meaning="a small domesticated feline",
    example="The cat sat on the mat.",
    word="cat",
    blanked="c_t",
    hint="c",
    question="Fill in:\r\nThe ___ sat on the mat.",
) -> list:
    return [id, "noun", pronunciation, meaning, example, word, blanked, hint, question]


def workbook_bytes(rows: list[list]) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def truncate_sheet_xml(data: bytes, member: str = "xl/worksheets/sheet1.xml") -> bytes:
    """Rewrite a workbook with one of its XML parts cut in half."""
    source = zipfile.ZipFile(io.BytesIO(data))
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as target:
        for info in source.infolist():
            content = source.read(info.filename)
            if info.filename == member:
                content = content[: len(content) // 2]
            target.writestr(info.filename, content)
    return buffer.getvalue()


def active_state(exercises: list[Exercise], cursor: int = 0) -> DrillState:
    """Build an active state with a fixed exercise order."""
    return DrillState(mode="active", exercise_set=ExerciseSet(exercises=tuple(exercises), cursor=cursor))


@pytest.fixture
def header() -> list[str]:
    return list(HEADER)


@pytest.fixture
def animal_exercises() -> list[Exercise]:
    """Three exercises in the order dog, cat, bird."""
    return [
        Exercise(id="2", word="dog", hint="d", sentence="The ___ barked."),
        Exercise(id="1", word="cat", hint="c", sentence="The ___ meowed."),
        Exercise(id="3", word="bird", hint="b", sentence="The ___ sang."),
    ]


@pytest.fixture
def animal_state(animal_exercises) -> DrillState:
    return active_state(animal_exercises)


@pytest.fixture
def fresh_store():
    """Reset the cached session store and settings around a test."""
    get_store.cache_clear()
    get_settings.cache_clear()
    yield get_store()
    get_store.cache_clear()
    get_settings.cache_clear()


@pytest.fixture
def client(fresh_store):
    from fastapi.testclient import TestClient

    from vocab_drill.main import app

    return TestClient(app)

from pydantic import BaseModel, ConfigDict


class Exercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    word: str = ""
    hint: str | None = None
    sentence: str | None = None
    blankedWord: str | None = None
    meaning: str | None = None
    pronunciation: str | None = None

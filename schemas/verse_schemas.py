from pydantic import BaseModel, Field


class VerseQuery(BaseModel):
    """Query string of GET /api/verse; every field is required."""
    version: str = Field(..., min_length=1)
    book: str = Field(..., min_length=1)
    chapter: int
    verse: int


class VerseRead(VerseQuery):
    text: str

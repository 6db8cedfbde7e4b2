# ingest/parser.py
import re
from dataclasses import dataclass
from typing import Optional

# <book> <chapter>:<verse> <text>
VERSE_PATTERN = re.compile(r'^(\S+)\s+(\d+):(\d+)\s+(.+)')


@dataclass(frozen=True)
class ParsedVerse:
    book: str
    chapter: int
    verse: int
    text: str


def _to_int(value):
    """Convert a captured number, falling back to 0 instead of rejecting the line"""
    try:
        return int(value)
    except ValueError:
        return 0


def parse_verse_line(line: str) -> Optional[ParsedVerse]:
    """Parse a line like 'Genesis 1:1 In the beginning...' into a ParsedVerse.

    Returns None for blank lines, lines without a colon and lines that do
    not have the book/chapter:verse/text shape. Never raises for malformed
    input.
    """
    if not line or ':' not in line:
        return None

    match = VERSE_PATTERN.match(line)
    if not match:
        return None

    book, chapter, verse, text = match.groups()
    text = text.lstrip()
    if not text:
        return None

    return ParsedVerse(
        book=book,
        chapter=_to_int(chapter),
        verse=_to_int(verse),
        text=text,
    )

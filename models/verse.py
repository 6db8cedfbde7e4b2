from sqlalchemy import Column, Integer, String, Text
from database import Base

VERSES_TABLE = 'bible_verses'


class BibleVerse(Base):
    __tablename__ = VERSES_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    bible_version = Column(String(50), nullable=False)  # E.g., "KJV"
    book = Column(String(50), nullable=False)  # E.g., "Genesis"
    chapter = Column(Integer, nullable=False)
    verse = Column(Integer, nullable=False)
    text = Column(Text, nullable=False)

    def to_json(self):
        return {
            "version": self.bible_version,
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
            "text": self.text,
        }

    def __repr__(self):
        return f'<BibleVerse {self.bible_version} {self.book} {self.chapter}:{self.verse}>'

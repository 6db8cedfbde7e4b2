# ingest/loader.py
import logging
from dataclasses import dataclass
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from models.verse import BibleVerse
from .parser import parse_verse_line

logger = logging.getLogger(__name__)

DEFAULT_VERSION = 'KJV'
PROGRESS_EVERY = 1000


@dataclass
class LoadResult:
    lines_processed: int = 0
    verses_inserted: int = 0
    failed_inserts: int = 0


class BulkLoader:
    """Streams verse lines into the store, one committed insert per verse.

    Every line read counts as processed, blank ones included. A failed
    insert is logged and skipped; the run carries on with the next line.
    """

    def __init__(self, store, version=DEFAULT_VERSION, progress_every=PROGRESS_EVERY):
        self.store = store
        self.version = version
        self.progress_every = progress_every
        # Single prepared INSERT shared by every row
        self._insert_stmt = insert(BibleVerse.__table__)

    def load(self, lines):
        result = LoadResult()

        with self.store.connection() as conn:
            try:
                for raw_line in lines:
                    result.lines_processed += 1
                    line = raw_line.rstrip('\r\n')

                    if line and ':' in line:
                        parsed = parse_verse_line(line)
                        if parsed is not None:
                            if self._insert_verse(conn, parsed):
                                result.verses_inserted += 1
                            else:
                                result.failed_inserts += 1

                    if result.lines_processed % self.progress_every == 0:
                        logger.info(f"Processed {result.lines_processed} lines, "
                                    f"inserted {result.verses_inserted} verses")
            except (OSError, UnicodeDecodeError):
                logger.error(f"Input stopped after {result.lines_processed} lines, "
                             f"inserted {result.verses_inserted} verses")
                raise

        logger.info(f"Finished processing. Total lines: {result.lines_processed}, "
                    f"Total verses inserted: {result.verses_inserted}")
        if result.failed_inserts:
            logger.warning(f"{result.failed_inserts} verses failed to insert")
        return result

    def load_file(self, path, encoding='utf-8'):
        """Load every line of a text file; errors opening or reading it propagate."""
        logger.info(f"Reading verses from: {path}")
        with open(path, 'r', encoding=encoding) as f:
            return self.load(f)

    def _insert_verse(self, conn, parsed):
        params = {
            'bible_version': self.version,
            'book': parsed.book,
            'chapter': parsed.chapter,
            'verse': parsed.verse,
            'text': parsed.text,
        }
        try:
            conn.execute(self._insert_stmt, params)
            conn.commit()
        except (SQLAlchemyError, ValueError) as e:
            # psycopg2 raises a bare ValueError for NUL characters in text
            conn.rollback()
            logger.error(f"Error inserting verse: {e}")
            logger.error(f"Failed to insert: Book: {parsed.book}, "
                         f"Chapter: {parsed.chapter}, Verse: {parsed.verse}")
            return False

        logger.debug(f"Inserted {parsed.book} {parsed.chapter}:{parsed.verse}")
        return True

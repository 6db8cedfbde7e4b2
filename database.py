import logging
from contextlib import contextmanager
from sqlalchemy import create_engine, select, text
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

# Models register themselves on this Base
Base = declarative_base()


class VerseStore:
    """Store client over the verses database.

    One instance is created at process start and handed to every component
    that needs the database; nothing here is process-global.
    """

    def __init__(self, engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @classmethod
    def from_url(cls, database_url, **engine_kwargs):
        logger.info("Initializing database engine...")
        engine = create_engine(database_url, pool_pre_ping=True, **engine_kwargs)
        return cls(engine)

    def ping(self):
        """Run a trivial query; raises SQLAlchemyError when the store is unreachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.debug("Database ping succeeded")

    @contextmanager
    def connection(self):
        """A single connection held for the caller's whole unit of work."""
        with self.engine.connect() as conn:
            yield conn

    @contextmanager
    def session(self):
        """Provide a transactional scope around a series of SQLAlchemy operations."""
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"SQLAlchemy Session Error: {e}")
            raise
        finally:
            db.close()

    def get_verse_text(self, version, book, chapter, verse):
        """Return the text of one verse, or None when no row matches."""
        from models.verse import BibleVerse

        stmt = (
            select(BibleVerse.text)
            .where(
                BibleVerse.bible_version == version,
                BibleVerse.book == book,
                BibleVerse.chapter == chapter,
                BibleVerse.verse == verse,
            )
            .limit(1)
        )
        with self.session() as db:
            return db.execute(stmt).scalar_one_or_none()

    def list_books(self):
        from models.verse import BibleVerse

        stmt = select(BibleVerse.book).distinct().order_by(BibleVerse.book)
        with self.session() as db:
            return list(db.execute(stmt).scalars())

    def dispose(self):
        self.engine.dispose()
        logger.info("Database engine disposed")

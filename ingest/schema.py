# ingest/schema.py
import logging
from sqlalchemy import Column, Integer, MetaData, Table, Text, inspect
from sqlalchemy.exc import SQLAlchemyError

from models.verse import BibleVerse, VERSES_TABLE

logger = logging.getLogger(__name__)

# Throwaway table used only to prove the credential can run DDL and DML.
# It is TEMPORARY, so it disappears with the connection.
_check_metadata = MetaData()
permission_check_table = Table(
    'temp_test', _check_metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('name', Text),
    prefixes=['TEMPORARY'],
)


class ProvisioningError(Exception):
    """Fatal failure while preparing the database for ingestion."""


class SchemaProvisioner:
    def __init__(self, store):
        self.store = store

    def ensure_verses_table(self):
        """Create the verses table unless it already exists.

        Returns True when the table was created, False when it was already
        there. Safe to run any number of times.
        """
        try:
            with self.store.engine.begin() as conn:
                if inspect(conn).has_table(VERSES_TABLE):
                    logger.info(f"{VERSES_TABLE} table already exists")
                    return False
                BibleVerse.__table__.create(conn)
        except SQLAlchemyError as e:
            raise ProvisioningError(f"failed to check or create table {VERSES_TABLE}: {e}") from e

        logger.info(f"Created {VERSES_TABLE} table")
        return True

    def check_permissions(self):
        """Create a temporary table and insert one row into it."""
        try:
            with self.store.engine.begin() as conn:
                permission_check_table.create(conn, checkfirst=True)
                conn.execute(permission_check_table.insert().values(name='test'))
        except SQLAlchemyError as e:
            raise ProvisioningError(f"database permission check failed: {e}") from e

        logger.info("Database permissions verified successfully")

    def provision(self):
        created = self.ensure_verses_table()
        self.check_permissions()
        logger.info("Database connection and table verified successfully")
        return created

# scripts/import_bible_text.py
import argparse
import logging
import sys
from pathlib import Path
from sqlalchemy.exc import SQLAlchemyError

# Add the parent directory to the Python path properly
current_dir = Path(__file__).resolve().parent
backend_dir = current_dir.parent
sys.path.insert(0, str(backend_dir))

from app import configure_logging
from config import Config, ConfigError
from database import VerseStore
from ingest import BulkLoader, SchemaProvisioner, ProvisioningError
from ingest.loader import DEFAULT_VERSION

logger = logging.getLogger('import_bible_text')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Load 'Book Chapter:Verse Text' lines into the bible_verses table")
    parser.add_argument('path', nargs='?', default='bible_text.txt',
                        help="verse text file (default: bible_text.txt)")
    parser.add_argument('--version', dest='bible_version', default=DEFAULT_VERSION,
                        help=f"version label stored with every verse (default: {DEFAULT_VERSION})")
    parser.add_argument('--env-file', default=None,
                        help="environment file with DB_* settings (default: ./.env)")
    parser.add_argument('--verbose', action='store_true',
                        help="log every inserted verse")
    return parser.parse_args(argv)


def import_bible_text(path, store, bible_version=DEFAULT_VERSION):
    """Provision the schema, then stream the file into the store."""
    SchemaProvisioner(store).provision()
    loader = BulkLoader(store, version=bible_version)
    return loader.load_file(path)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = Config.from_env(args.env_file)
        store = VerseStore.from_url(config.database_url)
        store.ping()
        logger.info("Successfully connected to the database")
    except (ConfigError, SQLAlchemyError) as e:
        logger.error(f"Startup failed: {e}")
        return 1

    try:
        import_bible_text(args.path, store, args.bible_version)
    except ProvisioningError as e:
        logger.error(str(e))
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {args.path}: {e}")
        return 1
    finally:
        store.dispose()

    return 0


if __name__ == '__main__':
    sys.exit(main())

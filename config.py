# config.py
import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the environment file or a required setting is missing."""


class Config:
    DEFAULT_DB_PORT = 5432
    DEFAULT_API_PORT = 8080

    def __init__(self, db_host=None, db_port=DEFAULT_DB_PORT, db_user=None,
                 db_password=None, db_name=None, api_port=DEFAULT_API_PORT,
                 database_url=None):
        self.db_host = db_host
        self.db_port = int(db_port)
        self.db_user = db_user
        self.db_password = db_password
        self.db_name = db_name
        self.api_port = int(api_port)
        self._database_url = database_url

    @classmethod
    def from_env(cls, env_file=None):
        """Load settings from an env file into the process environment.

        A missing env file is fatal: callers are expected to stop the
        process on ConfigError.
        """
        env_path = Path(env_file) if env_file else Path.cwd() / '.env'
        if not env_path.is_file():
            raise ConfigError(f"Error loading .env file: {env_path} not found")

        load_dotenv(env_path)
        logger.info(f"Loaded environment from {env_path}")

        return cls(
            db_host=os.getenv('DB_HOST'),
            db_port=os.getenv('DB_PORT') or cls.DEFAULT_DB_PORT,
            db_user=os.getenv('DB_USER'),
            db_password=os.getenv('DB_PASSWORD'),
            db_name=os.getenv('DB_NAME'),
            api_port=os.getenv('API_PORT') or cls.DEFAULT_API_PORT,
            database_url=os.getenv('DATABASE_URL'),
        )

    @property
    def database_url(self):
        # DATABASE_URL wins over the individual DB_* settings
        if self._database_url:
            return self._database_url
        if not self.db_host or not self.db_name:
            raise ConfigError("DB_HOST and DB_NAME must be set")
        return URL.create(
            'postgresql+psycopg2',
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    def __repr__(self):
        return f'<Config db={self.db_host}:{self.db_port}/{self.db_name} api_port={self.api_port}>'

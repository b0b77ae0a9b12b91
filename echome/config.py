"""
Configuration management for the EchoMe backend.
Collects provider keys, connection strings and server settings into a single
object that is handed to each component when the app is built.
"""
import os
from typing import List, Optional

from dotenv import load_dotenv

from .core.errors import ConfigError

DEFAULT_LLM_MODEL = 'llama3-70b-8192'
DEFAULT_PORT = 5000


class AppConfig:
    """Explicit application settings, built once at startup."""

    def __init__(self,
                 llm_api_key: str,
                 llm_base_url: str,
                 database_url: str,
                 jwt_secret: str,
                 llm_model: str = DEFAULT_LLM_MODEL,
                 llm_timeout: float = 60.0,
                 auth_strategy: str = 'local',
                 firebase_project_id: Optional[str] = None,
                 jwt_expiration_days: int = 30,
                 port: int = DEFAULT_PORT,
                 debug: bool = False,
                 log_level: str = 'INFO',
                 log_dir: Optional[str] = None,
                 cors_origins: Optional[List[str]] = None):
        self.llm_api_key = llm_api_key
        self.llm_base_url = llm_base_url.rstrip('/')
        self.database_url = database_url
        self.jwt_secret = jwt_secret
        self.llm_model = llm_model
        self.llm_timeout = llm_timeout
        self.auth_strategy = auth_strategy
        self.firebase_project_id = firebase_project_id
        self.jwt_expiration_days = jwt_expiration_days
        self.port = port
        self.debug = debug
        self.log_level = log_level
        self.log_dir = log_dir
        self.cors_origins = cors_origins or ['*']

        if self.auth_strategy not in ('local', 'firebase'):
            raise ConfigError(f"Invalid auth strategy: {self.auth_strategy}")
        if self.auth_strategy == 'firebase' and not self.firebase_project_id:
            raise ConfigError("FIREBASE_PROJECT_ID is required for the firebase auth strategy")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'AppConfig':
        """
        Build the configuration from process environment variables.

        A .env file is loaded first if present. Only the listen port and
        tuning values have defaults; keys and connection strings must be set.

        Raises:
            ConfigError: If a required variable is missing or malformed
        """
        load_dotenv(dotenv_path=env_file)

        required = {
            'GROQ_API_KEY': os.environ.get('GROQ_API_KEY'),
            'LLM_BASE_URL': os.environ.get('LLM_BASE_URL'),
            'DATABASE_URL': os.environ.get('DATABASE_URL'),
            'JWT_SECRET': os.environ.get('JWT_SECRET'),
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")

        origins = os.environ.get('CORS_ORIGINS', '*')

        try:
            port = int(os.environ.get('PORT', str(DEFAULT_PORT)))
            llm_timeout = float(os.environ.get('LLM_TIMEOUT', '60'))
        except ValueError as e:
            raise ConfigError(f"Invalid numeric configuration value: {e}") from e

        return cls(
            llm_api_key=required['GROQ_API_KEY'],
            llm_base_url=required['LLM_BASE_URL'],
            database_url=required['DATABASE_URL'],
            jwt_secret=required['JWT_SECRET'],
            llm_model=os.environ.get('LLM_MODEL', DEFAULT_LLM_MODEL),
            llm_timeout=llm_timeout,
            auth_strategy=os.environ.get('AUTH_STRATEGY', 'local').lower(),
            firebase_project_id=os.environ.get('FIREBASE_PROJECT_ID'),
            port=port,
            debug=os.environ.get('APP_DEBUG', 'False').lower() == 'true',
            log_level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
            log_dir=os.environ.get('LOG_DIR') or None,
            cors_origins=[o.strip() for o in origins.split(',') if o.strip()],
        )

    def to_flask_config(self) -> dict:
        """Returns the subset of settings Flask itself reads."""
        return {
            'DEBUG': self.debug,
            'SECRET_KEY': self.jwt_secret,
        }

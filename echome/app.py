# echome/app.py
import os
import logging
from datetime import datetime
from typing import NamedTuple, Optional

from flask import Flask
from flask_cors import CORS

from .config import AppConfig
from .core.auth.service import AuthService
from .core.database.connection import Database
from .core.records.store import RecordStore
from .services.conversation import ConversationService
from .services.memory_analyzer import MemoryAnalyzer
from .utils.llm_api_client import LLMAPIClient

logger = logging.getLogger(__name__)


class Services(NamedTuple):
    """Components shared by every request, built once per application."""
    config: AppConfig
    database: Database
    records: RecordStore
    llm: LLMAPIClient
    analyzer: MemoryAnalyzer
    conversation: ConversationService
    auth: AuthService


def build_services(config: AppConfig, database: Optional[Database] = None,
                   llm_client: Optional[LLMAPIClient] = None,
                   auth_service: Optional[AuthService] = None) -> Services:
    """Wire the components together from an explicit configuration."""
    database = database or Database(config.database_url)
    llm_client = llm_client or LLMAPIClient(
        api_key=config.llm_api_key,
        base_url=config.llm_base_url,
        model=config.llm_model,
        timeout=config.llm_timeout,
    )
    records = RecordStore(database)
    analyzer = MemoryAnalyzer(llm_client)
    auth_service = auth_service or AuthService(
        database,
        secret_key=config.jwt_secret,
        strategy=config.auth_strategy,
        firebase_project_id=config.firebase_project_id,
        token_expiry_days=config.jwt_expiration_days,
    )
    return Services(
        config=config,
        database=database,
        records=records,
        llm=llm_client,
        analyzer=analyzer,
        conversation=ConversationService(records, llm_client, analyzer),
        auth=auth_service,
    )


def create_app(config: Optional[AppConfig] = None, services: Optional[Services] = None):
    """
    Application factory pattern for Flask app.

    Pre-built services carry their own configuration; passing a different
    config alongside them is an error.
    """
    if services is not None:
        if config is not None and config is not services.config:
            raise ValueError("config conflicts with services.config; pass one or the other")
        config = services.config
    elif config is None:
        config = AppConfig.from_env()

    app = Flask(__name__)
    app.config.update(config.to_flask_config())
    app.json.sort_keys = False
    app.json.compact = True

    CORS(app,
         resources={r"/*": {
             "origins": config.cors_origins,
             "methods": ["GET", "POST", "OPTIONS"],
             "allow_headers": ["Content-Type", "Authorization"]
         }})

    # Initialize logging
    configure_logging(config)

    services = services or build_services(config)
    services.database.create_tables()
    app.extensions['echome'] = services

    # Register blueprints
    register_blueprints(app)

    @app.route('/')
    def root():
        return 'Server is alive!', 200

    logger.info(f"EchoMe backend initialized (auth strategy: {config.auth_strategy}, model: {config.llm_model})")
    return app


def configure_logging(config: AppConfig):
    """Configure logging for the application"""
    handlers = [logging.StreamHandler()]

    if config.log_dir:
        os.makedirs(config.log_dir, exist_ok=True)
        # Use iso date format in filename for better sorting
        timestamp = datetime.now().strftime('%Y%m%d')
        log_file = os.path.join(config.log_dir, f'backend_{timestamp}.log')
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

    return logging.getLogger(__name__)


def register_blueprints(app):
    """Register Flask blueprints"""
    from .routes.frontend_api import frontend_api, memories_api
    app.register_blueprint(frontend_api)
    app.register_blueprint(memories_api)
    app.logger.info("Registered frontend API blueprints")

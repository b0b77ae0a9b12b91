# echome/wsgi.py
import logging

from waitress import serve

from .app import build_services, create_app
from .config import AppConfig
from .core.database.connection import Database
from .core.errors import StoreError

logger = logging.getLogger(__name__)


def main():
    config = AppConfig.from_env()

    database = Database(config.database_url)
    if not database.wait_until_ready():
        raise StoreError(f"Database at {database.engine.url!r} is not reachable")

    app = create_app(services=build_services(config, database=database))
    logger.info(f"EchoMe API Server is running at http://0.0.0.0:{config.port}")
    serve(app, host='0.0.0.0', port=config.port, threads=8)


if __name__ == "__main__":
    main()

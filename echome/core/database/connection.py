# echome/core/database/connection.py

import logging
import time
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, exc, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session as SQLAlchemySession
from sqlalchemy.pool import StaticPool

from .models import Base

# Configure logging
logger = logging.getLogger(__name__)


def create_db_engine(url: str) -> Engine:
    """Create a database engine suited to the given connection URL."""
    if url.startswith('sqlite'):
        kwargs = {'connect_args': {'check_same_thread': False}}
        if ':memory:' in url or url.rstrip('/') == 'sqlite:':
            # Every session must share the one in-memory database
            kwargs['poolclass'] = StaticPool
        return create_engine(url, **kwargs)

    return create_engine(
        url,
        echo=False,
        pool_recycle=1800,  # Reconnect after 30 minutes
        pool_pre_ping=True,  # Verify connections before using
        pool_timeout=30,
    )


class Database:
    """Owns the engine and session factory for one database URL."""

    def __init__(self, url: str):
        self.url = url
        self.engine = create_db_engine(url)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False,
                                         expire_on_commit=False, bind=self.engine)

    def wait_until_ready(self, max_retries: int = 5, retry_interval: int = 5) -> bool:
        """Block until the database answers a trivial query, or give up."""
        for attempt in range(1, max_retries + 1):
            try:
                logger.info(f"Attempting to connect to database (attempt {attempt}/{max_retries})")
                with self.engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
                logger.info("Database connection successful!")
                return True
            except (exc.SQLAlchemyError, exc.DBAPIError) as e:
                logger.warning(f"Database connection failed: {str(e)}. Retrying in {retry_interval} seconds...")
                if attempt < max_retries:
                    time.sleep(retry_interval)

        logger.error(f"Failed to connect to database after {max_retries} attempts.")
        return False

    def create_tables(self):
        """Create any missing tables. Never drops existing data."""
        logger.info("Creating database tables if they don't exist...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created or already exist.")

    def drop_tables(self):
        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def get_db(self) -> Generator[SQLAlchemySession, None, None]:
        """
        Provide a transactional scope around a series of operations.

        Yields:
            SQLAlchemy Session: The database session
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self):
        self.engine.dispose()

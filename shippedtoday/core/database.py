import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import config

logger = logging.getLogger(__name__)


class Database:
    """Database manager"""

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or config.get_database_url()
        self.engine = None
        self.SessionLocal = None
        self._init_engine()

    def _init_engine(self):
        """Create the engine and session factory"""
        try:
            # SQLite connections are shared across threads
            if self.database_url.startswith("sqlite"):
                self.engine = create_engine(
                    self.database_url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                    echo=False,
                )
            else:
                self.engine = create_engine(
                    self.database_url, echo=False, pool_pre_ping=True)

            self.SessionLocal = sessionmaker(
                autocommit=False, autoflush=False, bind=self.engine
            )
            logger.info(f"Database engine initialized: {self.engine.url!r}")
        except Exception as e:
            logger.error(f"Database engine initialization failed: {e}")
            raise RuntimeError(f"Database engine initialization failed: {e}")

    def create_tables(self):
        """Create all tables"""
        try:
            # Models must be imported for their tables to be registered
            from ..models import Base
            database = self.engine.url.database
            if self.engine.url.get_backend_name() == "sqlite" and database and database != ":memory:":
                Path(database).parent.mkdir(parents=True, exist_ok=True)
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created")
        except Exception as e:
            logger.error(f"Database table creation failed: {e}")
            raise RuntimeError(f"Database table creation failed: {e}")

    def get_session(self) -> Session:
        return self.SessionLocal()

    @contextmanager
    def get_session_context(self):
        """Session scope that commits on success and rolls back on error"""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False


# Global database instance
db = Database()

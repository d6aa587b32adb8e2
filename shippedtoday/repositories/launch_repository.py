import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError

from shippedtoday.core.database import Database, db
from shippedtoday.core.exceptions import StorageError
from shippedtoday.models import Launch, LaunchRecord
from shippedtoday.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class DatabaseLaunchRepository(BaseRepository):
    """Launches stored in the ``launches`` table"""

    def __init__(self, database: Optional[Database] = None):
        self.db = database or db

    def initialize(self) -> None:
        self.db.create_tables()

    def check_access(self) -> None:
        if not self.db.health_check():
            raise StorageError()

    def list_launches(self) -> List[Launch]:
        session = self.db.get_session()
        try:
            records = (
                session.query(LaunchRecord)
                .order_by(desc(LaunchRecord.submitted_at))
                .all()
            )
            return [self._to_launch(record) for record in records]
        except SQLAlchemyError as e:
            logger.error(f"Failed to query launches: {e}")
            raise StorageError()
        finally:
            session.close()

    def count(self) -> int:
        session = self.db.get_session()
        try:
            return session.query(LaunchRecord).count()
        except SQLAlchemyError as e:
            logger.error(f"Failed to count launches: {e}")
            raise StorageError()
        finally:
            session.close()

    def add_launch(self, launch: Launch) -> None:
        try:
            with self.db.get_session_context() as session:
                session.add(LaunchRecord(
                    id=launch.id,
                    title=launch.title,
                    url=launch.url,
                    description=launch.description,
                    tags=list(launch.tags),
                    tweet_url=launch.tweetUrl,
                    submitted_at=launch.submittedAt,
                ))
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert launch {launch.id}: {e}")
            raise StorageError()

    @staticmethod
    def _to_launch(record: LaunchRecord) -> Launch:
        return Launch(
            id=record.id,
            title=record.title,
            url=record.url,
            description=record.description,
            tags=record.tags or [],
            submittedAt=record.submitted_at,
            tweetUrl=record.tweet_url,
        )

"""
Database models

SQLAlchemy ORM table definitions
"""

import json

from sqlalchemy import Column, DateTime, String, Text, TypeDecorator
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func


class UnicodeJSON(TypeDecorator):
    """JSON stored as text without escaping non-ASCII characters"""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None:
            return json.dumps(value, ensure_ascii=False)
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            return json.loads(value)
        return value


Base = declarative_base()


class LaunchRecord(Base):
    """Launches table - one row per accepted submission"""

    __tablename__ = "launches"

    id = Column(String(64), primary_key=True)
    title = Column(String(1000), nullable=False)
    url = Column(String(2048), nullable=False)
    description = Column(Text, nullable=False)
    tags = Column(UnicodeJSON, nullable=False, default=list)
    tweet_url = Column(String(2048), nullable=True)
    submitted_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<LaunchRecord(id={self.id}, title='{self.title}')>"

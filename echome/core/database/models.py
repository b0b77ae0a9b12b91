# echome/core/database/models.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, Enum
from sqlalchemy.orm import declarative_base

# Define the base class for declarative models
Base = declarative_base()

RECORD_KINDS = ('chat', 'memory')


class User(Base):
    """SQLAlchemy model for the users table (stored-credential accounts)."""
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'email': self.email}

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"


class MemoryEntry(Base):
    """
    A persisted chat or memory record.

    Chat records form an ordered session transcript. Memory records carry the
    derived summary and emotions; both stay empty for chat records.
    Records are never updated after creation.
    """
    __tablename__ = 'memory_entries'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user = Column(String(255), nullable=False, index=True)
    session_id = Column(String(255), nullable=True, index=True)
    message = Column(Text, nullable=False)
    ai_response = Column(Text, nullable=False, default='')
    kind = Column(Enum(*RECORD_KINDS, name='record_kind'), nullable=False, index=True)
    summary = Column(Text, nullable=False, default='')
    emotions = Column(JSON, nullable=False, default=list)
    date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self):
        """Wire shape used by every endpoint that returns records."""
        return {
            'id': self.id,
            'user': self.user,
            'sessionId': self.session_id,
            'message': self.message,
            'aiResponse': self.ai_response or '',
            'kind': self.kind,
            'summary': self.summary or '',
            'emotions': list(self.emotions or []),
            'date': self.date.isoformat() if self.date else None,
        }

    def __repr__(self):
        return f"<MemoryEntry(id={self.id}, kind='{self.kind}', session_id='{self.session_id}')>"

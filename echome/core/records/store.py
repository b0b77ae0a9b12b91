# echome/core/records/store.py

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..database.connection import Database
from ..database.models import MemoryEntry
from ..errors import StoreError

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Persistence for chat and memory records.

    Every method opens its own short transaction. Returned entries are
    detached from the session and safe to serialize after it closes.
    Database failures surface as StoreError.
    """

    def __init__(self, database: Database):
        self.database = database

    def create(self, user: str, message: str, kind: str, ai_response: str = '',
               session_id: Optional[str] = None, summary: str = '',
               emotions: Optional[List[str]] = None) -> MemoryEntry:
        """
        Persist a new record.

        Args:
            user: Owner of the record
            message: The user's input text
            kind: 'chat' or 'memory'
            ai_response: Generated reply
            session_id: Optional conversation grouping
            summary: Derived summary (memory records only)
            emotions: Derived emotions (memory records only)

        Returns:
            The created MemoryEntry with its id and date assigned
        """
        entry = MemoryEntry(
            user=user,
            message=message,
            ai_response=ai_response or '',
            kind=kind,
            session_id=session_id or None,
            summary=summary or '',
            emotions=list(emotions or []),
        )
        try:
            with self.database.get_db() as db:
                db.add(entry)
                db.flush()
                db.refresh(entry)
                db.expunge(entry)
        except SQLAlchemyError as e:
            logger.error(f"Error saving {kind} record for user {user}: {str(e)}")
            raise StoreError("Failed to save record") from e

        logger.info(f"Saved {kind} record {entry.id} for user {user}")
        return entry

    def find_session_chat(self, user: str, session_id: str) -> List[MemoryEntry]:
        """Chat records of one session, oldest first."""
        return self._find(
            MemoryEntry.user == user,
            MemoryEntry.kind == 'chat',
            MemoryEntry.session_id == session_id,
            ascending=True,
        )

    def find_memories(self, user: str) -> List[MemoryEntry]:
        """Memory records of a user, newest first."""
        return self._find(
            MemoryEntry.user == user,
            MemoryEntry.kind == 'memory',
            ascending=False,
        )

    def find_for_user(self, user: str) -> List[MemoryEntry]:
        """All records of a user regardless of kind, newest first."""
        return self._find(MemoryEntry.user == user, ascending=False)

    def distinct_sessions(self, user: str) -> List[str]:
        """Distinct non-empty session ids among a user's chat records."""
        try:
            with self.database.get_db() as db:
                rows = (
                    db.query(MemoryEntry.session_id)
                    .filter(MemoryEntry.user == user,
                            MemoryEntry.kind == 'chat',
                            MemoryEntry.session_id.isnot(None),
                            MemoryEntry.session_id != '')
                    .distinct()
                    .order_by(MemoryEntry.session_id)
                    .all()
                )
        except SQLAlchemyError as e:
            logger.error(f"Error listing sessions for user {user}: {str(e)}")
            raise StoreError("Failed to list sessions") from e

        return [row[0] for row in rows if row[0]]

    def _find(self, *criteria, ascending: bool) -> List[MemoryEntry]:
        if ascending:
            ordering = (MemoryEntry.date.asc(), MemoryEntry.id.asc())
        else:
            ordering = (MemoryEntry.date.desc(), MemoryEntry.id.desc())

        try:
            with self.database.get_db() as db:
                entries = db.query(MemoryEntry).filter(*criteria).order_by(*ordering).all()
                db.expunge_all()
        except SQLAlchemyError as e:
            logger.error(f"Error querying records: {str(e)}")
            raise StoreError("Failed to query records") from e

        return entries

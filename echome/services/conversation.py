# echome/services/conversation.py

import logging
from typing import List, NamedTuple, Optional

from ..components.prompts import build_chat_messages
from ..core.database.models import MemoryEntry
from ..core.records.store import RecordStore
from ..utils.llm_api_client import LLMAPIClient
from .memory_analyzer import EMPTY_ANALYSIS, MemoryAnalyzer

logger = logging.getLogger(__name__)


class SubmissionResult(NamedTuple):
    reply: str
    entry: MemoryEntry


class ConversationService:
    """
    Orchestrates message submission and the read-side record queries.
    Holds no per-request state; one instance serves every request.
    """

    def __init__(self, record_store: RecordStore, llm_client: LLMAPIClient,
                 memory_analyzer: MemoryAnalyzer):
        self.record_store = record_store
        self.llm_client = llm_client
        self.memory_analyzer = memory_analyzer

    def submit_message(self, user_id: str, message: str, kind: str,
                       session_id: Optional[str] = None) -> SubmissionResult:
        """
        Send a message to the assistant and persist the exchange.

        For chat messages within a session, earlier user messages of that
        session are replayed as context. Memory messages are additionally
        summarized and tagged with emotions before being saved.

        Raises:
            AIError: If the completion fails; nothing is persisted then
            StoreError: If reading context or saving the record fails
        """
        prior_messages: List[str] = []
        if session_id and kind == 'chat':
            history = self.record_store.find_session_chat(user_id, session_id)
            prior_messages = [entry.message for entry in history]
            logger.info(f"Loaded {len(prior_messages)} prior messages for session {session_id}")

        reply = self.llm_client.complete(build_chat_messages(prior_messages, message))

        analysis = EMPTY_ANALYSIS
        if kind == 'memory':
            analysis = self.memory_analyzer.analyze(message)

        entry = self.record_store.create(
            user=user_id,
            message=message,
            kind=kind,
            ai_response=reply,
            session_id=session_id or None,
            summary=analysis.summary,
            emotions=analysis.emotions,
        )
        return SubmissionResult(reply=reply, entry=entry)

    def create_memory(self, user_id: str, message: str, ai_response: str = '') -> MemoryEntry:
        """Persist a memory record supplied directly by an authenticated caller."""
        return self.record_store.create(
            user=user_id,
            message=message,
            kind='memory',
            ai_response=ai_response,
        )

    def list_memories(self, user_id: str) -> List[MemoryEntry]:
        return self.record_store.find_memories(user_id)

    def list_sessions(self, user_id: str) -> List[str]:
        return self.record_store.distinct_sessions(user_id)

    def get_session_chat(self, user_id: str, session_id: str) -> List[MemoryEntry]:
        return self.record_store.find_session_chat(user_id, session_id)

    def list_records_for_caller(self, user_id: str) -> List[MemoryEntry]:
        return self.record_store.find_for_user(user_id)

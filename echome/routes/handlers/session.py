"""
Session handlers for API routes.

This module contains handlers for session listing and chat history.
"""

import logging
from .common import create_error_response, create_success_response, get_services

# Create logger
logger = logging.getLogger(__name__)


def handle_list_sessions(user_id):
    """Handler to get the session ids a user has chatted in"""
    try:
        sessions = get_services().conversation.list_sessions(user_id)
        return create_success_response(sessions)
    except Exception as e:
        logger.error(f"Error retrieving sessions for user {user_id}: {str(e)}", exc_info=True)
        return create_error_response('Failed to fetch sessions.', 500)


def handle_get_session_chat(user_id, session_id):
    """Handler to get the chat transcript of one session, oldest first"""
    try:
        entries = get_services().conversation.get_session_chat(user_id, session_id)
        return create_success_response([entry.to_dict() for entry in entries])
    except Exception as e:
        logger.error(f"Error retrieving chat history for session {session_id}: {str(e)}", exc_info=True)
        return create_error_response('Failed to fetch chat messages.', 500)

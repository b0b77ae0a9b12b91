"""
Memory handlers for API routes.

This module contains handlers for listing memories by user id and for the
authenticated memory endpoints, which attribute records to the verified caller.
"""

import logging
from flask import g, request
from ...core.errors import BadRequest
from ...schemas.memory import MemoryCreateSchema
from .common import create_error_response, create_success_response, get_services, validate_payload

# Create logger
logger = logging.getLogger(__name__)


def handle_list_memories(user_id):
    """Handler to get a user's memory records, newest first"""
    try:
        entries = get_services().conversation.list_memories(user_id)
        return create_success_response([entry.to_dict() for entry in entries])
    except Exception as e:
        logger.error(f"Error fetching memories for user {user_id}: {str(e)}", exc_info=True)
        return create_error_response('Failed to fetch memories.', 500)


def handle_create_memory():
    """Handler to save a memory for the authenticated caller"""
    try:
        payload = validate_payload(MemoryCreateSchema, request.get_json(silent=True),
                                   missing_message='Memory text is required.')
    except BadRequest as e:
        return create_error_response(str(e), 400)

    try:
        entry = get_services().conversation.create_memory(
            user_id=g.identity.uid,
            message=payload.message,
            ai_response=payload.ai_response,
        )
        return create_success_response(entry.to_dict(), 201)
    except Exception as e:
        logger.error(f"Memory save error: {str(e)}", exc_info=True)
        return create_error_response('Failed to save memory', 500)


def handle_list_caller_memories():
    """Handler to get every record of the authenticated caller, newest first"""
    try:
        entries = get_services().conversation.list_records_for_caller(g.identity.uid)
        return create_success_response([entry.to_dict() for entry in entries])
    except Exception as e:
        logger.error(f"Memory fetch error: {str(e)}", exc_info=True)
        return create_error_response('Failed to fetch memories', 500)

"""
Message handlers for API routes.

This module contains the handler that sends a chat or memory message to the
assistant and records the exchange.
"""

import logging
from flask import request
from ...core.errors import BadRequest
from ...schemas.memory import MessageRequestSchema
from .common import create_error_response, create_success_response, get_services, validate_payload

# Create logger
logger = logging.getLogger(__name__)

AI_ERROR_MESSAGE = 'AI error. Try again.'


def handle_submit_message():
    """Handler for POST /api/message"""
    try:
        payload = validate_payload(MessageRequestSchema, request.get_json(silent=True))
    except BadRequest as e:
        logger.warning(f"Rejected message submission: {e}")
        return create_error_response(str(e), 400)

    try:
        services = get_services()
        result = services.conversation.submit_message(
            user_id=payload.user_id,
            message=payload.message,
            kind=payload.kind,
            session_id=payload.session_id,
        )
        return create_success_response({
            'reply': result.reply,
            'entry': result.entry.to_dict(),
        })
    except Exception as e:
        logger.error(f"AI error for user {payload.user_id}: {str(e)}", exc_info=True)
        return create_error_response(AI_ERROR_MESSAGE, 500)

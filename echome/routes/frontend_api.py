"""
Frontend API routes for the EchoMe backend.

This module serves as the single entry point for all frontend API interactions,
but delegates actual implementation to handler modules.
"""

import logging
from flask import Blueprint
from ..middleware.auth import token_required

# Import handlers
from .handlers.auth import handle_login, handle_register
from .handlers.health import handle_health_check
from .handlers.memory import handle_create_memory, handle_list_caller_memories, handle_list_memories
from .handlers.message import handle_submit_message
from .handlers.session import handle_get_session_chat, handle_list_sessions

# Create logger
logger = logging.getLogger(__name__)

# Create blueprint for API routes
frontend_api = Blueprint('frontend_api', __name__, url_prefix='/api')

# Authenticated memory routes, mounted at the application root
memories_api = Blueprint('memories_api', __name__, url_prefix='/memories')

# --------------------------------
# Message Endpoint
# --------------------------------

@frontend_api.route('/message', methods=['POST'])
def submit_message():
    return handle_submit_message()

# --------------------------------
# Memory / Session Endpoints
# --------------------------------

@frontend_api.route('/memories/<user_id>', methods=['GET'])
def list_memories(user_id):
    return handle_list_memories(user_id)

@frontend_api.route('/sessions/<user_id>', methods=['GET'])
def list_sessions(user_id):
    return handle_list_sessions(user_id)

@frontend_api.route('/chats/<user_id>/<session_id>', methods=['GET'])
def get_session_chat(user_id, session_id):
    return handle_get_session_chat(user_id, session_id)

# --------------------------------
# Authentication Endpoints
# --------------------------------

@frontend_api.route('/auth/register', methods=['POST'])
def register():
    return handle_register()

@frontend_api.route('/auth/login', methods=['POST'])
def login():
    return handle_login()

# --------------------------------
# Health Check Endpoint
# --------------------------------

@frontend_api.route('/health', methods=['GET'])
def health_check():
    return handle_health_check()

# --------------------------------
# Authenticated Memory Endpoints
# --------------------------------

@memories_api.route('', methods=['POST'])
@token_required
def create_memory():
    return handle_create_memory()

@memories_api.route('', methods=['GET'])
@token_required
def list_caller_memories():
    return handle_list_caller_memories()

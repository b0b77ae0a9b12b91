"""
Authentication handlers for API routes.

This module contains handlers for registration and login of stored-credential accounts.
"""

import logging
from flask import request
from ...core.auth.models import UserCreateSchema, UserLoginSchema
from ...core.errors import BadRequest, Conflict, Unauthenticated
from .common import create_error_response, create_success_response, get_services, validate_payload

# Create logger
logger = logging.getLogger(__name__)


def handle_register():
    """Handler for user registration"""
    try:
        user_data = validate_payload(UserCreateSchema, request.get_json(silent=True),
                                     missing_message='Name, email, and password are required')
        logger.info(f"Registration attempt for email: {user_data.email}")
        user, token = get_services().auth.register_user(user_data)

        return create_success_response({
            'id': user.id,
            'name': user.name,
            'email': user.email,
            'token': token,
        }, 201)
    except (BadRequest, Conflict) as e:
        return create_error_response(str(e), e.status_code)
    except Exception as e:
        logger.error(f"Registration error: {str(e)}", exc_info=True)
        return create_error_response('Server error', 500)


def handle_login():
    """Handler for user login"""
    try:
        credentials = validate_payload(UserLoginSchema, request.get_json(silent=True),
                                       missing_message='Email and password are required')
        logger.info(f"Login attempt for user: {credentials.email}")
        user, token = get_services().auth.authenticate(credentials)

        return create_success_response({
            'user': user.model_dump(),
            'token': token,
        })
    except (BadRequest, Unauthenticated) as e:
        return create_error_response(str(e), e.status_code)
    except Exception as e:
        logger.error(f"Login error: {str(e)}", exc_info=True)
        return create_error_response('Login failed.', 500)

"""
Authentication middleware for the EchoMe backend.

Protected routes resolve the caller from the bearer token through the
configured verification strategy and find it in Flask's g.identity.
"""

import logging
from functools import wraps
from flask import request, g
from typing import Any, Callable, TypeVar, cast

from ..core.errors import Unauthenticated
from ..routes.handlers.common import create_error_response, get_services

# Set up logging
logger = logging.getLogger(__name__)

# Type variables for better typing
F = TypeVar('F', bound=Callable[..., Any])


def token_required(f: F) -> F:
    """
    Decorator that protects routes with bearer-token authentication.

    A missing or malformed Authorization header is rejected before any
    verification is attempted. Verification failures all produce the same
    generic 401 response.

    Usage:
        @token_required
        def protected_route():
            # Access the caller with g.identity
    """
    @wraps(f)
    def decorated(*args: Any, **kwargs: Any) -> Any:
        auth_service = get_services().auth

        try:
            token = auth_service.extract_bearer_token(request.headers.get('Authorization'))
        except Unauthenticated as e:
            logger.warning(f"Rejected request to {request.path}: {e}")
            return create_error_response(str(e), 401)

        try:
            g.identity = auth_service.verify_auth_token(token)
        except Unauthenticated:
            return create_error_response('Invalid token', 401)
        except Exception as e:
            logger.error(f"Auth error: {str(e)}", exc_info=True)
            return create_error_response('Invalid token', 401)

        return f(*args, **kwargs)

    return cast(F, decorated)

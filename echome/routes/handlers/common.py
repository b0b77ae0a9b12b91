"""
Common utilities for API handlers.

This file contains shared functionality for all API handlers.
"""

import logging
from typing import Any, Type, TypeVar

from flask import current_app, jsonify
from pydantic import BaseModel, ValidationError

from ...core.errors import BadRequest

# Create logger
logger = logging.getLogger(__name__)

SchemaT = TypeVar('SchemaT', bound=BaseModel)

MISSING_ERROR_TYPES = {'missing', 'string_too_short'}


def get_services():
    """The service container built by the application factory."""
    return current_app.extensions['echome']


def create_error_response(message: str, status_code: int = 400) -> tuple:
    """Create a standardized, client-safe error response"""
    return jsonify({'error': message}), status_code


def create_success_response(data: Any, status_code: int = 200) -> tuple:
    """Create a success response with the given JSON body"""
    return jsonify(data), status_code


def validate_payload(schema: Type[SchemaT], data: Any,
                     missing_message: str = 'Missing required fields.') -> SchemaT:
    """
    Validate a JSON body against a schema.

    Raises:
        BadRequest: `missing_message` when a required field is absent or
            empty, otherwise a message naming the invalid field
    """
    if not isinstance(data, dict):
        raise BadRequest(missing_message)

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        if any(err['type'] in MISSING_ERROR_TYPES or err.get('input') is None for err in errors):
            raise BadRequest(missing_message)
        field = '.'.join(str(part) for part in errors[0]['loc']) if errors else 'body'
        raise BadRequest(f"Invalid value for '{field}'.")

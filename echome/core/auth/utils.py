# echome/core/auth/utils.py
"""
Authentication utilities for the EchoMe backend.

This file provides the low-level credential helpers used by the auth strategies:
1. Password hashing and verification
2. JWT issuing and decoding for stored-credential accounts
"""

import bcrypt
import jwt
from datetime import datetime, timedelta
from typing import Any, Dict

JWT_ALGORITHM = 'HS256'


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: The plain text password to hash

    Returns:
        The hashed password as a string, ready to store
    """
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(provided_password: str, hashed_password) -> bool:
    """
    Verify a provided password against a stored hash.

    Args:
        provided_password: The plain text password to verify
        hashed_password: The stored hash to check against (can be string or bytes)

    Returns:
        True if the password matches, False otherwise
    """
    if not provided_password or not hashed_password:
        return False

    # Handle string or bytes for hashed_password
    if isinstance(hashed_password, str):
        hashed_password = hashed_password.encode('utf-8')

    try:
        return bcrypt.checkpw(provided_password.encode('utf-8'), hashed_password)
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def generate_token(user_id: int, secret_key: str, expiry_days: int = 30) -> str:
    """
    Generate a signed JWT for a stored-credential user.

    Args:
        user_id: The ID of the user
        secret_key: The credential-signing secret
        expiry_days: The number of days until the token expires

    Returns:
        The encoded token
    """
    payload = {
        'id': user_id,
        'exp': datetime.utcnow() + timedelta(days=expiry_days),
    }
    return jwt.encode(payload, secret_key, algorithm=JWT_ALGORITHM)


def decode_token(token: str, secret_key: str) -> Dict[str, Any]:
    """Decode and validate a token issued by generate_token. Raises jwt.InvalidTokenError."""
    return jwt.decode(token, secret_key, algorithms=[JWT_ALGORITHM])

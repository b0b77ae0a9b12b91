"""
Authentication: account management and pluggable bearer-token verification.
"""

from .models import Identity
from .service import AuthService
from .strategies import AuthStrategy, FirebaseStrategy, LocalStrategy

__all__ = ['AuthService', 'AuthStrategy', 'FirebaseStrategy', 'Identity', 'LocalStrategy']

"""
Error types shared by the EchoMe backend.

Each error carries the HTTP status it maps to. Handlers catch these at the
route boundary and return a client-safe message; the detail stays in the logs.
"""


class EchoMeError(Exception):
    """Base class for all application errors."""
    status_code = 500


class ConfigError(EchoMeError):
    """Startup configuration is missing or invalid."""


class BadRequest(EchoMeError):
    """Required input fields are missing or malformed."""
    status_code = 400


class Unauthenticated(EchoMeError):
    """Credential is missing, malformed or failed verification."""
    status_code = 401


class Conflict(EchoMeError):
    """Resource already exists (duplicate registration)."""
    status_code = 400


class AIError(EchoMeError):
    """The completion provider failed or returned an unusable body."""


class StoreError(EchoMeError):
    """A persistence read or write failed."""

# echome/core/auth/strategies.py

import logging
import jwt
from typing import Optional

from ..database.connection import Database
from ..database.models import User as UserModel
from ..errors import ConfigError, Unauthenticated
from .models import Identity
from .utils import decode_token

logger = logging.getLogger(__name__)

FIREBASE_JWKS_URL = (
    'https://www.googleapis.com/service_accounts/v1/jwk/'
    'securetoken@system.gserviceaccount.com'
)
FIREBASE_ISSUER_PREFIX = 'https://securetoken.google.com/'


class AuthStrategy:
    """Base class for bearer-credential verification strategies."""
    name = 'base'

    def verify(self, token: str) -> Identity:
        """
        Resolve a bearer token to the caller's identity.

        Raises:
            Unauthenticated: If the token cannot be verified
        """
        raise NotImplementedError("Subclasses must implement verify()")


class LocalStrategy(AuthStrategy):
    """Verifies tokens this service issued against the local user table."""
    name = 'local'

    def __init__(self, database: Database, secret_key: str):
        self.database = database
        self.secret_key = secret_key

    def verify(self, token: str) -> Identity:
        try:
            payload = decode_token(token, self.secret_key)
        except jwt.ExpiredSignatureError:
            logger.warning("Expired token attempted")
            raise Unauthenticated("Invalid token")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid token: {e}")
            raise Unauthenticated("Invalid token")

        user = self.get_user_info(payload.get('id'))
        if not user:
            logger.warning(f"Token references unknown user id {payload.get('id')}")
            raise Unauthenticated("Invalid token")

        return Identity(uid=str(user.id), email=user.email)

    def get_user_info(self, user_id) -> Optional[UserModel]:
        """Retrieves a stored user by id, or None."""
        if user_id is None:
            return None
        with self.database.get_db() as db:
            user = db.query(UserModel).filter(UserModel.id == user_id).first()
            if user:
                db.expunge(user)
            return user


class FirebaseStrategy(AuthStrategy):
    """
    Verifies identity-platform ID tokens.

    Tokens are RS256 JWTs signed with keys published by the platform. The
    issuer and audience must both name the configured project.
    """
    name = 'firebase'

    def __init__(self, project_id: str, jwk_client: Optional[jwt.PyJWKClient] = None):
        if not project_id:
            raise ConfigError("A project id is required for the firebase auth strategy")
        self.project_id = project_id
        self.issuer = FIREBASE_ISSUER_PREFIX + project_id
        self.jwk_client = jwk_client or jwt.PyJWKClient(FIREBASE_JWKS_URL)

    def verify(self, token: str) -> Identity:
        try:
            signing_key = self.jwk_client.get_signing_key_from_jwt(token)
            payload = jwt.decode(
                token,
                signing_key.key,
                algorithms=['RS256'],
                audience=self.project_id,
                issuer=self.issuer,
            )
        except jwt.PyJWTError as e:
            logger.warning(f"Identity token rejected: {e}")
            raise Unauthenticated("Invalid token")

        uid = payload.get('user_id') or payload.get('sub')
        if not uid:
            logger.warning("Identity token has no subject")
            raise Unauthenticated("Invalid token")

        return Identity(uid=uid, email=payload.get('email'))

# echome/core/auth/service.py

import logging
from typing import Dict, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from ..database.connection import Database
from ..database.models import User as UserModel
from ..errors import BadRequest, Conflict, Unauthenticated
from .models import Identity, UserCreateSchema, UserLoginSchema, UserSchema
from .strategies import AuthStrategy, FirebaseStrategy, LocalStrategy
from .utils import generate_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service layer for account management and bearer-token verification.
    Token verification is delegated to the configured strategy.
    """

    def __init__(self, database: Database, secret_key: str, strategy: str = 'local',
                 firebase_project_id: Optional[str] = None, token_expiry_days: int = 30,
                 verifier: Optional[AuthStrategy] = None):
        """
        Initialize the auth service.

        Args:
            database: Database holding the users table
            secret_key: Secret used to sign locally issued tokens
            strategy: The verification strategy ('local' or 'firebase')
            firebase_project_id: Identity-platform project, for 'firebase'
            token_expiry_days: Lifetime of locally issued tokens
            verifier: Optional pre-built strategy, overriding `strategy`
        """
        self.database = database
        self.secret_key = secret_key
        self.token_expiry_days = token_expiry_days

        if verifier is not None:
            self.verifier = verifier
        elif strategy == 'local':
            self.verifier = LocalStrategy(database, secret_key)
        elif strategy == 'firebase':
            self.verifier = FirebaseStrategy(firebase_project_id)
        else:
            raise ValueError(f"Invalid auth strategy: {strategy}")

        logger.info(f"AuthService initialized with strategy: {self.verifier.name}")

    def register_user(self, user_data: UserCreateSchema) -> Tuple[UserSchema, str]:
        """
        Register a new stored-credential account.

        Returns:
            The created user and a freshly issued token

        Raises:
            Conflict: If the email is already registered
        """
        with self.database.get_db() as db:
            existing_user = db.query(UserModel).filter(UserModel.email == user_data.email).first()
            if existing_user:
                logger.warning(f"Registration failed: email {user_data.email} already exists")
                raise Conflict("User already exists")

        try:
            with self.database.get_db() as db:
                new_user = UserModel(
                    name=user_data.name,
                    email=user_data.email,
                    hashed_password=hash_password(user_data.password),
                )
                db.add(new_user)
                db.flush()
                user = UserSchema.model_validate(new_user)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            logger.warning(f"Registration failed: email {user_data.email} already exists")
            raise Conflict("User already exists")

        logger.info(f"Successfully registered new user: {user.email}")
        return user, self.generate_auth_token(user)

    def authenticate(self, credentials: UserLoginSchema) -> Tuple[UserSchema, str]:
        """
        Check an email/password pair against the stored hash.

        Raises:
            BadRequest: If no account has that email
            Unauthenticated: If the password does not match
        """
        with self.database.get_db() as db:
            user = db.query(UserModel).filter(UserModel.email == credentials.email).first()
            if not user:
                logger.warning(f"Authentication failed: no user with email {credentials.email}")
                raise BadRequest("User not found.")

            if not verify_password(credentials.password, user.hashed_password):
                logger.warning(f"Authentication failed: incorrect password for {credentials.email}")
                raise Unauthenticated("Invalid password.")

            user_schema = UserSchema.model_validate(user)

        logger.info(f"User {credentials.email} successfully authenticated")
        return user_schema, self.generate_auth_token(user_schema)

    def generate_auth_token(self, user: UserSchema) -> str:
        return generate_token(user.id, self.secret_key, self.token_expiry_days)

    def verify_auth_token(self, token: str) -> Identity:
        """Resolve a bearer token to an Identity. Raises Unauthenticated."""
        return self.verifier.verify(token)

    @staticmethod
    def extract_bearer_token(auth_header: Optional[str]) -> str:
        """
        Pull the token out of an Authorization header value.

        Raises:
            Unauthenticated: If the header is missing or not a Bearer credential
        """
        if not auth_header:
            raise Unauthenticated("No token provided")

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != 'bearer' or not parts[1]:
            raise Unauthenticated("No token provided")

        return parts[1]

    def describe(self) -> Dict[str, str]:
        return {'strategy': self.verifier.name}

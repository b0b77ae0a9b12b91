# echome/tests/unit/test_auth.py

import time
import unittest
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import jwt
from cryptography.hazmat.primitives.asymmetric import rsa

from ...core.auth.models import UserCreateSchema, UserLoginSchema
from ...core.auth.service import AuthService
from ...core.auth.strategies import FirebaseStrategy, LocalStrategy
from ...core.auth.utils import decode_token, generate_token, hash_password, verify_password
from ...core.database.connection import Database
from ...core.errors import BadRequest, ConfigError, Conflict, Unauthenticated


class TestPasswordUtils(unittest.TestCase):

    def test_hash_and_verify(self):
        hashed = hash_password('s3cret')

        self.assertNotEqual(hashed, 's3cret')
        self.assertTrue(verify_password('s3cret', hashed))
        self.assertFalse(verify_password('wrong', hashed))

    def test_verify_rejects_non_bcrypt_hash(self):
        self.assertFalse(verify_password('s3cret', 'plain-text'))

    def test_token_round_trip(self):
        token = generate_token(7, 'secret', expiry_days=30)
        self.assertIsInstance(token, str)

        payload = decode_token(token, 'secret')
        self.assertEqual(payload['id'], 7)
        self.assertGreater(payload['exp'], time.time() + 29 * 24 * 3600)

        with self.assertRaises(jwt.InvalidTokenError):
            decode_token(token, 'another-secret')


class TestAuthService(unittest.TestCase):
    """Test registration, login and local token verification."""

    def setUp(self):
        self.database = Database('sqlite://')
        self.database.create_tables()
        self.service = AuthService(self.database, secret_key='test-secret')

    def tearDown(self):
        self.database.drop_tables()
        self.database.dispose()

    def register(self, email='ana@example.com'):
        return self.service.register_user(
            UserCreateSchema(name='Ana', email=email, password='pw123456'))

    def test_register_returns_user_and_token(self):
        user, token = self.register()

        self.assertEqual(user.name, 'Ana')
        self.assertEqual(user.email, 'ana@example.com')
        self.assertEqual(decode_token(token, 'test-secret')['id'], user.id)

    def test_duplicate_registration_conflicts(self):
        self.register()

        with self.assertRaises(Conflict):
            self.register()

    def test_login_success(self):
        registered, _ = self.register()

        user, token = self.service.authenticate(
            UserLoginSchema(email='ana@example.com', password='pw123456'))

        self.assertEqual(user.id, registered.id)
        self.assertEqual(self.service.verify_auth_token(token).uid, str(registered.id))

    def test_login_unknown_email(self):
        with self.assertRaises(BadRequest):
            self.service.authenticate(UserLoginSchema(email='nobody@example.com', password='x'))

    def test_login_wrong_password(self):
        self.register()

        with self.assertRaises(Unauthenticated):
            self.service.authenticate(UserLoginSchema(email='ana@example.com', password='nope'))

    def test_local_strategy_resolves_identity(self):
        user, token = self.register()

        identity = self.service.verify_auth_token(token)

        self.assertIsInstance(self.service.verifier, LocalStrategy)
        self.assertEqual(identity.uid, str(user.id))
        self.assertEqual(identity.email, 'ana@example.com')

    def test_local_strategy_rejects_unknown_user(self):
        token = generate_token(999, 'test-secret')

        with self.assertRaises(Unauthenticated):
            self.service.verify_auth_token(token)

    def test_local_strategy_rejects_expired_token(self):
        user, _ = self.register()
        token = jwt.encode({'id': user.id, 'exp': datetime.utcnow() - timedelta(minutes=1)},
                           'test-secret', algorithm='HS256')

        with self.assertRaises(Unauthenticated):
            self.service.verify_auth_token(token)

    def test_local_strategy_rejects_garbage(self):
        with self.assertRaises(Unauthenticated):
            self.service.verify_auth_token('not-a-jwt')

    def test_extract_bearer_token(self):
        self.assertEqual(AuthService.extract_bearer_token('Bearer abc.def'), 'abc.def')

        for header in (None, '', 'Bearer', 'Basic abc', 'Bearer a b'):
            with self.assertRaises(Unauthenticated):
                AuthService.extract_bearer_token(header)

    def test_unknown_strategy_is_rejected(self):
        with self.assertRaises(ValueError):
            AuthService(self.database, secret_key='s', strategy='ldap')


class TestFirebaseStrategy(unittest.TestCase):
    """Test identity-platform token verification with a locally generated key pair."""

    @classmethod
    def setUpClass(cls):
        cls.private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)

    def setUp(self):
        self.jwk_client = MagicMock()
        self.jwk_client.get_signing_key_from_jwt.return_value = MagicMock(
            key=self.private_key.public_key())
        self.strategy = FirebaseStrategy('echome-test', jwk_client=self.jwk_client)

    def make_token(self, **overrides):
        now = int(time.time())
        claims = {
            'iss': 'https://securetoken.google.com/echome-test',
            'aud': 'echome-test',
            'sub': 'firebase-uid-1',
            'user_id': 'firebase-uid-1',
            'email': 'ana@example.com',
            'iat': now - 10,
            'exp': now + 3600,
        }
        claims.update(overrides)
        return jwt.encode(claims, self.private_key, algorithm='RS256', headers={'kid': 'key-1'})

    def test_valid_token(self):
        identity = self.strategy.verify(self.make_token())

        self.assertEqual(identity.uid, 'firebase-uid-1')
        self.assertEqual(identity.email, 'ana@example.com')

    def test_wrong_audience(self):
        with self.assertRaises(Unauthenticated):
            self.strategy.verify(self.make_token(aud='another-project'))

    def test_wrong_issuer(self):
        with self.assertRaises(Unauthenticated):
            self.strategy.verify(self.make_token(iss='https://evil.example.com/echome-test'))

    def test_expired_token(self):
        now = int(time.time())
        with self.assertRaises(Unauthenticated):
            self.strategy.verify(self.make_token(iat=now - 7200, exp=now - 3600))

    def test_signing_key_lookup_failure(self):
        self.jwk_client.get_signing_key_from_jwt.side_effect = jwt.PyJWKClientError('no key')

        with self.assertRaises(Unauthenticated):
            self.strategy.verify(self.make_token())

    def test_service_uses_firebase_strategy(self):
        service = AuthService(Database('sqlite://'), secret_key='s', verifier=self.strategy)

        self.assertEqual(service.verify_auth_token(self.make_token()).uid, 'firebase-uid-1')
        self.assertEqual(service.describe(), {'strategy': 'firebase'})

    def test_missing_project_id_is_rejected(self):
        for project_id in (None, ''):
            with self.assertRaises(ConfigError):
                FirebaseStrategy(project_id, jwk_client=self.jwk_client)

    def test_service_without_project_id_is_rejected(self):
        with self.assertRaises(ConfigError):
            AuthService(Database('sqlite://'), secret_key='s', strategy='firebase')


if __name__ == '__main__':
    unittest.main()

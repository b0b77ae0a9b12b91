# echome/tests/unit/test_config.py

import os
import unittest
from unittest.mock import patch

from ...config import AppConfig, DEFAULT_LLM_MODEL, DEFAULT_PORT
from ...core.errors import ConfigError

REQUIRED_ENV = {
    'GROQ_API_KEY': 'gsk-test',
    'LLM_BASE_URL': 'https://api.groq.com/openai/v1/',
    'DATABASE_URL': 'sqlite:///echome.db',
    'JWT_SECRET': 'jwt-secret',
}


@patch('echome.config.load_dotenv')
class TestAppConfig(unittest.TestCase):

    def test_from_env_with_required_values(self, _load_dotenv):
        with patch.dict(os.environ, REQUIRED_ENV, clear=True):
            config = AppConfig.from_env()

        self.assertEqual(config.llm_api_key, 'gsk-test')
        self.assertEqual(config.llm_base_url, 'https://api.groq.com/openai/v1')
        self.assertEqual(config.database_url, 'sqlite:///echome.db')
        self.assertEqual(config.jwt_secret, 'jwt-secret')
        self.assertEqual(config.port, DEFAULT_PORT)
        self.assertEqual(config.llm_model, DEFAULT_LLM_MODEL)
        self.assertEqual(config.auth_strategy, 'local')
        self.assertEqual(config.cors_origins, ['*'])

    def test_missing_required_values(self, _load_dotenv):
        env = dict(REQUIRED_ENV)
        del env['GROQ_API_KEY']
        del env['JWT_SECRET']

        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ConfigError) as ctx:
                AppConfig.from_env()

        self.assertIn('GROQ_API_KEY', str(ctx.exception))
        self.assertIn('JWT_SECRET', str(ctx.exception))

    def test_optional_overrides(self, _load_dotenv):
        env = dict(REQUIRED_ENV, PORT='8080', LLM_MODEL='llama-3.1-8b-instant',
                   LLM_TIMEOUT='15', CORS_ORIGINS='http://a.test, http://b.test',
                   AUTH_STRATEGY='firebase', FIREBASE_PROJECT_ID='echome-prod')

        with patch.dict(os.environ, env, clear=True):
            config = AppConfig.from_env()

        self.assertEqual(config.port, 8080)
        self.assertEqual(config.llm_model, 'llama-3.1-8b-instant')
        self.assertEqual(config.llm_timeout, 15.0)
        self.assertEqual(config.cors_origins, ['http://a.test', 'http://b.test'])
        self.assertEqual(config.auth_strategy, 'firebase')
        self.assertEqual(config.firebase_project_id, 'echome-prod')

    def test_app_debug_flag(self, _load_dotenv):
        with patch.dict(os.environ, REQUIRED_ENV, clear=True):
            self.assertFalse(AppConfig.from_env().debug)
        with patch.dict(os.environ, dict(REQUIRED_ENV, APP_DEBUG='true'), clear=True):
            config = AppConfig.from_env()

        self.assertTrue(config.debug)
        self.assertTrue(config.to_flask_config()['DEBUG'])

    def test_firebase_strategy_requires_project(self, _load_dotenv):
        with patch.dict(os.environ, dict(REQUIRED_ENV, AUTH_STRATEGY='firebase'), clear=True):
            with self.assertRaises(ConfigError):
                AppConfig.from_env()

    def test_invalid_port(self, _load_dotenv):
        with patch.dict(os.environ, dict(REQUIRED_ENV, PORT='eighty'), clear=True):
            with self.assertRaises(ConfigError):
                AppConfig.from_env()


if __name__ == '__main__':
    unittest.main()

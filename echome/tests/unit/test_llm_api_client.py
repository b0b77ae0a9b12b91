# echome/tests/unit/test_llm_api_client.py

import unittest
from unittest.mock import MagicMock, patch

import requests

from ...core.errors import AIError
from ...utils.llm_api_client import LLMAPIClient


def make_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.text = str(body)
    return response


class TestLLMAPIClient(unittest.TestCase):
    """Test the HTTP completion client with requests.post patched out."""

    def setUp(self):
        patcher = patch('echome.utils.llm_api_client.requests.post')
        self.post = patcher.start()
        self.addCleanup(patcher.stop)
        self.client = LLMAPIClient(
            api_key='test-key',
            base_url='https://api.groq.test/openai/v1/',
            model='llama3-70b-8192',
            timeout=12,
        )
        self.messages = [
            {'role': 'system', 'content': 'be nice'},
            {'role': 'user', 'content': 'Hello'},
        ]

    def test_complete_returns_first_choice(self):
        self.post.return_value = make_response(body={
            'choices': [{'message': {'role': 'assistant', 'content': 'Hi there!'}}]
        })

        reply = self.client.complete(self.messages)

        self.assertEqual(reply, 'Hi there!')
        args, kwargs = self.post.call_args
        self.assertEqual(args[0], 'https://api.groq.test/openai/v1/chat/completions')
        self.assertEqual(kwargs['json']['model'], 'llama3-70b-8192')
        self.assertEqual(kwargs['json']['messages'], self.messages)
        self.assertEqual(kwargs['headers']['Authorization'], 'Bearer test-key')
        self.assertEqual(kwargs['timeout'], 12)

    def test_options_are_merged_into_request(self):
        self.post.return_value = make_response(body={
            'choices': [{'message': {'content': 'ok'}}]
        })

        self.client.complete(self.messages, options={'temperature': 0.2})

        self.assertEqual(self.post.call_args.kwargs['json']['temperature'], 0.2)

    def test_each_completion_is_a_separate_request(self):
        self.post.return_value = make_response(body={
            'choices': [{'message': {'content': 'ok'}}]
        })

        self.client.complete(self.messages)
        self.client.complete(self.messages)

        self.assertEqual(self.post.call_count, 2)

    def test_transport_error_raises_ai_error(self):
        self.post.side_effect = requests.ConnectionError('connection refused')

        with self.assertRaises(AIError):
            self.client.complete(self.messages)

    def test_timeout_raises_ai_error(self):
        self.post.side_effect = requests.Timeout('too slow')

        with self.assertRaises(AIError):
            self.client.complete(self.messages)

    def test_non_200_status_raises_ai_error(self):
        self.post.return_value = make_response(status_code=429, body={'error': 'rate limited'})

        with self.assertRaises(AIError):
            self.client.complete(self.messages)

    def test_malformed_body_raises_ai_error(self):
        self.post.return_value = make_response(body={'choices': []})

        with self.assertRaises(AIError):
            self.client.complete(self.messages)


if __name__ == '__main__':
    unittest.main()

"""
LLM API Client for EchoMe
Sends role-tagged chat messages to an OpenAI-compatible completions endpoint over HTTP
"""

import logging
import requests
from typing import Any, Dict, List, Optional

from ..core.errors import AIError

logger = logging.getLogger(__name__)


class LLMAPIClient:
    """
    HTTP client for the completion provider
    """

    def __init__(self, api_key: str, base_url: str, model: str,
                 timeout: float = 60.0):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.model = model
        self.timeout = timeout
        logger.info(f"Initializing LLM API client with URL: {self.base_url}, model: {self.model}")

    def complete(self, messages: List[Dict[str, str]],
                 options: Optional[Dict[str, Any]] = None) -> str:
        """
        Generate a chat completion.

        Args:
            messages: List of message objects with 'role' and 'content' keys,
                in chronological order (system instruction first)
            options: Optional parameters like temperature, max_tokens, etc.

        Returns:
            The generated text of the first choice

        Raises:
            AIError: On transport failure, timeout, non-2xx status or a malformed body
        """
        data = {
            "model": self.model,
            "messages": messages,
        }
        if options:
            data.update(options)

        try:
            response = requests.post(
                f"{self.base_url}/chat/completions",
                json=data,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Error connecting to completion provider: {str(e)}")
            raise AIError("Completion request failed") from e

        if response.status_code != 200:
            logger.error(f"Completion request failed with status code: {response.status_code}, "
                         f"body: {response.text[:500]}")
            raise AIError(f"Completion request failed with status code {response.status_code}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Malformed completion response: {str(e)}")
            raise AIError("Malformed completion response") from e

        if content is None:
            logger.error("Completion response has no content")
            raise AIError("Empty completion response")

        return content

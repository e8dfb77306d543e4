# ============================================
# issues/clients/completion_client.py
# ============================================
import logging
from typing import Dict, List, Optional

import requests
from django.conf import settings

from issues.exceptions import CompletionNotConfigured, CompletionServiceError

logger = logging.getLogger(__name__)


class CompletionClient:
    """Client for an OpenAI-compatible chat completion API"""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = 'https://api.openai.com/v1',
        model: str = 'gpt-3.5-turbo',
        max_tokens: int = 200,
        temperature: float = 0.7,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls) -> 'CompletionClient':
        return cls(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            model=settings.SUMMARY_MODEL,
            max_tokens=settings.SUMMARY_MAX_TOKENS,
            temperature=settings.SUMMARY_TEMPERATURE,
            timeout=settings.SUMMARY_TIMEOUT,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def complete(self, messages: List[Dict[str, str]]) -> Optional[str]:
        """
        Send one chat completion request.
        Returns the first choice's text, or None when the service sent none.
        """
        if not self.is_configured:
            raise CompletionNotConfigured()

        payload = {
            'model': self.model,
            'messages': messages,
            'max_tokens': self.max_tokens,
            'temperature': self.temperature,
        }

        try:
            response = self.session.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers={'Authorization': f"Bearer {self.api_key}"},
                timeout=self.timeout
            )
            response.raise_for_status()
            body = response.json()
        except requests.HTTPError as e:
            raise CompletionServiceError(self._describe_http_error(e.response)) from e
        except requests.RequestException as e:
            raise CompletionServiceError(str(e)) from e
        except ValueError as e:
            raise CompletionServiceError("Completion service returned invalid JSON") from e

        if not isinstance(body, dict):
            raise CompletionServiceError("Completion service returned an unexpected body")

        choices = body.get('choices') or []
        if not choices:
            return None

        if not isinstance(choices, list) or not isinstance(choices[0], dict):
            raise CompletionServiceError("Completion service returned malformed choices")

        message = choices[0].get('message') or {}
        if not isinstance(message, dict):
            raise CompletionServiceError("Completion service returned a malformed message")
        return message.get('content')

    @staticmethod
    def _describe_http_error(response: Optional[requests.Response]) -> str:
        if response is None:
            return "Completion service request failed"
        try:
            body = response.json()
        except ValueError:
            body = None

        # Gateways may answer with a bare string or list instead of an error object
        if isinstance(body, dict):
            error = body.get('error') or {}
            detail = error.get('message') if isinstance(error, dict) else str(error)
        elif body:
            detail = str(body)
        else:
            detail = None
        return f"{response.status_code}: {detail or response.reason}"

"""Anthropic Messages API client using httpx"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import httpx

from ...domain.types import SummarizerConfig
from .errors import LLMApiError

logger = logging.getLogger(__name__)


@dataclass
class ContentBlock:
    """One segment of a Messages API response"""
    type: str = 'text'
    text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> ContentBlock:
        if not isinstance(data, dict):
            raise LLMApiError(f"Content segment is not an object: {data!r}")
        text = data.get('text')
        if text is not None and not isinstance(text, str):
            raise LLMApiError(f"Content segment text is not a string: {text!r}")
        return cls(type=str(data.get('type', 'text')), text=text)


@dataclass
class MessagesResponse:
    """Typed view of the Messages API response body"""
    content: List[ContentBlock] = field(default_factory=list)
    id: Optional[str] = None
    model: Optional[str] = None
    stop_reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> MessagesResponse:
        """Validate a decoded response body"""
        if not isinstance(data, dict):
            raise LLMApiError("Response body is not a JSON object")

        content = data.get('content')
        if not isinstance(content, list):
            raise LLMApiError("Response has no content list")

        return cls(
            content=[ContentBlock.from_dict(block) for block in content],
            id=data.get('id'),
            model=data.get('model'),
            stop_reason=data.get('stop_reason'),
        )

    @classmethod
    def from_json(cls, body: str) -> MessagesResponse:
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise LLMApiError(f"Error decoding response: {e}") from e
        return cls.from_dict(data)

    def first_text(self) -> Optional[str]:
        """Text of the first segment that carries any, or None"""
        for block in self.content:
            if block.text:
                return block.text
        return None


class AnthropicClient:
    """Client for the hosted summarization API"""

    def __init__(self, config: SummarizerConfig, transport: Optional[httpx.BaseTransport] = None):
        if not config.api_key:
            raise LLMApiError("ANTHROPIC_API_KEY not found in environment")
        self.config = config
        self.transport = transport

    def _headers(self) -> dict:
        return {
            'Content-Type': 'application/json',
            'x-api-key': self.config.api_key,
            'anthropic-version': self.config.anthropic_version,
        }

    def build_payload(self, prompt: str) -> dict:
        return {
            'model': self.config.model,
            'messages': [
                {'role': 'user', 'content': prompt}
            ],
            'max_tokens': self.config.max_tokens,
        }

    def create_message(self, prompt: str) -> MessagesResponse:
        """Send one prompt and return the parsed response"""
        logger.info("Sending prompt to %s (length: %d chars)", self.config.model, len(prompt))

        try:
            with httpx.Client(timeout=self.config.timeout, transport=self.transport) as client:
                response = client.post(self.config.api_url, headers=self._headers(), json=self.build_payload(prompt))
        except httpx.TimeoutException as e:
            raise LLMApiError(f"Anthropic API timeout after {self.config.timeout}s") from e
        except httpx.HTTPError as e:
            raise LLMApiError(f"Error calling Anthropic API: {e}") from e
        except UnicodeEncodeError as e:
            # Header values must be ASCII
            raise LLMApiError(f"API key or headers contain non-ASCII characters: {e.reason}") from e

        logger.debug("Anthropic API response: %s", response.text)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 401:
                hint = "invalid API key"
            elif status == 429:
                hint = "rate limit exceeded"
            elif status == 404:
                hint = f"model not found: {self.config.model}"
            else:
                hint = e.response.text[:500]
            raise LLMApiError(f"Anthropic API HTTP {status}: {hint}", status_code=status) from e

        return MessagesResponse.from_json(response.text)

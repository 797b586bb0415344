"""Ollama client for local embeddings and text generation"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ...domain.types import SummarizerConfig
from .errors import LLMApiError

logger = logging.getLogger(__name__)


class OllamaClient:
    """Talk to a local Ollama service"""

    def __init__(self, config: SummarizerConfig, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = config.ollama_url.rstrip('/')
        self.embed_model = config.embed_model
        self.compress_model = config.compress_model
        self.timeout = config.timeout
        self.transport = transport

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(url, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise LLMApiError(f"Ollama {path} error: status {e.response.status_code}",
                              status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            raise LLMApiError(f"Error calling Ollama API at {url}: {e}") from e
        except ValueError as e:
            raise LLMApiError(f"Error decoding Ollama response: {e}") from e

        if not isinstance(data, dict):
            raise LLMApiError("Ollama response is not a JSON object")
        return data

    def embed(self, text: str) -> List[float]:
        """Get the embedding vector for text"""
        data = self._post('/api/embeddings', {'model': self.embed_model, 'prompt': text})

        embedding = data.get('embedding')
        if not isinstance(embedding, list):
            raise LLMApiError("Ollama embeddings response has no embedding")
        try:
            return [float(v) for v in embedding]
        except (TypeError, ValueError) as e:
            raise LLMApiError(f"Ollama embedding contains non-numeric values: {e}") from e

    def generate(self, prompt: str) -> str:
        """Run a single non-streaming completion"""
        data = self._post('/api/generate', {
            'model': self.compress_model,
            'prompt': prompt,
            'stream': False,
        })

        text = data.get('response')
        if not isinstance(text, str):
            raise LLMApiError("Ollama generate response has no text")
        logger.debug("Ollama %s returned %d chars", self.compress_model, len(text))
        return text

"""HTTP clients for the local and remote language-model APIs"""

from .errors import LLMApiError
from .anthropic import AnthropicClient, MessagesResponse, ContentBlock
from .ollama import OllamaClient

__all__ = ["LLMApiError", "AnthropicClient", "MessagesResponse", "ContentBlock", "OllamaClient"]

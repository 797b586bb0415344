"""prsummary system constants and default values"""

from typing import Final

# Remote summarization API
ANTHROPIC_API_URL: Final[str] = 'https://api.anthropic.com/v1/messages'
ANTHROPIC_VERSION: Final[str] = '2023-06-01'
ANTHROPIC_MODEL: Final[str] = 'claude-3-5-sonnet-latest'
LLM_MAX_OUTPUT_TOKENS: Final[int] = 4096

# Local Ollama service
OLLAMA_BASE_URL: Final[str] = 'http://localhost:11434'
OLLAMA_EMBED_MODEL: Final[str] = 'nomic-embed-text'
OLLAMA_COMPRESS_MODEL: Final[str] = 'llama3.2'

# Pipeline behaviour
MIN_COMMITS_FOR_SUMMARY: Final[int] = 1  # Remote call only when commits exist
HTTP_TIMEOUT_SECONDS: Final[float] = 120.0  # Local generation can be slow

SUMMARY_FALLBACK: Final[str] = 'Unable to generate summary'
CONFIG_FILE: Final[str] = '.prsummary.yml'
ENV_PREFIX: Final[str] = 'PRSUMMARY_'

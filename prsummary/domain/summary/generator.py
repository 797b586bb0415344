"""LLM summary generator for pull requests"""

import logging
from typing import Optional

import httpx

from ...infra.api import AnthropicClient, LLMApiError, OllamaClient
from ...shared.constants import SUMMARY_FALLBACK
from ..types import BranchChanges, SummarizerConfig
from . import prompts
from .embeddings import EmbeddingError, encode_embedding

logger = logging.getLogger(__name__)


class PRSummaryGenerator:
    """Turn branch changes into a short summary using the configured models.

    Network and parsing problems never escape: the local compression step
    falls back to the original content, everything else falls back to
    SUMMARY_FALLBACK.
    """

    def __init__(self, config: SummarizerConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self.transport = transport

    def should_summarize(self, changes: BranchChanges) -> bool:
        return changes.commit_count >= max(self.config.min_commits, 0)

    def summarize_changes(self, changes: BranchChanges) -> str:
        """Summary for the report, empty when there are too few commits"""
        if not self.should_summarize(changes):
            logger.info("Skipping summary: %d commits, %d required",
                        changes.commit_count, self.config.min_commits)
            return ''
        return self.summarize(changes.content)

    def summarize(self, content: str) -> str:
        """Generate a summary of the assembled diff content"""
        if not self.config.api_key:
            logger.error("ANTHROPIC_API_KEY is not set")
            return SUMMARY_FALLBACK

        if self.config.local_pipeline:
            prompt = self._build_local_prompt(content)
            if prompt is None:
                return SUMMARY_FALLBACK
        else:
            prompt = prompts.summary(content)

        try:
            response = AnthropicClient(self.config, transport=self.transport).create_message(prompt)
        except LLMApiError as e:
            logger.error("%s", e)
            return SUMMARY_FALLBACK

        text = response.first_text()
        if text is None:
            logger.error("Anthropic API returned no text content")
            return SUMMARY_FALLBACK
        return text

    def _build_local_prompt(self, content: str) -> Optional[str]:
        """Compress and embed through Ollama; None when embedding fails"""
        ollama = OllamaClient(self.config, transport=self.transport)

        try:
            compressed = ollama.generate(prompts.compress_changes(content))
        except LLMApiError as e:
            logger.error("Error compressing logs: %s", e)
            compressed = content

        try:
            encoded = encode_embedding(ollama.embed(compressed))
        except (LLMApiError, EmbeddingError) as e:
            logger.error("Error getting embeddings: %s", e)
            return None

        return prompts.summary_with_embeddings(encoded, compressed, content)

"""Data types shared across prsummary"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from ..shared import constants


@dataclass
class BranchChanges:
    """Everything git tells us about a branch relative to its base"""
    current_branch: str
    base_branch: str
    commits: str = ''
    diff: str = ''
    diff_stat: str = ''

    @property
    def commit_count(self) -> int:
        """Number of non-empty lines in the commit log"""
        return sum(1 for line in self.commits.splitlines() if line.strip())

    @property
    def content(self) -> str:
        """Diff and diff statistics assembled for the summarizer"""
        return f"Detailed Changes:\n{self.diff}\n\nChanges Overview:\n{self.diff_stat}"


@dataclass
class SummarizerConfig:
    """Explicit configuration for the summarization pipeline"""
    api_key: Optional[str] = field(default=None, repr=False)
    api_url: str = constants.ANTHROPIC_API_URL
    model: str = constants.ANTHROPIC_MODEL
    max_tokens: int = constants.LLM_MAX_OUTPUT_TOKENS
    anthropic_version: str = constants.ANTHROPIC_VERSION
    ollama_url: str = constants.OLLAMA_BASE_URL
    embed_model: str = constants.OLLAMA_EMBED_MODEL
    compress_model: str = constants.OLLAMA_COMPRESS_MODEL
    local_pipeline: bool = False
    min_commits: int = constants.MIN_COMMITS_FOR_SUMMARY
    timeout: float = constants.HTTP_TIMEOUT_SECONDS

"""Summary generation for pull requests"""

from .generator import PRSummaryGenerator

__all__ = ["PRSummaryGenerator"]

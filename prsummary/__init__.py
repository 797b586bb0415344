"""prsummary - Pull request summaries from git history and an LLM"""

__version__ = '0.1.0'

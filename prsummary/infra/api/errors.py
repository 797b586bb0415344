"""Errors raised by the LLM API clients"""

from typing import Optional


class LLMApiError(Exception):
    """Raised when an LLM endpoint cannot be reached or returns unusable data"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

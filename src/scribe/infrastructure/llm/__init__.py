"""LLM integration."""

from scribe.infrastructure.llm.client import LLMClient
from scribe.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
)
from scribe.infrastructure.llm.summarizer import LLMSummarizer, SystemPromptSource

__all__ = [
    "LLMAuthenticationError",
    "LLMClient",
    "LLMError",
    "LLMRateLimitError",
    "LLMResponseError",
    "LLMSummarizer",
    "LLMTimeoutError",
    "SystemPromptSource",
]

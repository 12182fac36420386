"""LLM client wrapper."""

import asyncio
import logging
from typing import Any

import litellm
from litellm.exceptions import AuthenticationError, RateLimitError, Timeout

from scribe.config import LLMConfig
from scribe.infrastructure.llm.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
)

logger = logging.getLogger(__name__)


class LLMClient:
    """LiteLLM wrapper client.

    This class provides a simplified async interface to LiteLLM,
    applying configuration, a bounded timeout and error mapping.
    """

    def __init__(self, config: LLMConfig) -> None:
        """Initialize the client.

        Args:
            config: LLM configuration (model, credentials, timeout, etc.).
        """
        self._config = config

    @property
    def model(self) -> str:
        return self._config.model

    async def complete(
        self,
        messages: list[dict[str, str]],
        **kwargs: Any,
    ) -> str:
        """Execute chat completion.

        Args:
            messages: OpenAI-format message list.
                [{"role": "system", "content": "..."}, ...]
            **kwargs: Additional parameters (override config).

        Returns:
            Generated text. Empty string if the response had no content.

        Raises:
            LLMAuthenticationError: Invalid API key.
            LLMRateLimitError: Rate limit exceeded.
            LLMTimeoutError: Request exceeded the timeout.
            LLMResponseError: Response without choices or with a malformed message.
            LLMError: Other API errors.
        """
        timeout = self._config.timeout_seconds
        params: dict[str, Any] = {
            "model": self._config.model,
            "api_key": self._config.api_key,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "timeout": timeout,
            "messages": messages,
        }
        if self._config.api_base:
            params["api_base"] = self._config.api_base
        params.update(kwargs)

        logger.debug("LLM request: model=%s", params["model"])

        try:
            response = await asyncio.wait_for(
                litellm.acompletion(**params), timeout=timeout
            )
        except asyncio.TimeoutError as e:
            logger.error("LLM request timed out after %.0fs", timeout)
            raise LLMTimeoutError(f"Request timed out after {timeout:.0f}s") from e
        except Timeout as e:
            logger.error("LLM request timed out: %s", e)
            raise LLMTimeoutError(str(e)) from e
        except AuthenticationError as e:
            logger.error("LLM authentication error: %s", e)
            raise LLMAuthenticationError(str(e)) from e
        except RateLimitError as e:
            logger.warning("LLM rate limit exceeded: %s", e)
            raise LLMRateLimitError(str(e)) from e
        except Exception as e:
            logger.error("LLM error: %s", e)
            raise LLMError(str(e)) from e

        choices = getattr(response, "choices", None)
        if not choices:
            logger.error("LLM response has no choices")
            raise LLMResponseError("No response from LLM")

        message = getattr(choices[0], "message", None)
        if message is None:
            logger.error("LLM response choice has no message")
            raise LLMResponseError("Malformed response from LLM: no message")

        content = getattr(message, "content", None)
        if content is None:
            return ""
        if not isinstance(content, str):
            logger.error("LLM response content is %s, not str", type(content).__name__)
            raise LLMResponseError(
                f"Malformed response from LLM: content is {type(content).__name__}"
            )

        logger.debug("LLM response received (%d chars)", len(content))
        return content

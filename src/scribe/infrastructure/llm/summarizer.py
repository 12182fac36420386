"""LLM-based meeting summarizer."""

import logging
from collections.abc import Sequence
from pathlib import Path

from scribe.config import SummaryConfig
from scribe.domain.exceptions import SummarizationError
from scribe.infrastructure.llm.client import LLMClient
from scribe.infrastructure.llm.exceptions import LLMError
from scribe.infrastructure.llm.templates import create_jinja_env

logger = logging.getLogger(__name__)


class SystemPromptSource:
    """System prompt loaded from a file and reloaded when it changes.

    The file's modification time is checked on every access; an edited
    prompt takes effect on the next summary without a restart. If a reload
    fails the last good prompt is kept.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._mtime: float | None = None
        self._prompt = ""
        self._load()

    def _load(self) -> None:
        mtime = self._path.stat().st_mtime
        self._prompt = self._path.read_text(encoding="utf-8").strip()
        self._mtime = mtime
        logger.info(
            "System prompt loaded from %s (%d chars)", self._path, len(self._prompt)
        )

    def get(self) -> str:
        """Return the current prompt, reloading the file if it changed."""
        try:
            if self._path.stat().st_mtime != self._mtime:
                self._load()
        except OSError as e:
            logger.error("Error reloading system prompt from %s: %s", self._path, e)
        return self._prompt


class LLMSummarizer:
    """Summarizer implementation backed by LiteLLM.

    Implements the Summarizer protocol. The provider is selected by the
    model string of the LLM configuration.
    """

    def __init__(
        self,
        client: LLMClient,
        config: SummaryConfig | None = None,
        *,
        debug_llm_messages: bool = False,
    ) -> None:
        """Initialize the summarizer.

        Args:
            client: LLM client for text generation.
            config: Summary configuration (system prompt file).
            debug_llm_messages: If True, log prompts and responses at INFO level.

        Raises:
            OSError: If the configured system prompt file cannot be read.
        """
        self._client = client
        self._debug_llm_messages = debug_llm_messages
        jinja_env = create_jinja_env()
        self._request_template = jinja_env.get_template("summary_request.j2")

        prompt_file = config.system_prompt_file if config else None
        self._prompt_source: SystemPromptSource | None = None
        self._default_prompt = ""
        if prompt_file:
            self._prompt_source = SystemPromptSource(prompt_file)
        else:
            self._default_prompt = jinja_env.get_template("system_prompt.j2").render()

    def _get_system_prompt(self) -> str:
        if self._prompt_source is not None:
            return self._prompt_source.get()
        return self._default_prompt

    def build_messages(self, lines: Sequence[str]) -> list[dict[str, str]]:
        """Build the chat messages sent to the LLM.

        Args:
            lines: Transcript lines in chronological order.

        Returns:
            OpenAI-format message list.
        """
        user_prompt = self._request_template.render(
            lines=lines, line_count=len(lines)
        )
        return [
            {"role": "system", "content": self._get_system_prompt()},
            {"role": "user", "content": user_prompt},
        ]

    async def summarize(self, lines: Sequence[str]) -> str:
        """Summarize a transcript.

        Args:
            lines: Transcript lines in chronological order.

        Returns:
            Summary text, possibly empty.

        Raises:
            SummarizationError: If the LLM call failed.
        """
        messages = self.build_messages(lines)
        if self._debug_llm_messages:
            logger.info("LLM request messages: %s", messages)

        logger.info(
            "Sending %d lines to %s for summarization", len(lines), self._client.model
        )
        try:
            response = await self._client.complete(messages)
        except LLMError as e:
            raise SummarizationError(f"LLM service error: {e}") from e

        if self._debug_llm_messages:
            logger.info("LLM response: %s", response)

        return response.strip()

"""Tests for LLMSummarizer."""

import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from scribe.config import SummaryConfig
from scribe.domain.exceptions import SummarizationError
from scribe.infrastructure.llm import (
    LLMClient,
    LLMSummarizer,
    LLMTimeoutError,
    SystemPromptSource,
)

LINES = ["[09:00] alice: let's ship on Friday", "[09:01] bob: agreed"]


@pytest.fixture
def mock_client() -> MagicMock:
    client = MagicMock(spec=LLMClient)
    client.model = "gpt-4o"
    client.complete = AsyncMock(return_value="  ## Meeting Minutes\n")
    return client


class TestSystemPromptSource:
    """SystemPromptSource tests."""

    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prompt.txt"
        path.write_text("  Summarize tersely.\n", encoding="utf-8")

        assert SystemPromptSource(path).get() == "Summarize tersely."

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            SystemPromptSource(tmp_path / "missing.txt")

    def test_reloads_when_file_changes(self, tmp_path: Path) -> None:
        path = tmp_path / "prompt.txt"
        path.write_text("first", encoding="utf-8")
        source = SystemPromptSource(path)

        path.write_text("second", encoding="utf-8")
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 10))

        assert source.get() == "second"

    def test_keeps_last_prompt_when_file_disappears(self, tmp_path: Path) -> None:
        path = tmp_path / "prompt.txt"
        path.write_text("kept", encoding="utf-8")
        source = SystemPromptSource(path)

        path.unlink()

        assert source.get() == "kept"


class TestLLMSummarizer:
    """LLMSummarizer tests."""

    def test_build_messages_uses_default_prompt(self, mock_client: MagicMock) -> None:
        summarizer = LLMSummarizer(mock_client)

        messages = summarizer.build_messages(LINES)

        assert [m["role"] for m in messages] == ["system", "user"]
        assert "meeting minutes" in messages[0]["content"]
        assert "2 group chat messages" in messages[1]["content"]
        for line in LINES:
            assert line in messages[1]["content"]

    def test_build_messages_uses_prompt_file(
        self, mock_client: MagicMock, tmp_path: Path
    ) -> None:
        path = tmp_path / "prompt.txt"
        path.write_text("Custom prompt", encoding="utf-8")
        summarizer = LLMSummarizer(
            mock_client, SummaryConfig(system_prompt_file=str(path))
        )

        messages = summarizer.build_messages(LINES)

        assert messages[0]["content"] == "Custom prompt"

    async def test_summarize_returns_stripped_response(
        self, mock_client: MagicMock
    ) -> None:
        summarizer = LLMSummarizer(mock_client)

        result = await summarizer.summarize(LINES)

        assert result == "## Meeting Minutes"
        sent = mock_client.complete.call_args.args[0]
        assert sent == summarizer.build_messages(LINES)

    async def test_summarize_empty_response(self, mock_client: MagicMock) -> None:
        mock_client.complete.return_value = "   "
        summarizer = LLMSummarizer(mock_client)

        assert await summarizer.summarize(LINES) == ""

    async def test_summarize_wraps_llm_errors(self, mock_client: MagicMock) -> None:
        mock_client.complete.side_effect = LLMTimeoutError("Request timed out")
        summarizer = LLMSummarizer(mock_client)

        with pytest.raises(SummarizationError) as exc_info:
            await summarizer.summarize(LINES)

        assert exc_info.value.reason == "LLM service error: Request timed out"

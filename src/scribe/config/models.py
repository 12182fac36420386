"""設定データクラス"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class SlackConfig:
    """Slack接続設定"""

    bot_token: str
    app_token: str


@dataclass(frozen=True)
class LLMConfig:
    """LLM設定（LiteLLMのacompletionに渡す値）"""

    model: str
    api_key: str
    api_base: str | None = None
    temperature: float = 0.7
    max_tokens: int = 2000
    timeout_seconds: float = 120.0


@dataclass(frozen=True)
class BotConfig:
    """ボット設定

    Attributes:
        name: ボット名（ログ表示用）
        target_rooms: 監視対象ルーム名（部分一致、大文字小文字無視）。空なら全ルーム
    """

    name: str = "meeting-minutes-bot"
    target_rooms: tuple[str, ...] = ()


@dataclass(frozen=True)
class SummaryTriggerConfig:
    """要約トリガー設定

    Attributes:
        interval_minutes: 前回要約からの経過分数トリガー（0で無効）
        message_count: メッセージ数トリガー（0で無効）
        keyword: キーワードトリガー（空文字で無効）
        min_messages_for_summary: これ未満ではどのトリガーも発火しない
    """

    interval_minutes: int = 30
    message_count: int = 50
    keyword: str = "@bot summary"
    min_messages_for_summary: int = 5


@dataclass(frozen=True)
class SummaryConfig:
    """要約出力設定

    Attributes:
        system_prompt_file: システムプロンプトファイル（未指定なら組み込みテンプレート）
        destination: 要約の送信先（未指定なら発生元ルーム）
    """

    system_prompt_file: str | None = None
    destination: str | None = None


@dataclass(frozen=True)
class LoggingConfig:
    """ログ設定"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    loggers: dict[str, str] | None = None
    debug_llm_messages: bool = False


@dataclass(frozen=True)
class Config:
    """アプリケーション設定"""

    slack: SlackConfig
    llm: LLMConfig
    bot: BotConfig = field(default_factory=BotConfig)
    summary_trigger: SummaryTriggerConfig = field(default_factory=SummaryTriggerConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)
    max_buffer_size: int = 200
    logging: LoggingConfig | None = None

    def describe(self) -> Iterator[str]:
        """起動時にログ出力する設定の概要を返す"""
        trigger = self.summary_trigger
        yield f"Bot name: {self.bot.name}"
        yield f"LLM model: {self.llm.model}"
        if self.llm.api_base:
            yield f"LLM base URL: {self.llm.api_base}"
        if self.bot.target_rooms:
            yield f"Target rooms: {', '.join(self.bot.target_rooms)}"
        else:
            yield "Target rooms: all rooms"
        yield f"Max buffer size: {self.max_buffer_size}"
        if trigger.interval_minutes > 0:
            yield f"Time-based trigger: every {trigger.interval_minutes} minutes"
        else:
            yield "Time-based trigger: disabled"
        if trigger.message_count > 0:
            yield f"Volume-based trigger: every {trigger.message_count} messages"
        else:
            yield "Volume-based trigger: disabled"
        yield f"Keyword trigger: {trigger.keyword or 'disabled'}"
        yield f"Minimum messages for summary: {trigger.min_messages_for_summary}"

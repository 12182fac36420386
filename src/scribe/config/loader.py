"""YAML設定ファイルの読み込みと環境変数展開"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from scribe.config.models import (
    BotConfig,
    Config,
    LLMConfig,
    LoggingConfig,
    SlackConfig,
    SummaryConfig,
    SummaryTriggerConfig,
)


class ConfigError(Exception):
    """設定関連の基底例外"""


class ConfigValidationError(ConfigError):
    """設定値のバリデーションエラー"""


class EnvironmentVariableError(ConfigError):
    """環境変数が見つからないエラー"""


# 環境変数パターン: ${VAR_NAME} または ${VAR_NAME:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def expand_env_vars(value: str) -> str:
    """文字列中の ${VAR_NAME} を環境変数の値に置換する

    ${VAR_NAME:-default} の形式では、環境変数が未設定または空の場合に
    default を使用する。

    Args:
        value: 置換対象の文字列

    Returns:
        環境変数が展開された文字列

    Raises:
        EnvironmentVariableError: 環境変数が未設定（デフォルト値なし）
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        env_value = os.environ.get(var_name)
        if default is not None:
            return env_value or default
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    """データ構造を再帰的に走査し、文字列中の環境変数を展開する

    Args:
        data: 展開対象のデータ（dict, list, str, その他）

    Returns:
        環境変数が展開されたデータ
    """
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """必須フィールドの存在を検証する

    Args:
        data: 検証対象のdict
        field: フィールド名
        parent: 親フィールド名（エラーメッセージ用）

    Returns:
        フィールドの値

    Raises:
        ConfigValidationError: フィールドが存在しない
    """
    full_path = f"{parent}.{field}" if parent else field
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Section '{parent or field}' must be a mapping")
    if field not in data or data[field] is None or data[field] == "":
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _as_int(value: Any, path: str, minimum: int = 0) -> int:
    """整数値に変換し、下限を検証する

    環境変数展開後の値は文字列になるため、ここで変換する。
    """
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise ConfigValidationError(
            f"Field '{path}' must be an integer, got {value!r}"
        ) from None
    if result < minimum:
        raise ConfigValidationError(f"Field '{path}' must be >= {minimum}")
    return result


def _as_float(value: Any, path: str, allow_zero: bool = False) -> float:
    """数値に変換する。allow_zero が偽なら 0 以下を拒否する"""
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise ConfigValidationError(
            f"Field '{path}' must be a number, got {value!r}"
        ) from None
    if result < 0 or (result == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise ConfigValidationError(f"Field '{path}' must be {bound}")
    return result


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _parse_target_rooms(value: Any) -> tuple[str, ...]:
    """target_rooms をリストまたはカンマ区切り文字列から読み込む"""
    if value is None:
        return ()
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, list):
        items = [str(item) for item in value]
    else:
        raise ConfigValidationError("Field 'bot.target_rooms' must be a list")
    return tuple(item.strip() for item in items if item.strip())


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_config(path: str | Path) -> Config:
    """設定ファイルを読み込む

    Args:
        path: config.yaml のパス

    Returns:
        Config オブジェクト

    Raises:
        FileNotFoundError: ファイルが存在しない
        ConfigValidationError: 必須項目が欠落、または値が不正
        EnvironmentVariableError: 環境変数が未設定
        yaml.YAMLError: YAML構文エラー
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f) or {}

    # 環境変数を展開
    data = _expand_recursive(raw_data)

    # 必須セクションの検証
    slack_data = _validate_required_field(data, "slack")
    llm_data = _validate_required_field(data, "llm")

    # SlackConfig
    slack = SlackConfig(
        bot_token=_validate_required_field(slack_data, "bot_token", "slack"),
        app_token=_validate_required_field(slack_data, "app_token", "slack"),
    )

    # LLMConfig (api_key が無い場合は起動できない)
    llm = LLMConfig(
        model=_validate_required_field(llm_data, "model", "llm"),
        api_key=_validate_required_field(llm_data, "api_key", "llm"),
        api_base=_optional_str(llm_data.get("api_base")),
        temperature=_as_float(
            llm_data.get("temperature", 0.7), "llm.temperature", allow_zero=True
        ),
        max_tokens=_as_int(llm_data.get("max_tokens", 2000), "llm.max_tokens", 1),
        timeout_seconds=_as_float(
            llm_data.get("timeout_seconds", 120.0), "llm.timeout_seconds"
        ),
    )

    # BotConfig (optional)
    bot_data = data.get("bot") or {}
    bot = BotConfig(
        name=str(bot_data.get("name") or "meeting-minutes-bot"),
        target_rooms=_parse_target_rooms(bot_data.get("target_rooms")),
    )

    # SummaryTriggerConfig (optional)
    trigger_data = data.get("summary_trigger") or {}
    summary_trigger = SummaryTriggerConfig(
        interval_minutes=_as_int(
            trigger_data.get("interval_minutes", 30),
            "summary_trigger.interval_minutes",
        ),
        message_count=_as_int(
            trigger_data.get("message_count", 50), "summary_trigger.message_count"
        ),
        keyword=str(trigger_data.get("keyword", "@bot summary") or ""),
        min_messages_for_summary=_as_int(
            trigger_data.get("min_messages_for_summary", 5),
            "summary_trigger.min_messages_for_summary",
        ),
    )

    # SummaryConfig (optional)
    summary_data = data.get("summary") or {}
    summary = SummaryConfig(
        system_prompt_file=_optional_str(summary_data.get("system_prompt_file")),
        destination=_optional_str(summary_data.get("destination")),
    )

    max_buffer_size = _as_int(data.get("max_buffer_size", 200), "max_buffer_size", 1)

    # LoggingConfig (optional)
    logging_config: LoggingConfig | None = None
    logging_data = data.get("logging")
    if logging_data:
        logging_config = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get(
                "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
            loggers=logging_data.get("loggers"),
            debug_llm_messages=_as_bool(logging_data.get("debug_llm_messages", False)),
        )

    return Config(
        slack=slack,
        llm=llm,
        bot=bot,
        summary_trigger=summary_trigger,
        summary=summary,
        max_buffer_size=max_buffer_size,
        logging=logging_config,
    )

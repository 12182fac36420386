"""設定管理モジュール"""

from scribe.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from scribe.config.models import (
    BotConfig,
    Config,
    LLMConfig,
    LoggingConfig,
    SlackConfig,
    SummaryConfig,
    SummaryTriggerConfig,
)

__all__ = [
    "BotConfig",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LLMConfig",
    "LoggingConfig",
    "SlackConfig",
    "SummaryConfig",
    "SummaryTriggerConfig",
    "expand_env_vars",
    "load_config",
]

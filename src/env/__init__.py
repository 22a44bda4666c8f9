from env.env import (
    ConfigError,
    DEFAULT_LOGS_DIR,
    LoggingEnvironment,
    get_logging_env,
    resolve_logs_dir,
)

__all__ = [
    "ConfigError",
    "DEFAULT_LOGS_DIR",
    "LoggingEnvironment",
    "get_logging_env",
    "resolve_logs_dir",
]

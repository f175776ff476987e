from memberwise.core.config import Config, EqualitySettings, load_config_from_env
from memberwise.core.errors import ConfigError, MemberwiseError, UnsupportedMemberError
from memberwise.core.logging import configure_logging, get_logger

__all__ = [
    "Config",
    "EqualitySettings",
    "load_config_from_env",
    "ConfigError",
    "MemberwiseError",
    "UnsupportedMemberError",
    "configure_logging",
    "get_logger",
]

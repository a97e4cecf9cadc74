"""Config: load .env, expose D3TREE_SCRIPT_SOURCE and D3TREE_LOG_LEVEL."""
from .config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SCRIPT_SOURCE,
    load_env,
    get_script_source,
    get_log_level,
)

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SCRIPT_SOURCE",
    "load_env",
    "get_script_source",
    "get_log_level",
]

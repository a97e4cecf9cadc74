"""
Load .env from project root; expose D3TREE_SCRIPT_SOURCE, D3TREE_LOG_LEVEL.
Getters call load_env() themselves; variables already in the environment win over .env.
"""
from __future__ import annotations

import os
from pathlib import Path

DEFAULT_SCRIPT_SOURCE = "https://d3js.org/d3.v3.min.js"
DEFAULT_LOG_LEVEL = "INFO"


def _project_root() -> Path:
    """Project root (directory containing src/)."""
    p = Path(__file__).resolve()
    # src/config/config.py -> two levels up
    for _ in range(3):
        p = p.parent
        if (p / "src").is_dir():
            return p
    return Path.cwd()


def load_env() -> None:
    """Load env vars from project root .env if present."""
    env_file = _project_root() / ".env"
    if not env_file.is_file():
        return
    for line in env_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, _, v = line.partition("=")
        k, v = k.strip(), v.strip().strip("'\"")
        if k and v:
            os.environ.setdefault(k, v)


def get_script_source() -> str:
    """URL of the d3.js script referenced by the page (D3TREE_SCRIPT_SOURCE)."""
    load_env()
    return os.environ.get("D3TREE_SCRIPT_SOURCE") or DEFAULT_SCRIPT_SOURCE


def get_log_level() -> str:
    """Log level name for the command line (D3TREE_LOG_LEVEL). Default: INFO."""
    load_env()
    return (os.environ.get("D3TREE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

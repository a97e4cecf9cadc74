"""
Errors raised while turning a tree into a d3 document.
"""
from __future__ import annotations

from pathlib import Path


class D3TreeError(Exception):
    """Base class for every error raised by the document pipeline."""


class ConfigurationConflictError(D3TreeError, ValueError):
    """Two options were requested together that cannot both hold (e.g. iframe without standalone)."""


class InvalidOptionError(D3TreeError, ValueError):
    """A single render option is out of range."""


class InvalidInputKind(D3TreeError, TypeError):
    """The tree root is not a mapping."""


class TemplateSubstitutionError(D3TreeError):
    """A template placeholder had no bound value; the catalog and composer disagree."""


class IOWriteError(D3TreeError, OSError):
    """The output file could not be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot write {self.path}: {reason}")

"""Tree input: root check, JSON serialization, error types."""
from .errors import (
    D3TreeError,
    ConfigurationConflictError,
    InvalidOptionError,
    InvalidInputKind,
    TemplateSubstitutionError,
    IOWriteError,
)
from .serialize import TreeNode, check_tree, serialize_tree, root_assignment

__all__ = [
    "D3TreeError",
    "ConfigurationConflictError",
    "InvalidOptionError",
    "InvalidInputKind",
    "TemplateSubstitutionError",
    "IOWriteError",
    "TreeNode",
    "check_tree",
    "serialize_tree",
    "root_assignment",
]

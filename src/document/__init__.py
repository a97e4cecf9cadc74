"""Document: render options, output modes, page assembly (d3_tree)."""
from .options import OutputMode, RenderConfig, resolve_output_mode
from .assemble import (
    build_document,
    d3_tree,
    generated_file_name,
    iframe_snippet,
    random_token,
    write_document,
)

__all__ = [
    "OutputMode",
    "RenderConfig",
    "resolve_output_mode",
    "build_document",
    "d3_tree",
    "generated_file_name",
    "iframe_snippet",
    "random_token",
    "write_document",
]

"""Templates: fixed d3 page text (catalog) and placeholder filling (compose)."""
from .catalog import (
    CLOSING_MARKER,
    PLACEHOLDERS,
    TemplateRole,
    Variant,
    get_template,
)
from .compose import TemplateBlocks, compose_blocks, format_number, template_context

__all__ = [
    "CLOSING_MARKER",
    "PLACEHOLDERS",
    "TemplateRole",
    "Variant",
    "get_template",
    "TemplateBlocks",
    "compose_blocks",
    "format_number",
    "template_context",
]

"""
Fill catalog templates from a RenderConfig with jinja2.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NamedTuple

import jinja2

from ..tree.errors import TemplateSubstitutionError
from .catalog import TemplateRole, Variant, get_template

if TYPE_CHECKING:
    from ..document.options import RenderConfig

logger = logging.getLogger(__name__)

_ENV = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)


class TemplateBlocks(NamedTuple):
    page_head: str
    style_sheet: str
    script_prefix: str
    script_suffix: str


def format_number(value: float) -> str:
    """Shortest decimal text: 19.0 -> '19', 0.45 -> '0.45', 642.0000000000001 -> '642'."""
    v = round(float(value), 6)
    if v == int(v):
        return str(int(v))
    return repr(v)


def template_context(config: "RenderConfig") -> dict[str, Any]:
    """Bind every placeholder; derived values are computed once here."""
    return {
        "height": format_number(config.height),
        "width": format_number(config.width),
        "fontsize": format_number(config.fontsize),
        "fontsizeBig": format_number(config.fontsize_big),
        "linkColour": config.link_colour,
        "nodeColour": config.node_colour,
        "textColour": config.text_colour,
        "opacity": format_number(config.opacity),
        "linkOpacity": format_number(config.link_opacity),
        "diameter": format_number(config.diameter),
        "d3Script": config.script_source,
    }


def render_template(source: str, context: dict[str, Any], role: TemplateRole) -> str:
    try:
        return _ENV.from_string(source).render(context)
    except jinja2.UndefinedError as e:
        raise TemplateSubstitutionError(f"Unbound placeholder in {role.value}: {e.message}") from e
    except jinja2.TemplateSyntaxError as e:
        raise TemplateSubstitutionError(f"Malformed template {role.value}: {e.message}") from e


def compose_blocks(config: "RenderConfig", variant: Variant | None = None) -> TemplateBlocks:
    """
    Render the four template roles for one variant. The variant follows config.zoom
    unless given; the two variants are never mixed in one result.
    """
    if variant is None:
        variant = Variant.ZOOM if config.zoom else Variant.STATIC
    context = template_context(config)
    logger.debug("Composing %s templates", variant.value)
    return TemplateBlocks(
        *(render_template(get_template(role, variant), context, role) for role in TemplateRole)
    )

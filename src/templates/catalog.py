"""
Fixed page templates for the radial Reingold-Tilford tree (d3 v3).

Placeholders use `{{ name }}`; the set of names is closed (PLACEHOLDERS).
Head and stylesheet are shared; the two script blocks come in a static and a zoomable variant.
"""
from __future__ import annotations

from enum import Enum


class TemplateRole(Enum):
    PAGE_HEAD = "page_head"
    STYLE_SHEET = "style_sheet"
    SCRIPT_PREFIX = "script_prefix"
    SCRIPT_SUFFIX = "script_suffix"


class Variant(Enum):
    STATIC = "static"
    ZOOM = "zoom"


PLACEHOLDERS = frozenset({
    "height",
    "width",
    "fontsize",
    "fontsizeBig",
    "linkColour",
    "nodeColour",
    "textColour",
    "opacity",
    "linkOpacity",
    "diameter",
    "d3Script",
})

CLOSING_MARKER = "</body>"

PAGE_HEAD = """<!DOCTYPE html>
<meta charset="utf-8">
<body>
"""

STYLE_SHEET = """<style>
.node circle {
  fill: #fff;
  stroke: {{ nodeColour }};
  stroke-width: 1.5px;
}

.node {
  font: {{ fontsize }}px sans-serif;
  opacity: {{ opacity }};
}

.link {
  fill: none;
  stroke: {{ linkColour }};
  opacity: {{ linkOpacity }};
  stroke-width: 1.5px;
}
</style>
"""

STATIC_SCRIPT_PREFIX = """<script src="{{ d3Script }}"></script>
<script>
var diameter = {{ diameter }};

var tree = d3.layout.tree()
    .size([360, diameter / 2 - 120])
    .separation(function(a, b) { return (a.parent == b.parent ? 1 : 2) / a.depth; });

var diagonal = d3.svg.diagonal.radial()
    .projection(function(d) { return [d.y, d.x / 180 * Math.PI]; });

var svg = d3.select("body").append("svg")
    .attr("width", {{ width }})
    .attr("height", {{ height }})
  .append("g")
    .attr("transform", "translate(" + {{ width }} / 2 + "," + {{ height }} / 2 + ")");

"""

ZOOM_SCRIPT_PREFIX = """<script src="{{ d3Script }}"></script>
<script>
var diameter = {{ diameter }};

var tree = d3.layout.tree()
    .size([360, diameter / 2 - 120])
    .separation(function(a, b) { return (a.parent == b.parent ? 1 : 2) / a.depth; });

var diagonal = d3.svg.diagonal.radial()
    .projection(function(d) { return [d.y, d.x / 180 * Math.PI]; });

var zoom = d3.behavior.zoom()
    .scaleExtent([0.5, 8])
    .on("zoom", redraw);

var svg = d3.select("body").append("svg")
    .attr("width", {{ width }})
    .attr("height", {{ height }})
  .append("g")
    .call(zoom)
  .append("g");

svg.append("rect")
    .attr("class", "overlay")
    .attr("x", -{{ width }} / 2)
    .attr("y", -{{ height }} / 2)
    .attr("width", {{ width }})
    .attr("height", {{ height }})
    .style("fill", "none")
    .style("pointer-events", "all");

var center = [{{ width }} / 2, {{ height }} / 2];
zoom.translate(center);
svg.attr("transform", "translate(" + center + ")");

function redraw() {
  svg.attr("transform",
      "translate(" + d3.event.translate + ")" + " scale(" + d3.event.scale + ")");
}

"""

_SCRIPT_SUFFIX_BODY = """var nodes = tree.nodes(root),
    links = tree.links(nodes);

var link = svg.selectAll(".link")
    .data(links)
  .enter().append("path")
    .attr("class", "link")
    .attr("d", diagonal);

var node = svg.selectAll(".node")
    .data(nodes)
  .enter().append("g")
    .attr("class", "node")
    .attr("transform", function(d) { return "rotate(" + (d.x - 90) + ")translate(" + d.y + ")"; })
    .on("mouseover", mouseover)
    .on("mouseout", mouseout);

node.append("circle")
    .attr("r", 4.5);

node.append("text")
    .attr("dy", ".31em")
    .attr("text-anchor", function(d) { return d.x < 180 ? "start" : "end"; })
    .attr("transform", function(d) { return d.x < 180 ? "translate(8)" : "rotate(180)translate(-8)"; })
    .style("fill", "{{ textColour }}")
    .text(function(d) { return d.name; });

function mouseover() {
  d3.select(this).select("circle").transition()
      .duration(750)
      .attr("r", 9);
  d3.select(this).select("text").transition()
      .duration(750)
      .style("stroke-width", ".5px")
      .style("font", "{{ fontsizeBig }}px sans-serif")
      .style("opacity", 1);
}

function mouseout() {
  d3.select(this).select("circle").transition()
      .duration(750)
      .attr("r", 4.5);
  d3.select(this).select("text").transition()
      .duration(750)
      .style("font", "{{ fontsize }}px sans-serif")
      .style("opacity", {{ opacity }});
}
"""

STATIC_SCRIPT_SUFFIX = _SCRIPT_SUFFIX_BODY + """
d3.select(self.frameElement).style("height", diameter - 150 + "px");
</script>
"""

ZOOM_SCRIPT_SUFFIX = _SCRIPT_SUFFIX_BODY + """
d3.select(self.frameElement).style("height", {{ height }} + "px");
</script>
"""

_CATALOG: dict[tuple[TemplateRole, Variant], str] = {
    (TemplateRole.PAGE_HEAD, Variant.STATIC): PAGE_HEAD,
    (TemplateRole.PAGE_HEAD, Variant.ZOOM): PAGE_HEAD,
    (TemplateRole.STYLE_SHEET, Variant.STATIC): STYLE_SHEET,
    (TemplateRole.STYLE_SHEET, Variant.ZOOM): STYLE_SHEET,
    (TemplateRole.SCRIPT_PREFIX, Variant.STATIC): STATIC_SCRIPT_PREFIX,
    (TemplateRole.SCRIPT_PREFIX, Variant.ZOOM): ZOOM_SCRIPT_PREFIX,
    (TemplateRole.SCRIPT_SUFFIX, Variant.STATIC): STATIC_SCRIPT_SUFFIX,
    (TemplateRole.SCRIPT_SUFFIX, Variant.ZOOM): ZOOM_SCRIPT_SUFFIX,
}


def get_template(role: TemplateRole, variant: Variant) -> str:
    """Raw template text for one role of one variant."""
    return _CATALOG[(role, variant)]

"""
Render options and output-mode resolution.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..config import DEFAULT_SCRIPT_SOURCE
from ..tree.errors import ConfigurationConflictError, InvalidOptionError

# Iframe is drawn slightly larger than the graph
FRAME_HEIGHT_MARGIN = 0.07
FRAME_WIDTH_MARGIN = 0.03
LINK_OPACITY_RATIO = 0.5
FONTSIZE_BIG_RATIO = 1.9


def _check_positive(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOptionError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidOptionError(f"{name} must be a positive number, got {value!r}")


@dataclass(frozen=True)
class RenderConfig:
    height: float = 600
    width: float = 900
    fontsize: float = 10
    link_colour: str = "#ccc"
    node_colour: str = "#3182bd"
    text_colour: str = "#3182bd"
    opacity: float = 0.9
    diameter: float = 980
    zoom: bool = False
    script_source: str = DEFAULT_SCRIPT_SOURCE

    def __post_init__(self) -> None:
        for name in ("height", "width", "fontsize", "diameter"):
            _check_positive(name, getattr(self, name))
        _check_positive("opacity", self.opacity)
        if self.opacity > 1:
            raise InvalidOptionError(f"opacity must be in (0, 1], got {self.opacity!r}")

    @property
    def link_opacity(self) -> float:
        return self.opacity * LINK_OPACITY_RATIO

    @property
    def fontsize_big(self) -> float:
        """Label size on mouseover."""
        return self.fontsize * FONTSIZE_BIG_RATIO

    @property
    def frame_height(self) -> float:
        return self.height + self.height * FRAME_HEIGHT_MARGIN

    @property
    def frame_width(self) -> float:
        return self.width + self.width * FRAME_WIDTH_MARGIN


class OutputMode(Enum):
    CONSOLE_FRAGMENT = "console_fragment"
    CONSOLE_STANDALONE = "console_standalone"
    FILE_FRAGMENT = "file_fragment"
    FILE_STANDALONE = "file_standalone"
    FILE_STANDALONE_WITH_IFRAME = "file_standalone_with_iframe"

    @property
    def writes_file(self) -> bool:
        return self in (
            OutputMode.FILE_FRAGMENT,
            OutputMode.FILE_STANDALONE,
            OutputMode.FILE_STANDALONE_WITH_IFRAME,
        )

    @property
    def stand_alone(self) -> bool:
        return self in (
            OutputMode.CONSOLE_STANDALONE,
            OutputMode.FILE_STANDALONE,
            OutputMode.FILE_STANDALONE_WITH_IFRAME,
        )


# (file given, stand_alone, iframe) -> mode; iframe does not matter without a file
_MODE_TABLE: dict[tuple[bool, bool, bool], OutputMode] = {
    (False, False, False): OutputMode.CONSOLE_FRAGMENT,
    (False, True, False): OutputMode.CONSOLE_STANDALONE,
    (False, True, True): OutputMode.CONSOLE_STANDALONE,
    (True, False, False): OutputMode.FILE_FRAGMENT,
    (True, True, False): OutputMode.FILE_STANDALONE,
    (True, True, True): OutputMode.FILE_STANDALONE_WITH_IFRAME,
}


def check_iframe(stand_alone: bool, iframe: bool) -> None:
    if iframe and not stand_alone:
        raise ConfigurationConflictError("If iframe = True then stand_alone must be True.")


def resolve_output_mode(file_given: bool, stand_alone: bool, iframe: bool) -> OutputMode:
    """Look up the single output mode for these flags."""
    check_iframe(stand_alone, iframe)
    return _MODE_TABLE[(bool(file_given), bool(stand_alone), bool(iframe))]

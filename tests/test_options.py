"""Tests for RenderConfig and output-mode resolution."""
from __future__ import annotations

import dataclasses
import itertools

import pytest

from src.document import OutputMode, RenderConfig, resolve_output_mode
from src.tree import ConfigurationConflictError, InvalidOptionError


def test_render_config_defaults():
    cfg = RenderConfig()
    assert (cfg.height, cfg.width, cfg.fontsize, cfg.diameter) == (600, 900, 10, 980)
    assert (cfg.link_colour, cfg.node_colour, cfg.text_colour) == ("#ccc", "#3182bd", "#3182bd")
    assert cfg.opacity == 0.9
    assert cfg.zoom is False


def test_render_config_is_immutable():
    cfg = RenderConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.height = 10


def test_frame_dimensions():
    cfg = RenderConfig(height=600, width=900)
    assert cfg.frame_height == 600 + 600 * 0.07
    assert cfg.frame_width == 900 + 900 * 0.03


@pytest.mark.parametrize(
    "kwargs",
    [
        {"height": 0},
        {"width": -1},
        {"fontsize": "10"},
        {"diameter": float("nan")},
        {"opacity": 0},
        {"opacity": 1.5},
        {"height": True},
    ],
)
def test_render_config_rejects_bad_values(kwargs):
    with pytest.raises(InvalidOptionError):
        RenderConfig(**kwargs)


def test_opacity_one_is_allowed():
    assert RenderConfig(opacity=1).link_opacity == 0.5


@pytest.mark.parametrize(
    "file_given,stand_alone,iframe,expected",
    [
        (False, False, False, OutputMode.CONSOLE_FRAGMENT),
        (False, True, False, OutputMode.CONSOLE_STANDALONE),
        (False, True, True, OutputMode.CONSOLE_STANDALONE),
        (True, False, False, OutputMode.FILE_FRAGMENT),
        (True, True, False, OutputMode.FILE_STANDALONE),
        (True, True, True, OutputMode.FILE_STANDALONE_WITH_IFRAME),
    ],
)
def test_resolve_output_mode(file_given, stand_alone, iframe, expected):
    assert resolve_output_mode(file_given, stand_alone, iframe) is expected


def test_output_mode_table_is_exhaustive():
    """Each flag combination gives one mode, or a conflict when iframe lacks stand_alone."""
    for file_given, stand_alone, iframe in itertools.product([False, True], repeat=3):
        if iframe and not stand_alone:
            with pytest.raises(ConfigurationConflictError):
                resolve_output_mode(file_given, stand_alone, iframe)
        else:
            assert isinstance(resolve_output_mode(file_given, stand_alone, iframe), OutputMode)


def test_output_mode_flags():
    assert OutputMode.CONSOLE_FRAGMENT.writes_file is False
    assert OutputMode.CONSOLE_FRAGMENT.stand_alone is False
    assert OutputMode.FILE_FRAGMENT.writes_file is True
    assert OutputMode.FILE_FRAGMENT.stand_alone is False
    assert OutputMode.FILE_STANDALONE_WITH_IFRAME.stand_alone is True

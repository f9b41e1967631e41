"""Tests for the style table."""

from __future__ import annotations

import dataclasses

import pytest

from plant_report.style import DEFAULT_STYLE, StyleConstants


def test_derived_dimensions():
    """Content width and label band height derive from the base constants."""
    assert DEFAULT_STYLE.content_width == DEFAULT_STYLE.canvas_width - 2 * DEFAULT_STYLE.padding
    assert DEFAULT_STYLE.label_band_height == (
        DEFAULT_STYLE.header_band_height - DEFAULT_STYLE.category_band_height
    )


def test_style_is_immutable():
    """The style table cannot be modified in place."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_STYLE.row_height = 30  # type: ignore[misc]


def test_style_override():
    """A replaced style recomputes its derived dimensions."""
    wide = dataclasses.replace(DEFAULT_STYLE, canvas_width=1600)
    assert wide.content_width == 1600 - 2 * DEFAULT_STYLE.padding
    assert StyleConstants().canvas_width == 1200

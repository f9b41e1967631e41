"""Tests for surface allocation and output."""

from __future__ import annotations

from pathlib import Path

import pytest

from plant_report import surface as surface_mod
from plant_report.errors import ConfigurationError
from plant_report.layout import LayoutPlan, plan_layout
from plant_report.style import DEFAULT_STYLE
from plant_report.surface import allocate, fit_text, text_width

from factories import make_model


def _plan() -> LayoutPlan:
    return plan_layout(make_model(), DEFAULT_STYLE)


def test_pixel_size_scales_with_ratio():
    """The raster is the logical size times the device pixel ratio."""
    plan = _plan()
    surface = allocate(plan, 2.0)
    try:
        assert surface.pixel_size == (2400, int(plan.height * 2))
        pix = surface.pixmap()
        assert (pix.width, pix.height) == surface.pixel_size
    finally:
        surface.close()


def test_fractional_ratio():
    """Fractional ratios round the raster size up."""
    surface = allocate(_plan(), 1.5)
    try:
        assert surface.pixel_size[0] == 1800
    finally:
        surface.close()


@pytest.mark.parametrize("ratio", [0, -1.0, float("nan"), float("inf"), True, "2"])
def test_invalid_ratio_raises(ratio):
    """Non-positive, non-finite and non-numeric ratios are configuration errors."""
    with pytest.raises(ConfigurationError):
        allocate(_plan(), ratio)


def test_invalid_plan_size_raises():
    """A zero-height plan cannot get a surface."""
    with pytest.raises(ConfigurationError):
        allocate(LayoutPlan(width=1200, height=0, sections=()), 2.0)


def test_backend_failure_raises_configuration_error(monkeypatch):
    """A PyMuPDF failure while opening the page becomes a ConfigurationError."""
    def _boom(*args, **kwargs):
        raise RuntimeError("out of memory")

    monkeypatch.setattr(surface_mod.fitz, "open", _boom)
    with pytest.raises(ConfigurationError, match="out of memory"):
        allocate(_plan(), 2.0)


def test_each_allocation_is_independent():
    """Two surfaces never share a document or recorded ops."""
    plan = _plan()
    first = allocate(plan, 2.0)
    second = allocate(plan, 2.0)
    try:
        first.rect(0, 0, 10, 10, fill=(0, 0, 0))
        assert first.doc is not second.doc
        assert len(first.ops) == 1
        assert second.ops == []
    finally:
        first.close()
        second.close()


def test_text_records_bbox():
    """Centred text records a bbox around its anchor and baseline."""
    surface = allocate(_plan(), 1.0)
    try:
        width = surface.text(100, 50, "Hour", "helv", 10, (0, 0, 0), align="center")
        op = surface.ops[-1]
        assert op.kind == "text"
        assert op.text == "Hour"
        assert op.bbox[0] == pytest.approx(100 - width / 2)
        assert op.bbox[2] == pytest.approx(100 + width / 2)
        assert op.bbox[1] < 50 <= op.bbox[3]
    finally:
        surface.close()


def test_text_clipped_with_ellipsis():
    """Text wider than the limit is cut and ends with '...'."""
    long = "Kiln inlet temperature average"
    clipped = fit_text(long, 60, "helv", 10)
    assert clipped.endswith("...")
    assert text_width(clipped, "helv", 10) <= 60
    assert fit_text("ok", 60, "helv", 10) == "ok"


def test_text_with_no_room_draws_nothing():
    """With no room at all nothing is drawn or recorded."""
    surface = allocate(_plan(), 1.0)
    try:
        assert surface.text(10, 10, "Silo", "helv", 10, (0, 0, 0), max_width=0) == 0.0
        assert surface.ops == []
    finally:
        surface.close()


def test_save_png_and_pdf(tmp_path):
    """The suffix picks PNG or PDF unless a format is forced."""
    surface = allocate(_plan(), 1.0)
    try:
        surface.rect(10, 10, 100, 100, fill=(1, 0, 0))
        surface.save(str(tmp_path / "report.png"))
        surface.save(str(tmp_path / "report.pdf"))
        surface.save(str(tmp_path / "forced.bin"), fmt="pdf")
    finally:
        surface.close()
    assert Path(tmp_path / "report.png").read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert Path(tmp_path / "report.pdf").read_bytes()[:5] == b"%PDF-"
    assert Path(tmp_path / "forced.bin").read_bytes()[:5] == b"%PDF-"

"""Drawing surface backed by a single PyMuPDF page.

Drawing happens in logical units on a page sized to the LayoutPlan.  The
backing raster is produced at ``logical size x device pixel ratio`` through
a uniform scale matrix, so geometry never has to know about pixel density.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

import fitz  # PyMuPDF

from .errors import ConfigurationError
from .layout import LayoutPlan, SectionKind

logger = logging.getLogger("plant_report.surface")

_FONT_METRICS: dict[str, fitz.Font] = {
    "helv": fitz.Font("helv"),
    "hebo": fitz.Font("hebo"),
}


def _font(fontname: str) -> fitz.Font:
    if fontname not in _FONT_METRICS:
        _FONT_METRICS[fontname] = fitz.Font(fontname)
    return _FONT_METRICS[fontname]


def text_width(text: str, fontname: str, fontsize: float) -> float:
    """Return the rendered width of *text* in logical units."""
    return _font(fontname).text_length(text, fontsize=fontsize)


def fit_text(text: str, max_width: float, fontname: str, fontsize: float) -> str:
    """Truncate *text* with '...' until it fits within *max_width*."""
    if text_width(text, fontname, fontsize) <= max_width:
        return text
    while text and text_width(text + "...", fontname, fontsize) > max_width:
        text = text[:-1]
    return text + "..." if text else ""


@dataclass(frozen=True)
class DrawOp:
    """One recorded draw call with its bounding box in logical units."""

    kind: str  # "rect", "line" or "text"
    bbox: tuple[float, float, float, float]
    text: str = ""


class Surface:
    """A drawing context exclusively owned by one render."""

    def __init__(self, doc: fitz.Document, page: fitz.Page, width: float, height: float, ratio: float) -> None:
        self.doc = doc
        self.page = page
        self.width = width
        self.height = height
        self.ratio = ratio
        self.transform = fitz.Matrix(ratio, ratio)
        self.ops: list[DrawOp] = []
        # {section kind: (first op index, end op index)}
        self.section_ops: dict[SectionKind, tuple[int, int]] = {}

    @property
    def pixel_size(self) -> tuple[int, int]:
        return (math.ceil(self.width * self.ratio), math.ceil(self.height * self.ratio))

    def ops_for(self, kind: SectionKind) -> list[DrawOp]:
        start, end = self.section_ops.get(kind, (0, 0))
        return self.ops[start:end]

    # -- primitives ---------------------------------------------------------

    def rect(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        fill: tuple | None = None,
        color: tuple | None = None,
        width: float = 0.5,
    ) -> None:
        self.page.draw_rect(fitz.Rect(x0, y0, x1, y1), color=color, fill=fill, width=width)
        self.ops.append(DrawOp("rect", (x0, y0, x1, y1)))

    def line(self, x0: float, y0: float, x1: float, y1: float, color: tuple, width: float = 0.5) -> None:
        self.page.draw_line(fitz.Point(x0, y0), fitz.Point(x1, y1), color=color, width=width)
        self.ops.append(DrawOp("line", (x0, y0, x1, y1)))

    def text(
        self,
        x: float,
        baseline: float,
        text: str,
        fontname: str,
        fontsize: float,
        color: tuple,
        align: str = "left",
        max_width: float | None = None,
    ) -> float:
        """Draw one line of text and return its width.

        *x* is the left edge, the centre or the right edge depending on
        *align*.  With *max_width* the text is clipped with an ellipsis.
        """
        if max_width is not None:
            text = fit_text(text, max_width, fontname, fontsize)
        if not text:
            return 0.0
        tw = text_width(text, fontname, fontsize)
        if align == "center":
            left = x - tw / 2
        elif align == "right":
            left = x - tw
        else:
            left = x
        self.page.insert_text(
            fitz.Point(left, baseline),
            text,
            fontsize=fontsize,
            fontname=fontname,
            color=color,
        )
        font = _font(fontname)
        bbox = (left, baseline - font.ascender * fontsize, left + tw, baseline - font.descender * fontsize)
        self.ops.append(DrawOp("text", bbox, text))
        return tw

    # -- output -------------------------------------------------------------

    def pixmap(self) -> fitz.Pixmap:
        """Rasterise the page at the surface's device pixel ratio."""
        return self.page.get_pixmap(matrix=self.transform, alpha=False)

    def png_bytes(self) -> bytes:
        return self.pixmap().tobytes("png")

    def pdf_bytes(self) -> bytes:
        return self.doc.tobytes()

    def save(self, output_path: str, fmt: str | None = None) -> None:
        """Write the surface as PNG or as a one-page PDF.

        The format defaults to the file suffix (".pdf" means PDF).
        """
        path = Path(output_path)
        fmt = fmt or ("pdf" if path.suffix.lower() == ".pdf" else "png")
        data = self.pdf_bytes() if fmt == "pdf" else self.png_bytes()
        path.write_bytes(data)
        logger.info("Saved report surface to %s (%d bytes)", path, len(data))

    def close(self) -> None:
        self.doc.close()


def allocate(plan: LayoutPlan, device_pixel_ratio: float = 2.0) -> Surface:
    """Create a fresh drawing surface for *plan*.

    Raises
    ------
    ConfigurationError
        If the ratio or plan size is unusable or no page can be created.
    """
    ratio = device_pixel_ratio
    if isinstance(ratio, bool) or not isinstance(ratio, (int, float)) or not math.isfinite(ratio) or ratio <= 0:
        raise ConfigurationError(f"Invalid device pixel ratio: {device_pixel_ratio!r}")
    if plan.width <= 0 or plan.height <= 0:
        raise ConfigurationError(f"Invalid surface size: {plan.width} x {plan.height}")
    try:
        doc = fitz.open()
        page = doc.new_page(width=plan.width, height=plan.height)
    except Exception as exc:
        raise ConfigurationError(f"Cannot create drawing surface: {exc}") from exc
    surface = Surface(doc, page, plan.width, plan.height, float(ratio))
    logger.debug(
        "Allocated surface %.0f x %.0f at ratio %s (%d x %d px)",
        plan.width, plan.height, ratio, *surface.pixel_size,
    )
    return surface

"""Drawing helpers shared by the table renderers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from ..formatters import PLACEHOLDER
from ..style import StyleConstants
from ..surface import Surface

logger = logging.getLogger("plant_report.render")

# Any of these from a single cell's formatter means the datum is malformed
_CELL_ERRORS = (TypeError, ValueError, KeyError, AttributeError, ArithmeticError)


def safe_cell(fn: Callable[..., str], *args: object) -> str:
    """Run a cell formatter; a malformed datum becomes the placeholder."""
    try:
        return fn(*args)
    except _CELL_ERRORS as exc:
        logger.debug("Cell rendered as placeholder (%s: %s)", type(exc).__name__, exc)
        return PLACEHOLDER


def baseline(top: float, height: float, fontsize: float) -> float:
    """Baseline that vertically centres a single text line in a band."""
    return top + (height + fontsize * 0.7) / 2


def draw_cell(
    surface: Surface,
    left: float,
    right: float,
    top: float,
    height: float,
    text: str,
    style: StyleConstants,
    align: str = "center",
    bold: bool = False,
    color: tuple | None = None,
    fontsize: float | None = None,
) -> None:
    """Draw *text* inside one cell, clipped to the cell width."""
    if not text:
        return
    size = fontsize or style.cell_size
    pad = style.cell_padding
    if align == "left":
        x = left + pad
    elif align == "right":
        x = right - pad
    else:
        x = (left + right) / 2
    surface.text(
        x,
        baseline(top, height, size),
        text,
        fontname=style.font_bold if bold else style.font,
        fontsize=size,
        color=color or style.palette.cell_text,
        align=align,
        max_width=max(0.0, right - left - 2 * pad),
    )


def draw_header_row(
    surface: Surface,
    columns: Sequence[float],
    top: float,
    height: float,
    labels: Sequence[str],
    style: StyleConstants,
) -> None:
    """Single-band header: background plus one bold label per column."""
    surface.rect(columns[0], top, columns[-1], top + height, fill=style.palette.header_bg)
    for i, label in enumerate(labels):
        draw_cell(
            surface, columns[i], columns[i + 1], top, height, label, style,
            bold=True, color=style.palette.header_text, fontsize=style.header_size,
        )


def draw_zebra(surface: Surface, columns: Sequence[float], top: float, index: int, style: StyleConstants) -> None:
    """Shade odd rows so long tables scan easily."""
    if index % 2 == 1:
        surface.rect(columns[0], top, columns[-1], top + style.row_height, fill=style.palette.zebra)


def draw_section_title(surface: Surface, title: str, top: float, style: StyleConstants) -> None:
    """Title line of an optional section; *top* is the section's top edge."""
    title_top = top + style.section_spacing
    surface.text(
        style.padding,
        baseline(title_top, style.title_height, style.section_title_size),
        title,
        fontname=style.font_bold,
        fontsize=style.section_title_size,
        color=style.palette.title_text,
        max_width=style.content_width,
    )


def draw_frame(
    surface: Surface,
    columns: Sequence[float],
    top: float,
    bottom: float,
    style: StyleConstants,
    rules: Iterable[tuple[float, float, float]] = (),
    partial_edges: Iterable[float] = (),
    partial_top: float | None = None,
) -> None:
    """Outer rectangle, vertical column lines and horizontal rules.

    Every vertical line sits on an entry of *columns*.  Edges listed in
    *partial_edges* start at *partial_top* instead of *top* so they do not
    cut through a header cell spanning several columns.  *rules* are
    ``(y, x0, x1)`` horizontal lines.
    """
    pal = style.palette
    partial = set(partial_edges)
    for y, x0, x1 in rules:
        surface.line(x0, y, x1, y, color=pal.grid_line, width=style.grid_line_width)
    for x in columns[1:-1]:
        y0 = partial_top if (x in partial and partial_top is not None) else top
        surface.line(x, y0, x, bottom, color=pal.grid_line, width=style.grid_line_width)
    surface.rect(columns[0], top, columns[-1], bottom, color=pal.outer_line, width=style.outer_line_width)


def text_or_placeholder(value: str) -> str:
    return value.strip() or PLACEHOLDER

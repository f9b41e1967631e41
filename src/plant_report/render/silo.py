"""Silo stock: one name column and three shift groups of three sub-columns."""

from __future__ import annotations

from ..formatters import PLACEHOLDER, fill_percentage, format_number, format_percentage
from ..layout import SILO_SUBCOLUMNS, SectionPlan
from ..models import ReportModel, ShiftStock
from ..style import StyleConstants
from ..surface import Surface
from ._table import draw_cell, draw_frame, draw_section_title, draw_zebra, safe_cell, text_or_placeholder


def _empty_space(stock: ShiftStock, capacity: float) -> str:
    return format_number(stock.empty_space) or PLACEHOLDER


def _content(stock: ShiftStock, capacity: float) -> str:
    return format_number(stock.content) or PLACEHOLDER


def _percentage(stock: ShiftStock, capacity: float) -> str:
    return format_percentage(fill_percentage(stock.content, capacity))


_SUBCOLUMN_CELLS = (_empty_space, _content, _percentage)


def stock_cells(stock: ShiftStock, capacity: float) -> tuple[str, ...]:
    """Empty space, content and fill percentage for one shift."""
    return tuple(safe_cell(fn, stock, capacity) for fn in _SUBCOLUMN_CELLS)


def render(surface: Surface, section: SectionPlan, model: ReportModel, style: StyleConstants, y: float) -> float:
    pal = style.palette
    labels = style.labels
    cols = section.columns
    left, right = cols[0], cols[-1]
    table_top = y + (section.table_top - section.top)
    band_split = table_top + style.category_band_height
    body_top = table_top + section.header_height
    band_h = style.category_band_height
    sub_h = section.header_height - band_h

    draw_section_title(surface, labels.silo_title, y, style)

    # Two-band header: shift groups above, sub-columns below
    surface.rect(left, table_top, right, body_top, fill=pal.header_bg)
    surface.rect(cols[1], band_split, right, body_top, fill=pal.subheader_bg)
    draw_cell(
        surface, cols[0], cols[1], table_top, section.header_height, labels.silo_name, style,
        bold=True, color=pal.header_text, fontsize=style.header_size,
    )
    group_edges = []
    sub_labels = (labels.empty_space, labels.content, labels.percentage)
    for g, shift_label in enumerate(labels.silo_shifts):
        first = 1 + g * SILO_SUBCOLUMNS
        group_edges.append(cols[first])
        draw_cell(
            surface, cols[first], cols[first + SILO_SUBCOLUMNS], table_top, band_h, shift_label, style,
            bold=True, color=pal.header_text, fontsize=style.header_size,
        )
        for s, sub_label in enumerate(sub_labels):
            c = first + s
            draw_cell(
                surface, cols[c], cols[c + 1], band_split, sub_h, sub_label, style,
                color=pal.muted_text, fontsize=style.header_size,
            )

    for index, entry in enumerate(model.silo):
        row_top = body_top + index * style.row_height
        draw_zebra(surface, cols, row_top, index, style)
        name = safe_cell(text_or_placeholder, entry.name)
        draw_cell(surface, cols[0], cols[1], row_top, style.row_height, name, style, align="left", bold=True)
        for g, stock in enumerate(entry.shifts):
            for s, text in enumerate(stock_cells(stock, entry.capacity)):
                c = 1 + g * SILO_SUBCOLUMNS + s
                draw_cell(surface, cols[c], cols[c + 1], row_top, style.row_height, text, style)

    bottom = body_top + section.row_count * style.row_height
    sub_edges = [x for x in cols[2:-1] if x not in group_edges]
    draw_frame(
        surface, cols, table_top, bottom, style,
        rules=[(band_split, cols[1], right), (body_top, left, right)],
        partial_edges=sub_edges, partial_top=band_split,
    )
    return y + section.height

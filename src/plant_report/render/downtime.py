"""Downtime log: fixed time/PIC columns and a flexible problem column."""

from __future__ import annotations

from ..formatters import calculate_duration, format_duration
from ..layout import SectionPlan
from ..models import DowntimeEntry, ReportModel
from ..style import StyleConstants
from ..surface import Surface
from ._table import (
    draw_cell,
    draw_frame,
    draw_header_row,
    draw_section_title,
    draw_zebra,
    safe_cell,
    text_or_placeholder,
)


def duration_text(entry: DowntimeEntry) -> str:
    """Duration between start and end; an earlier end time wraps past midnight."""
    hours, minutes = calculate_duration(entry.start_time, entry.end_time)
    return format_duration(hours, minutes)


def render(surface: Surface, section: SectionPlan, model: ReportModel, style: StyleConstants, y: float) -> float:
    cols = section.columns
    labels = style.labels
    table_top = y + (section.table_top - section.top)
    body_top = table_top + section.header_height

    draw_section_title(surface, labels.downtime_title, y, style)
    draw_header_row(
        surface, cols, table_top, section.header_height,
        (labels.start_time, labels.end_time, labels.duration, labels.pic, labels.problem),
        style,
    )

    for index, entry in enumerate(model.downtime):
        row_top = body_top + index * style.row_height
        draw_zebra(surface, cols, row_top, index, style)
        cells = (
            safe_cell(text_or_placeholder, entry.start_time),
            safe_cell(text_or_placeholder, entry.end_time),
            safe_cell(duration_text, entry),
            safe_cell(text_or_placeholder, entry.pic),
        )
        for c, text in enumerate(cells):
            draw_cell(surface, cols[c], cols[c + 1], row_top, style.row_height, text, style)
        draw_cell(
            surface, cols[4], cols[5], row_top, style.row_height,
            safe_cell(text_or_placeholder, entry.problem), style, align="left",
        )

    bottom = body_top + section.row_count * style.row_height
    draw_frame(surface, cols, table_top, bottom, style, rules=[(body_top, cols[0], cols[-1])])
    return y + section.height

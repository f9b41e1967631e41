"""Operator roster: shift label and operator name, two-fifths of the width."""

from __future__ import annotations

from ..layout import SectionPlan
from ..models import ReportModel
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


def render(surface: Surface, section: SectionPlan, model: ReportModel, style: StyleConstants, y: float) -> float:
    cols = section.columns
    labels = style.labels
    table_top = y + (section.table_top - section.top)
    body_top = table_top + section.header_height

    draw_section_title(surface, labels.operators_title, y, style)
    draw_header_row(surface, cols, table_top, section.header_height, (labels.shift, labels.operator_name), style)

    for index, entry in enumerate(model.operators):
        row_top = body_top + index * style.row_height
        draw_zebra(surface, cols, row_top, index, style)
        shift = safe_cell(text_or_placeholder, entry.shift_label)
        name = safe_cell(text_or_placeholder, entry.name)
        draw_cell(surface, cols[0], cols[1], row_top, style.row_height, shift, style)
        draw_cell(surface, cols[1], cols[2], row_top, style.row_height, name, style, align="left")

    bottom = body_top + section.row_count * style.row_height
    draw_frame(surface, cols, table_top, bottom, style, rules=[(body_top, cols[0], cols[-1])])
    return y + section.height

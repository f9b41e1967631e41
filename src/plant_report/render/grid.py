"""Parameter grid: grouped headers, 24 hourly rows and footer statistics.

Column boundaries come from ``section.columns`` alone.  Header text, body
cells, footer cells and every vertical line are positioned from that one
sequence, which keeps the bands aligned.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from ..formatters import PLACEHOLDER, format_number, is_number, shift_for_hour
from ..layout import SectionPlan
from ..models import HOURS, CellValue, Parameter, ReportModel, Row
from ..style import StyleConstants
from ..surface import Surface
from ._table import draw_cell, draw_frame, draw_zebra, safe_cell

_FIXED_COLUMNS = 2


def format_cell(param: Parameter, value: CellValue) -> str:
    """Display text for one hourly value."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, float) and not math.isfinite(value):
        return PLACEHOLDER
    if is_number(value) and param.aggregable:
        return format_number(value)
    text = str(value).strip()
    return text or PLACEHOLDER


def format_footer_cell(param: Parameter, stats: Mapping[str, str]) -> str:
    """Footer text: aggregated value, placeholder, or blank for text columns."""
    if not param.aggregable:
        return ""
    value = stats.get(param.id)
    if value is None or value == "":
        return PLACEHOLDER
    return str(value)


def _row_cell(param: Parameter, row: Row | None) -> str:
    return format_cell(param, row.values.get(param.id) if row else None)


def _param_label(param: Parameter) -> str:
    return f"{param.label} ({param.unit})" if param.unit else param.label


def render(surface: Surface, section: SectionPlan, model: ReportModel, style: StyleConstants, y: float) -> float:
    pal = style.palette
    labels = style.labels
    cols = section.columns
    left, right = cols[0], cols[-1]
    params = model.parameters

    top = y
    band_split = top + style.category_band_height
    body_top = top + section.header_height
    footer_top = body_top + section.row_count * style.row_height
    bottom = footer_top + section.footer_rows * style.footer_row_height

    # -- header ------------------------------------------------------------
    surface.rect(left, top, right, body_top, fill=pal.header_bg)
    surface.rect(cols[_FIXED_COLUMNS], band_split, right, body_top, fill=pal.subheader_bg)

    for i, caption in enumerate((labels.hour, labels.shift)):
        draw_cell(
            surface, cols[i], cols[i + 1], top, section.header_height, caption, style,
            bold=True, color=pal.header_text, fontsize=style.header_size,
        )
    for span in section.category_spans:
        draw_cell(
            surface, span.left, span.right, top, style.category_band_height, span.category, style,
            bold=True, color=pal.header_text, fontsize=style.header_size,
        )
    for i, param in enumerate(params):
        c = _FIXED_COLUMNS + i
        draw_cell(
            surface, cols[c], cols[c + 1], band_split, style.label_band_height, _param_label(param), style,
            color=pal.header_text, fontsize=style.header_size,
        )

    # -- body: always one row per hour ---------------------------------------
    for index, hour in enumerate(HOURS):
        row_top = body_top + index * style.row_height
        draw_zebra(surface, cols, row_top, index, style)
        row = model.row_for_hour(hour)
        shift = row.shift_label if row and row.shift_label else shift_for_hour(hour)
        draw_cell(surface, cols[0], cols[1], row_top, style.row_height, str(hour), style)
        draw_cell(surface, cols[1], cols[2], row_top, style.row_height, shift, style)
        for i, param in enumerate(params):
            c = _FIXED_COLUMNS + i
            draw_cell(
                surface, cols[c], cols[c + 1], row_top, style.row_height,
                safe_cell(_row_cell, param, row), style,
            )

    # -- footer statistics -----------------------------------------------------
    for index, (stat_name, stats) in enumerate(model.footer.items()):
        row_top = footer_top + index * style.footer_row_height
        surface.rect(left, row_top, right, row_top + style.footer_row_height, fill=pal.footer_bg)
        draw_cell(
            surface, cols[0], cols[1], row_top, style.footer_row_height, stat_name, style,
            align="right", bold=True, color=pal.footer_text,
        )
        draw_cell(surface, cols[1], cols[2], row_top, style.footer_row_height, PLACEHOLDER, style)
        for i, param in enumerate(params):
            c = _FIXED_COLUMNS + i
            draw_cell(
                surface, cols[c], cols[c + 1], row_top, style.footer_row_height,
                safe_cell(format_footer_cell, param, stats), style,
                bold=True, color=pal.footer_text,
            )

    # -- lines -------------------------------------------------------------------
    category_edges = {span.left for span in section.category_spans}
    category_edges.update(span.right for span in section.category_spans)
    param_edges = [x for x in cols[_FIXED_COLUMNS + 1:-1] if x not in category_edges]
    rules = [
        (band_split, cols[_FIXED_COLUMNS], right),
        (body_top, left, right),
    ]
    if section.footer_rows:
        rules.append((footer_top, left, right))
    draw_frame(
        surface, cols, top, bottom, style,
        rules=rules, partial_edges=param_edges, partial_top=band_split,
    )
    return y + section.height

"""Geometry planning: turn a ReportModel's cardinalities into a LayoutPlan.

The plan is a pure function of the model and the style table.  Sections are
stacked strictly top to bottom; a section that has nothing to show is left
out of the plan, so renderers never decide for themselves whether to run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .models import HOURS, ReportModel
from .style import StyleConstants

logger = logging.getLogger("plant_report.layout")

SILO_SHIFT_COUNT = 3
SILO_SUBCOLUMNS = 3
OPERATOR_LABEL_SHARE = 0.35


class SectionKind(str, Enum):
    BANNER = "banner"
    GRID = "grid"
    OPERATORS = "operators"
    SILO = "silo"
    DOWNTIME = "downtime"


@dataclass(frozen=True)
class CategorySpan:
    category: str
    left: float
    right: float


@dataclass(frozen=True)
class SectionPlan:
    """Reserved region and table geometry for one section.

    ``columns`` holds the column boundary x-coordinates shared by every band
    of the section's table (header, body, footer): column *i* spans
    ``columns[i]`` to ``columns[i + 1]``.
    """

    kind: SectionKind
    top: float
    height: float
    table_top: float = 0.0
    header_height: float = 0.0
    row_count: int = 0
    footer_rows: int = 0
    columns: tuple[float, ...] = ()
    category_spans: tuple[CategorySpan, ...] = ()

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def column_count(self) -> int:
        return max(0, len(self.columns) - 1)

    @property
    def body_top(self) -> float:
        return self.table_top + self.header_height


@dataclass(frozen=True)
class LayoutPlan:
    width: float
    height: float
    sections: tuple[SectionPlan, ...]

    def section(self, kind: SectionKind) -> SectionPlan | None:
        for sec in self.sections:
            if sec.kind is kind:
                return sec
        return None

    @property
    def kinds(self) -> tuple[SectionKind, ...]:
        return tuple(sec.kind for sec in self.sections)


def _equal_edges(left: float, width: float, count: int) -> list[float]:
    """Split *width* into *count* equal columns and return the inner+right edges."""
    col_w = width / count
    return [left + col_w * i for i in range(1, count + 1)]


def grid_columns(parameter_count: int, style: StyleConstants) -> tuple[float, ...]:
    """Boundaries for hour, shift and one equal-width column per parameter."""
    left = style.padding
    hour_right = left + style.hour_column_width
    fixed_right = hour_right + style.shift_column_width
    available = style.canvas_width - 2 * style.padding - style.hour_column_width - style.shift_column_width
    return (left, hour_right, fixed_right, *_equal_edges(fixed_right, available, parameter_count))


def operator_columns(style: StyleConstants) -> tuple[float, ...]:
    left = style.padding
    width = style.content_width * style.operator_width_ratio
    return (left, left + width * OPERATOR_LABEL_SHARE, left + width)


def silo_columns(style: StyleConstants) -> tuple[float, ...]:
    left = style.padding
    name_right = left + style.silo_name_column_width
    available = style.content_width - style.silo_name_column_width
    return (left, name_right, *_equal_edges(name_right, available, SILO_SHIFT_COUNT * SILO_SUBCOLUMNS))


def downtime_columns(style: StyleConstants) -> tuple[float, ...]:
    edges = [style.padding]
    for width in style.downtime_fixed_widths:
        edges.append(edges[-1] + width)
    edges.append(style.canvas_width - style.padding)
    return tuple(edges)


def _grid_section(model: ReportModel, style: StyleConstants, top: float) -> SectionPlan:
    columns = grid_columns(model.parameter_count, style)
    spans = []
    index = 2
    for group in model.grouped_headers:
        count = len(group.parameters)
        if count == 0:
            continue
        spans.append(CategorySpan(group.category, columns[index], columns[index + count]))
        index += count
    footer_rows = len(model.footer)
    height = (
        style.header_band_height
        + len(HOURS) * style.row_height
        + footer_rows * style.footer_row_height
    )
    return SectionPlan(
        kind=SectionKind.GRID,
        top=top,
        height=height,
        table_top=top,
        header_height=style.header_band_height,
        row_count=len(HOURS),
        footer_rows=footer_rows,
        columns=columns,
        category_spans=tuple(spans),
    )


def _optional_section(
    kind: SectionKind,
    entries: int,
    header_height: float,
    columns: tuple[float, ...],
    style: StyleConstants,
    top: float,
) -> SectionPlan:
    height = style.section_spacing + style.title_height + header_height + entries * style.row_height
    return SectionPlan(
        kind=kind,
        top=top,
        height=height,
        table_top=top + style.section_spacing + style.title_height,
        header_height=header_height,
        row_count=entries,
        columns=columns,
    )


def plan_layout(model: ReportModel, style: StyleConstants) -> LayoutPlan:
    """Compute every offset and size for one render of *model*.

    Identical inputs always give an identical (equal) plan.
    """
    sections = [SectionPlan(kind=SectionKind.BANNER, top=0.0, height=style.banner_height)]
    y = style.banner_height

    if model.parameter_count > 0:
        grid = _grid_section(model, style, y)
        sections.append(grid)
        y = grid.bottom
    else:
        logger.warning("Report %r has no parameters; omitting the parameter grid", model.title)

    optional = (
        (SectionKind.OPERATORS, len(model.operators), style.table_header_height, operator_columns(style)),
        (SectionKind.SILO, len(model.silo), style.header_band_height, silo_columns(style)),
        (SectionKind.DOWNTIME, len(model.downtime), style.table_header_height, downtime_columns(style)),
    )
    for kind, entries, header_height, columns in optional:
        if entries == 0:
            continue
        sec = _optional_section(kind, entries, header_height, columns, style, y)
        sections.append(sec)
        y = sec.bottom

    total = y + style.padding
    logger.debug(
        "Planned %s: %.0f x %.0f", "/".join(s.kind.value for s in sections), style.canvas_width, total
    )
    return LayoutPlan(width=style.canvas_width, height=total, sections=tuple(sections))

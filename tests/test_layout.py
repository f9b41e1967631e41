"""Tests for geometry planning."""

from __future__ import annotations

import itertools
import logging

from plant_report.layout import (
    SectionKind,
    downtime_columns,
    grid_columns,
    operator_columns,
    plan_layout,
    silo_columns,
)
from plant_report.models import GroupedHeader
from plant_report.style import DEFAULT_STYLE as S

from factories import downtime_entry, full_model, make_model, make_params, roster, silo_entry


def test_plan_is_deterministic():
    """The same model always yields an equal plan."""
    model = full_model()
    assert plan_layout(model, S) == plan_layout(model, S)


def test_single_category_with_one_footer_row():
    """Three parameters and one footer row give the expected grid and page height."""
    plan = plan_layout(make_model(), S)
    grid = plan.section(SectionKind.GRID)
    assert grid.column_count == 5
    assert grid.height == S.header_band_height + 24 * S.row_height + S.footer_row_height
    assert plan.height == S.banner_height + grid.height + S.padding
    assert plan.height == 718
    assert plan.width == S.canvas_width
    assert plan.kinds == (SectionKind.BANNER, SectionKind.GRID)


def test_empty_optional_sections_add_no_height():
    """Empty operator, silo and downtime lists add nothing to the page."""
    bare = plan_layout(make_model(), S)
    empty = plan_layout(make_model(downtime=(), silo=(), operators=()), S)
    assert empty.height == bare.height
    assert empty.section(SectionKind.DOWNTIME) is None
    assert empty.section(SectionKind.SILO) is None
    assert empty.section(SectionKind.OPERATORS) is None


def test_height_is_sum_of_present_sections():
    """For every mix of optional sections the page height is the sum of its parts."""
    options = {
        "operators": roster(),
        "silo": (silo_entry(), silo_entry("Silo 2")),
        "downtime": (downtime_entry(),),
    }
    for mask in itertools.product((False, True), repeat=3):
        kwargs = {k: v for (k, v), on in zip(options.items(), mask) if on}
        plan = plan_layout(make_model(**kwargs), S)
        assert plan.height == sum(s.height for s in plan.sections) + S.padding
        assert plan.sections[0].top == 0
        for upper, lower in zip(plan.sections, plan.sections[1:]):
            assert upper.bottom == lower.top


def test_section_order():
    """Sections stack banner, grid, operators, silo, downtime."""
    plan = plan_layout(full_model(), S)
    assert plan.kinds == (
        SectionKind.BANNER,
        SectionKind.GRID,
        SectionKind.OPERATORS,
        SectionKind.SILO,
        SectionKind.DOWNTIME,
    )


def test_first_downtime_entry_adds_one_full_section():
    """The first downtime entry adds spacing, title, header and one row."""
    without = plan_layout(make_model(silo=(silo_entry(),)), S)
    with_one = plan_layout(make_model(silo=(silo_entry(),), downtime=(downtime_entry(),)), S)
    added = S.section_spacing + S.title_height + S.table_header_height + S.row_height
    assert with_one.height - without.height == added
    assert with_one.section(SectionKind.SILO) == without.section(SectionKind.SILO)


def test_each_extra_entry_adds_one_row():
    """Further entries add one row height each."""
    one = plan_layout(make_model(downtime=(downtime_entry(),)), S)
    three = plan_layout(make_model(downtime=(downtime_entry(),) * 3), S)
    assert three.height - one.height == 2 * S.row_height


def test_no_parameters_omits_grid(caplog):
    """A report without parameters drops the grid and warns."""
    model = make_model(groups=(), footer={})
    with caplog.at_level(logging.WARNING, logger="plant_report.layout"):
        plan = plan_layout(model, S)
    assert plan.section(SectionKind.GRID) is None
    assert plan.height == S.banner_height + S.padding
    assert "no parameters" in caplog.text


def test_grid_columns_span_content_width():
    """Parameter columns share the width left by the hour and shift columns."""
    cols = grid_columns(4, S)
    assert len(cols) == 7
    assert cols[0] == S.padding
    assert cols[1] - cols[0] == S.hour_column_width
    assert cols[2] - cols[1] == S.shift_column_width
    assert abs(cols[-1] - (S.canvas_width - S.padding)) < 1e-9
    widths = [b - a for a, b in zip(cols[2:], cols[3:])]
    assert max(widths) - min(widths) < 1e-9


def test_category_spans_follow_columns():
    """Category headers span exactly their parameters' columns."""
    model = make_model(groups=(
        GroupedHeader("Raw Mill", make_params(2, "a")),
        GroupedHeader("Empty", ()),
        GroupedHeader("Kiln", make_params(3, "b")),
    ))
    grid = plan_layout(model, S).section(SectionKind.GRID)
    cols = grid.columns
    assert [(s.category, s.left, s.right) for s in grid.category_spans] == [
        ("Raw Mill", cols[2], cols[4]),
        ("Kiln", cols[4], cols[7]),
    ]


def test_footer_rows_scale_grid_height():
    """Each footer stat adds one footer row to the grid."""
    params = make_params(2)
    footer = {name: {} for name in ("Average", "Min", "Max", "Counter Total")}
    grid = plan_layout(make_model(groups=(GroupedHeader("A", params),), footer=footer), S).section(SectionKind.GRID)
    assert grid.footer_rows == 4
    assert grid.height == S.header_band_height + 24 * S.row_height + 4 * S.footer_row_height


def test_optional_table_columns():
    """Operator, silo and downtime tables get their fixed column layouts."""
    ops = operator_columns(S)
    assert len(ops) == 3
    assert abs((ops[-1] - ops[0]) - S.content_width * S.operator_width_ratio) < 1e-9
    silo = silo_columns(S)
    assert len(silo) == 11
    assert silo[1] - silo[0] == S.silo_name_column_width
    assert abs(silo[-1] - (S.canvas_width - S.padding)) < 1e-9
    down = downtime_columns(S)
    assert len(down) == 6
    assert down[-1] == S.canvas_width - S.padding


def test_optional_section_table_top():
    """Optional tables start below the spacing and title; rows end at the section bottom."""
    plan = plan_layout(full_model(), S)
    for kind in (SectionKind.OPERATORS, SectionKind.SILO, SectionKind.DOWNTIME):
        sec = plan.section(kind)
        assert sec.table_top == sec.top + S.section_spacing + S.title_height
        assert sec.body_top + sec.row_count * S.row_height == sec.bottom

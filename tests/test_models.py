"""Tests for the report data model."""

from __future__ import annotations

import pytest

from plant_report.models import DataType, GroupedHeader, Parameter, ReportModel

from factories import make_model, make_params


def test_parameters_flatten_groups_in_order():
    """Parameters are listed group by group in declaration order."""
    model = make_model(groups=(
        GroupedHeader("Raw Mill", make_params(2, "a")),
        GroupedHeader("Kiln", make_params(3, "b")),
    ))
    assert [p.id for p in model.parameters] == ["a0", "a1", "b0", "b1", "b2"]
    assert model.parameter_count == 5


def test_duplicate_parameter_ids_rejected():
    """Two parameters with one id are refused at construction."""
    dup = Parameter("x", "X")
    with pytest.raises(ValueError, match="Duplicate parameter id"):
        ReportModel(
            title="t",
            date_label="d",
            grouped_headers=(GroupedHeader("A", (dup,)), GroupedHeader("B", (dup,))),
        )


def test_footer_is_read_only():
    """Footer stats cannot be changed after construction."""
    model = make_model()
    with pytest.raises(TypeError):
        model.footer["Average"]["p0"] = "0"  # type: ignore[index]


def test_row_for_hour():
    """Rows are looked up by hour; a missing hour gives None."""
    model = make_model()
    assert model.row_for_hour(5).hour == 5
    assert make_model(rows=()).row_for_hour(5) is None


def test_data_type_parse():
    """Data types parse case-insensitively; unknown values are text."""
    assert DataType.parse("Number") is DataType.NUMBER
    assert DataType.parse("number") is DataType.NUMBER
    assert DataType.parse("NUMBER") is DataType.NUMBER
    assert DataType.parse("Text") is DataType.TEXT
    assert DataType.parse("something") is DataType.TEXT


def test_from_dict_camel_case():
    """camelCase JSON builds every part of the model."""
    model = ReportModel.from_dict({
        "title": "CCR Report - RM1",
        "dateLabel": "18/10/2025",
        "groupedHeaders": [
            {"category": "Raw Mill", "parameters": [
                {"id": "feed", "label": "Feed", "dataType": "Number", "unit": "t/h"},
                {"id": "note", "label": "Note", "dataType": "Text"},
            ]},
        ],
        "rows": [{"hour": 1, "shiftLabel": "S3C", "values": {"feed": 10}}],
        "footer": {"Average": {"feed": "10,00"}},
        "downtime": [{"startTime": "23:30", "endTime": "00:15", "pic": "Andi", "problem": "Trip"}],
        "silo": [{"name": "Silo 1", "capacity": 100, "shift1": {"emptySpace": 40, "content": 60}}],
        "operators": [{"shiftLabel": "S1", "name": "Sari"}],
    })
    assert model.parameters[0].unit == "t/h"
    assert model.parameters[1].data_type is DataType.TEXT
    assert model.rows[0].values == {"feed": 10}
    assert model.downtime[0].end_time == "00:15"
    assert model.silo[0].shift1.content == 60
    assert model.silo[0].shift2.content is None
    assert model.operators[0].name == "Sari"


def test_from_dict_snake_case_and_master_silo_shape():
    """snake_case keys and the nested silo master record are accepted."""
    model = ReportModel.from_dict({
        "title": "T",
        "date": "18/10/2025",
        "grouped_headers": [{"category": "K", "parameters": [
            {"id": "x", "parameter": "Temp", "data_type": "Number"},
        ]}],
        "rows": [{"hour": 2, "shift": "S3C", "values": {}}],
        "downtime": [{"start_time": "01:00", "end_time": "02:00"}],
        "silo": [{"master": {"silo_name": "Silo A", "capacity": 500}, "shift3": {"empty_space": 1}}],
        "operators": [{"shift": "S2", "name": "Joko"}],
    })
    assert model.date_label == "18/10/2025"
    assert model.parameters[0].label == "Temp"
    assert model.rows[0].shift_label == "S3C"
    assert model.downtime[0].pic == ""
    assert model.silo[0].name == "Silo A"
    assert model.silo[0].capacity == 500
    assert model.silo[0].shift3.empty_space == 1
    assert model.operators[0].shift_label == "S2"


def test_from_dict_missing_optional_sections():
    """Absent optional arrays become empty tuples."""
    model = ReportModel.from_dict({"title": "T"})
    assert model.downtime == ()
    assert model.silo == ()
    assert model.operators == ()
    assert model.parameter_count == 0


def test_from_dict_non_object_entries_become_blank_records():
    """Entries that are not JSON objects give empty records instead of failing."""
    model = ReportModel.from_dict({
        "title": "T",
        "downtime": ["pump trip"],
        "operators": [None],
        "silo": [7, {"name": "Silo 1", "capacity": 100, "master": "x", "shift1": 5, "shift2": [1]}],
    })
    assert model.downtime[0].start_time == ""
    assert model.operators[0].name == ""
    assert model.silo[0].name == ""
    assert model.silo[0].capacity == 0
    assert model.silo[1].shift1.content is None
    assert model.silo[1].shift2.empty_space is None

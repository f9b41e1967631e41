"""Assemble a ReportModel from raw hourly records.

The data-fetch layer hands over per-parameter hourly values exactly as they
are stored: either a bare scalar or a ``{"value": ..., "user_name": ...}``
record per hour.  This module normalises them into the 24 report rows,
computes the footer statistics and derives the operator roster.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .formatters import PLACEHOLDER, format_number, is_number, shift_for_hour, shift_hours
from .models import (
    HOURS,
    CellValue,
    DowntimeEntry,
    GroupedHeader,
    OperatorEntry,
    Parameter,
    ReportModel,
    Row,
    SiloEntry,
)

logger = logging.getLogger("plant_report.assemble")

DEFAULT_STAT_LABELS = {
    "average": "Average",
    "min": "Min",
    "max": "Max",
    "counter_total": "Counter Total",
}


def _unwrap(raw: Any) -> CellValue:
    """Extract the stored value from a scalar or ``{"value": ...}`` record."""
    if isinstance(raw, Mapping):
        raw = raw.get("value")
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, str)):
        return raw
    return str(raw)


def _hour_lookup(hourly: Mapping[Any, Any], hour: int) -> Any:
    # JSON objects arrive with string keys
    if hour in hourly:
        return hourly[hour]
    return hourly.get(str(hour))


def build_rows(
    parameters: Sequence[Parameter],
    hourly_values: Mapping[str, Mapping[Any, Any]],
) -> tuple[Row, ...]:
    """Return exactly 24 rows, one per hour, with ``None`` for missing values."""
    if not isinstance(hourly_values, Mapping):
        logger.warning("Ignoring hourly values of type %s", type(hourly_values).__name__)
        hourly_values = {}
    rows = []
    for hour in HOURS:
        values: dict[str, CellValue] = {}
        for param in parameters:
            hourly = hourly_values.get(param.id)
            if not isinstance(hourly, Mapping):
                hourly = {}
            values[param.id] = _unwrap(_hour_lookup(hourly, hour))
        rows.append(Row(hour=hour, shift_label=shift_for_hour(hour), values=values))
    return tuple(rows)


def _as_number(value: CellValue) -> float | None:
    if is_number(value):
        return float(value)
    if isinstance(value, str) and value.strip():
        try:
            number = float(value)
        except ValueError:
            return None
        # "NaN" and "inf" parse but are not readings
        return number if math.isfinite(number) else None
    return None


def compute_footer(
    parameters: Sequence[Parameter],
    rows: Sequence[Row],
    labels: Mapping[str, str] | None = None,
) -> dict[str, dict[str, str]]:
    """Compute formatted average/min/max/counter-total rows.

    Only NUMBER parameters are aggregated.  Zero and non-numeric readings
    are left out of average, min and max.  The counter total is the hour 24
    reading minus the hour 1 reading.
    """
    names = {**DEFAULT_STAT_LABELS, **(labels or {})}
    footer: dict[str, dict[str, str]] = {
        names["average"]: {},
        names["min"]: {},
        names["max"]: {},
        names["counter_total"]: {},
    }
    by_hour = {row.hour: row for row in rows}

    for param in parameters:
        if not param.aggregable:
            continue
        readings = [
            n for n in (_as_number(row.values.get(param.id)) for row in rows)
            if n is not None and n != 0
        ]
        if readings:
            footer[names["average"]][param.id] = format_number(sum(readings) / len(readings))
            footer[names["min"]][param.id] = format_number(min(readings))
            footer[names["max"]][param.id] = format_number(max(readings))

        first = by_hour.get(1)
        last = by_hour.get(24)
        start = _as_number(first.values.get(param.id)) if first else None
        end = _as_number(last.values.get(param.id)) if last else None
        if start is not None and end is not None:
            footer[names["counter_total"]][param.id] = format_number(end - start)

    return footer


def build_operator_roster(hourly_names: Mapping[Any, Any] | None) -> tuple[OperatorEntry, ...]:
    """One entry per shift: the first non-blank name recorded in its hours."""
    entries = []
    for label, hours in shift_hours().items():
        name = PLACEHOLDER
        if isinstance(hourly_names, Mapping):
            for hour in hours:
                value = _unwrap(_hour_lookup(hourly_names, hour))
                if value is not None and str(value).strip():
                    name = str(value)
                    break
        entries.append(OperatorEntry(shift_label=label, name=name))
    return tuple(entries)


def build_report(
    title: str,
    date_label: str,
    grouped_headers: Iterable[GroupedHeader],
    hourly_values: Mapping[str, Mapping[Any, Any]],
    downtime: Iterable[DowntimeEntry] = (),
    silo: Iterable[SiloEntry] = (),
    operator_names: Mapping[Any, Any] | None = None,
    stat_labels: Mapping[str, str] | None = None,
) -> ReportModel:
    """Build a complete ReportModel from fetched records.

    ``operator_names`` holds the hourly values of the "Operator Name"
    parameter; when it is None no roster section is produced.
    """
    groups = tuple(grouped_headers)
    parameters = [p for g in groups for p in g.parameters]
    rows = build_rows(parameters, hourly_values)
    footer = compute_footer(parameters, rows, stat_labels)
    operators = build_operator_roster(operator_names) if operator_names is not None else ()
    logger.debug(
        "Assembled report %r: %d parameters, %d footer rows", title, len(parameters), len(footer)
    )
    return ReportModel(
        title=title,
        date_label=date_label,
        grouped_headers=groups,
        rows=rows,
        footer=footer,
        downtime=tuple(downtime),
        silo=tuple(silo),
        operators=operators,
    )

"""Data models for one daily operations report."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union

CellValue = Union[float, int, str, None]

HOURS = tuple(range(1, 25))


class DataType(str, Enum):
    """Parameter value types.  Only NUMBER columns are aggregated."""

    NUMBER = "Number"
    TEXT = "Text"

    @classmethod
    def parse(cls, value: object) -> DataType:
        if isinstance(value, DataType):
            return value
        for member in cls:
            if str(value).lower() in (member.value.lower(), member.name.lower()):
                return member
        return cls.TEXT


@dataclass(frozen=True)
class Parameter:
    id: str
    label: str
    data_type: DataType = DataType.NUMBER
    unit: str = ""

    @property
    def aggregable(self) -> bool:
        return self.data_type is DataType.NUMBER


@dataclass(frozen=True)
class GroupedHeader:
    category: str
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class Row:
    hour: int
    shift_label: str
    values: Mapping[str, CellValue] = field(default_factory=dict)


@dataclass(frozen=True)
class DowntimeEntry:
    start_time: str
    end_time: str
    pic: str = ""
    problem: str = ""


@dataclass(frozen=True)
class ShiftStock:
    empty_space: float | None = None
    content: float | None = None


@dataclass(frozen=True)
class SiloEntry:
    name: str
    capacity: float
    shift1: ShiftStock = ShiftStock()
    shift2: ShiftStock = ShiftStock()
    shift3: ShiftStock = ShiftStock()

    @property
    def shifts(self) -> tuple[ShiftStock, ShiftStock, ShiftStock]:
        return (self.shift1, self.shift2, self.shift3)


@dataclass(frozen=True)
class OperatorEntry:
    shift_label: str
    name: str


@dataclass(frozen=True)
class ReportModel:
    """Read-only snapshot of everything one report render needs.

    ``footer`` maps a statistic name (e.g. "Average") to pre-formatted
    values keyed by parameter id; its iteration order is the order of the
    footer rows.
    """

    title: str
    date_label: str
    grouped_headers: tuple[GroupedHeader, ...] = ()
    rows: tuple[Row, ...] = ()
    footer: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    downtime: tuple[DowntimeEntry, ...] = ()
    silo: tuple[SiloEntry, ...] = ()
    operators: tuple[OperatorEntry, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for param in self.parameters:
            if param.id in seen:
                raise ValueError(f"Duplicate parameter id: {param.id!r}")
            seen.add(param.id)
        # Freeze the mappings so the snapshot cannot drift between renders
        object.__setattr__(
            self,
            "footer",
            MappingProxyType({k: MappingProxyType(dict(v)) for k, v in self.footer.items()}),
        )

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return tuple(p for group in self.grouped_headers for p in group.parameters)

    @property
    def parameter_count(self) -> int:
        return sum(len(group.parameters) for group in self.grouped_headers)

    def row_for_hour(self, hour: int) -> Row | None:
        for row in self.rows:
            if row.hour == hour:
                return row
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReportModel:
        """Build a model from a JSON-shaped dict (camelCase or snake_case keys)."""

        def _get(d: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in d:
                    return d[key]
            return default

        groups = tuple(
            GroupedHeader(
                category=str(g.get("category", "")),
                parameters=tuple(
                    Parameter(
                        id=str(p["id"]),
                        label=str(_get(p, "label", "parameter", default=p["id"])),
                        data_type=DataType.parse(_get(p, "dataType", "data_type", default="Number")),
                        unit=str(p.get("unit") or ""),
                    )
                    for p in g.get("parameters", [])
                ),
            )
            for g in _get(data, "groupedHeaders", "grouped_headers", default=[])
        )
        rows = tuple(
            Row(
                hour=int(r["hour"]),
                shift_label=str(_get(r, "shiftLabel", "shift_label", "shift", default="")),
                values=dict(r.get("values") or {}),
            )
            for r in data.get("rows", [])
        )
        downtime = tuple(
            DowntimeEntry(
                start_time=str(_get(d, "startTime", "start_time", default="")),
                end_time=str(_get(d, "endTime", "end_time", default="")),
                pic=str(d.get("pic") or ""),
                problem=str(d.get("problem") or ""),
            )
            for d in map(_record, data.get("downtime") or [])
        )
        silo = tuple(_silo_from_dict(_record(s)) for s in data.get("silo") or [])
        operators = tuple(
            OperatorEntry(
                shift_label=str(_get(o, "shiftLabel", "shift_label", "shift", default="")),
                name=str(o.get("name") or ""),
            )
            for o in map(_record, data.get("operators") or [])
        )
        return cls(
            title=str(data.get("title", "")),
            date_label=str(_get(data, "dateLabel", "date_label", "date", default="")),
            grouped_headers=groups,
            rows=rows,
            footer={str(k): dict(v) for k, v in (data.get("footer") or {}).items()},
            downtime=downtime,
            silo=silo,
            operators=operators,
        )


def _record(value: Any) -> Mapping[str, Any]:
    """A JSON object, or an empty one when the entry is not an object."""
    return value if isinstance(value, Mapping) else {}


def _silo_from_dict(data: Mapping[str, Any]) -> SiloEntry:
    master = _record(data.get("master"))

    def _stock(key: str) -> ShiftStock:
        raw = _record(data.get(key))
        return ShiftStock(
            empty_space=raw.get("emptySpace", raw.get("empty_space")),
            content=raw.get("content"),
        )

    return SiloEntry(
        name=str(data.get("name") or master.get("silo_name") or ""),
        capacity=data.get("capacity", master.get("capacity", 0)) or 0,
        shift1=_stock("shift1"),
        shift2=_stock("shift2"),
        shift3=_stock("shift3"),
    )

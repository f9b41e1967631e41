"""Fixed style table for the daily report: geometry, fonts and colours.

All geometry is in logical units (before device pixel ratio scaling).
"""

from __future__ import annotations

from dataclasses import dataclass, field

RGB = tuple[float, float, float]


@dataclass(frozen=True)
class Palette:
    background: RGB = (1.0, 1.0, 1.0)
    banner: RGB = (0.600, 0.106, 0.106)        # #991B1B deep red
    banner_mark: RGB = (0.996, 0.886, 0.886)   # #FEE2E2
    banner_text: RGB = (1.0, 1.0, 1.0)
    banner_subtext: RGB = (0.996, 0.792, 0.792)
    title_text: RGB = (0.118, 0.161, 0.231)    # #1E293B slate-800
    header_bg: RGB = (0.973, 0.980, 0.988)     # #F8FAFC slate-50
    subheader_bg: RGB = (0.945, 0.961, 0.976)  # #F1F5F9 slate-100
    header_text: RGB = (0.118, 0.161, 0.231)
    cell_text: RGB = (0.200, 0.255, 0.333)     # #334155 slate-700
    muted_text: RGB = (0.392, 0.455, 0.545)    # #64748B slate-500
    zebra: RGB = (0.973, 0.980, 0.988)
    footer_bg: RGB = (0.945, 0.961, 0.976)
    footer_text: RGB = (0.118, 0.161, 0.231)
    grid_line: RGB = (0.886, 0.910, 0.941)     # #E2E8F0 slate-200
    outer_line: RGB = (0.580, 0.639, 0.722)    # #94A3B8 slate-400


@dataclass(frozen=True)
class ReportLabels:
    """Fixed captions drawn by the renderers."""

    subtitle: str = "Daily Operational Report"
    hour: str = "Hour"
    shift: str = "Shift"
    operators_title: str = "Operator"
    operator_name: str = "Name"
    silo_title: str = "Silo Stock Report"
    silo_name: str = "Silo Name"
    silo_shifts: tuple[str, str, str] = ("Shift 1", "Shift 2", "Shift 3")
    empty_space: str = "Empty Space"
    content: str = "Content"
    percentage: str = "%"
    downtime_title: str = "Downtime Report"
    start_time: str = "Start Time"
    end_time: str = "End Time"
    duration: str = "Duration"
    pic: str = "PIC"
    problem: str = "Problem"


@dataclass(frozen=True)
class StyleConstants:
    """Every measurement the planner and renderers use."""

    canvas_width: float = 1200
    padding: float = 24

    # Banner: a coloured band plus the gap below it
    banner_height: float = 96
    banner_band_height: float = 76

    # Parameter grid
    row_height: float = 22
    footer_row_height: float = 22
    header_band_height: float = 48
    category_band_height: float = 22
    hour_column_width: float = 80
    shift_column_width: float = 48

    # Optional sections
    section_spacing: float = 24
    title_height: float = 26
    table_header_height: float = 24
    operator_width_ratio: float = 0.4
    silo_name_column_width: float = 180
    downtime_fixed_widths: tuple[float, float, float, float] = (90, 90, 90, 160)

    # Typography (PyMuPDF Base-14 names)
    font: str = "helv"
    font_bold: str = "hebo"
    title_size: float = 20
    subtitle_size: float = 11
    date_size: float = 11
    section_title_size: float = 12
    header_size: float = 8.5
    cell_size: float = 8.5
    cell_padding: float = 4

    grid_line_width: float = 0.5
    outer_line_width: float = 1.0

    palette: Palette = field(default_factory=Palette)
    labels: ReportLabels = field(default_factory=ReportLabels)

    @property
    def content_width(self) -> float:
        return self.canvas_width - 2 * self.padding

    @property
    def label_band_height(self) -> float:
        return self.header_band_height - self.category_band_height


DEFAULT_STYLE = StyleConstants()

"""Report banner: coloured band with mark, title, subtitle and date."""

from __future__ import annotations

from ..layout import SectionPlan
from ..models import ReportModel
from ..style import StyleConstants
from ..surface import Surface, text_width

_MARK_SIZE = 36
_MARK_INSET = 9


def render(surface: Surface, section: SectionPlan, model: ReportModel, style: StyleConstants, y: float) -> float:
    pal = style.palette
    band_h = style.banner_band_height
    surface.rect(0, y, style.canvas_width, y + band_h, fill=pal.banner)

    # Decorative mark: light square with a smaller band-coloured square inside
    mark_top = y + (band_h - _MARK_SIZE) / 2
    mark_left = style.padding
    surface.rect(mark_left, mark_top, mark_left + _MARK_SIZE, mark_top + _MARK_SIZE, fill=pal.banner_mark)
    surface.rect(
        mark_left + _MARK_INSET,
        mark_top + _MARK_INSET,
        mark_left + _MARK_SIZE - _MARK_INSET,
        mark_top + _MARK_SIZE - _MARK_INSET,
        fill=pal.banner,
    )

    right = style.canvas_width - style.padding
    text_left = mark_left + _MARK_SIZE + 14
    date_room = right - text_left
    date_w = min(text_width(model.date_label, style.font_bold, style.date_size), date_room)
    text_room = max(0.0, right - date_w - 24 - text_left)

    surface.text(
        text_left, y + band_h * 0.48, model.title,
        fontname=style.font_bold, fontsize=style.title_size, color=pal.banner_text,
        max_width=text_room,
    )
    surface.text(
        text_left, y + band_h * 0.76, style.labels.subtitle,
        fontname=style.font, fontsize=style.subtitle_size, color=pal.banner_subtext,
        max_width=text_room,
    )
    surface.text(
        right, y + (band_h + style.date_size * 0.7) / 2, model.date_label,
        fontname=style.font_bold, fontsize=style.date_size, color=pal.banner_text,
        align="right", max_width=date_room,
    )
    return y + section.height

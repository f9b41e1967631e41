"""Report composition: plan, allocate, then draw every section in order."""

from __future__ import annotations

import logging

from .errors import ReportError
from .layout import LayoutPlan, plan_layout
from .models import ReportModel
from .render import RENDERERS
from .style import DEFAULT_STYLE, StyleConstants
from .surface import Surface, allocate

logger = logging.getLogger("plant_report.composer")


def compose(plan: LayoutPlan, model: ReportModel, style: StyleConstants, surface: Surface) -> float:
    """Draw each planned section onto *surface*, threading the y cursor.

    Returns the final cursor, which equals the plan height minus the bottom
    padding.
    """
    y = 0.0
    for section in plan.sections:
        start = len(surface.ops)
        next_y = RENDERERS[section.kind](surface, section, model, style, y)
        surface.section_ops[section.kind] = (start, len(surface.ops))
        if next_y != section.bottom:
            logger.warning(
                "Section %s ended at %.2f, planned %.2f", section.kind.value, next_y, section.bottom
            )
            next_y = section.bottom
        y = next_y
    return y


def render_report(
    model: ReportModel,
    style: StyleConstants = DEFAULT_STYLE,
    device_pixel_ratio: float = 2.0,
) -> Surface:
    """Render *model* onto a new surface.

    Every call plans and allocates afresh; the returned surface belongs to
    the caller.

    Raises
    ------
    ConfigurationError
        If no drawing surface can be created.  Nothing is drawn.
    ReportError
        If drawing fails part-way; the partial surface is discarded.
    """
    plan = plan_layout(model, style)
    surface = allocate(plan, device_pixel_ratio)
    try:
        compose(plan, model, style, surface)
    except Exception as exc:
        surface.close()
        raise ReportError(f"Failed to generate report {model.title!r}: {exc}") from exc
    logger.info(
        "Rendered %r: %d sections, %.0f x %.0f logical, %d x %d px",
        model.title, len(plan.sections), plan.width, plan.height, *surface.pixel_size,
    )
    return surface

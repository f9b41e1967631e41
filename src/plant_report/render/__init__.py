"""Section renderers, one module per report section.

Each module exports ``render(surface, section, model, style, y) -> y`` which
draws inside the section's reserved region and returns the cursor below it.
"""

from ..layout import SectionKind
from . import banner, downtime, grid, operators, silo

RENDERERS = {
    SectionKind.BANNER: banner.render,
    SectionKind.GRID: grid.render,
    SectionKind.OPERATORS: operators.render,
    SectionKind.SILO: silo.render,
    SectionKind.DOWNTIME: downtime.render,
}

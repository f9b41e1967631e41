"""Command-line interface: render a report JSON file to PNG or PDF."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from .assemble import build_report
from .composer import render_report
from .errors import ReportError
from .formatters import format_date
from .log import setup_logging
from .models import ReportModel
from .settings import OUTPUT_FORMATS, Settings


def load_model(input_path: str) -> ReportModel:
    """Read a report from JSON.

    The file either holds an assembled model (``rows`` and ``footer``) or
    raw records (``hourly_values`` per parameter id), which are assembled
    into 24 rows with computed footer statistics.
    """
    data = json.loads(Path(input_path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Report input must be a JSON object")
    model = ReportModel.from_dict(data)
    hourly = data.get("hourly_values", data.get("hourlyValues"))
    if hourly is None:
        return model

    date_label = model.date_label
    if "dateLabel" not in data and "date_label" not in data and data.get("date"):
        date_label = format_date(str(data["date"]))
    return build_report(
        title=model.title,
        date_label=date_label,
        grouped_headers=model.grouped_headers,
        hourly_values=hourly,
        downtime=model.downtime,
        silo=model.silo,
        operator_names=data.get("operator_names", data.get("operatorNames")),
        stat_labels=data.get("stat_labels"),
    )


def _output_path(input_path: str, output: str | None, fmt: str, settings: Settings) -> Path:
    if output:
        return Path(output)
    folder = Path(settings.last_output_dir) if settings.last_output_dir else Path(input_path).parent
    return folder / f"{Path(input_path).stem}.{fmt}"


@click.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default=None, type=click.Path(), help="Write the report to this path.")
@click.option(
    "--ratio",
    "device_pixel_ratio",
    type=float,
    default=None,
    help="Device pixel ratio for the raster (default: saved setting, 2.0).",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: from the output suffix, else the saved setting).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--log-file", default=None, type=click.Path(dir_okay=False), help="Also append log output to this file.")
def render(
    input_path: str,
    output: str | None,
    device_pixel_ratio: float | None,
    fmt: str | None,
    verbose: bool,
    log_file: str | None,
) -> None:
    """Render a daily operations report from INPUT_PATH (JSON)."""
    setup_logging(verbose=verbose, log_file=log_file)
    settings = Settings.load()

    ratio = device_pixel_ratio if device_pixel_ratio is not None else settings.device_pixel_ratio
    if fmt is None:
        suffix = Path(output).suffix.lower().lstrip(".") if output else ""
        fmt = suffix if suffix in OUTPUT_FORMATS else settings.output_format

    try:
        model = load_model(input_path)
    except json.JSONDecodeError as exc:
        click.echo(f"Error: invalid JSON in {input_path}: {exc}", err=True)
        sys.exit(2)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        click.echo(f"Error: malformed report input: {exc}", err=True)
        sys.exit(2)

    try:
        surface = render_report(model, device_pixel_ratio=ratio)
    except ReportError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    out = _output_path(input_path, output, fmt, settings)
    width, height = surface.width, surface.height
    px_w, px_h = surface.pixel_size
    try:
        surface.save(str(out), fmt=fmt)
    except OSError as exc:
        click.echo(f"Error: cannot write {out}: {exc}", err=True)
        sys.exit(2)
    finally:
        surface.close()

    settings.last_output_dir = str(out.resolve().parent)
    settings.save()
    click.echo(
        f"Report saved to {out} ({width:.0f} x {height:.0f} logical, {px_w} x {px_h} px)",
        err=True,
    )

"""Exceptions raised by the report renderer."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for report rendering failures."""


class ConfigurationError(ReportError):
    """No drawing context could be obtained; the render is aborted."""

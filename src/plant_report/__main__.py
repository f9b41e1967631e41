"""Allow running with: python -m plant_report"""

from .cli import render

render()

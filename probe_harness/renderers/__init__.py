"""Report renderers."""

from probe_harness.renderers.console import print_report
from probe_harness.renderers.html import render_html, save_report_to_html
from probe_harness.renderers.json_file import (
    load_report_from_file,
    save_report_to_file,
)

__all__ = [
    "load_report_from_file",
    "print_report",
    "render_html",
    "save_report_to_file",
    "save_report_to_html",
]

"""Header and footer templates for CSV and HTML reports.

Output is byte-exact; fields are interpolated without quoting or escaping
unless ``escape`` is requested.
"""

from __future__ import annotations

import html
from typing import Any

from itemreport.models import ReportFormat
from itemreport.reporting.fields import get_field, render_value

CSV_HEADER = "ID,NOME,VALOR,USUARIO\n"

HTML_HEADER = (
    "<html><body>\n"
    "<h1>Relatório</h1>\n"
    "<h2>Usuário: {name}</h2>\n"
    "<table>\n"
    "<tr><th>ID</th><th>Nome</th><th>Valor</th></tr>\n"
)

CSV_FOOTER = "\nTotal,,\n{total},,\n"

HTML_FOOTER = "</table>\n<h3>Total: {total}</h3>\n</body></html>\n"


def interpolate(value: Any, escape: bool = False) -> str:
    text = render_value(value)
    return html.escape(text) if escape else text


def render_header(report_format: ReportFormat | None, viewer: Any, escape: bool = False) -> str:
    """Preamble for the report, parameterized by the viewer's display name."""
    if report_format is ReportFormat.CSV:
        return CSV_HEADER
    if report_format is ReportFormat.HTML:
        return HTML_HEADER.format(name=interpolate(get_field(viewer, "name"), escape))
    return ""


def render_footer(report_format: ReportFormat | None, total: Any) -> str:
    """Closing text carrying the accumulated total."""
    if report_format is ReportFormat.CSV:
        return CSV_FOOTER.format(total=render_value(total))
    if report_format is ReportFormat.HTML:
        return HTML_FOOTER.format(total=render_value(total))
    return ""

"""Report assembly: header, filtered body, footer."""

from __future__ import annotations

import logging
from typing import Any

from itemreport.config import AppConfig, ReportConfig, get_config
from itemreport.models import ReportFormat
from itemreport.reporting.templates import render_footer, render_header
from itemreport.reporting.transform import build_body

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Service that renders CSV/HTML reports from line items.

    Not thread-safe across shared item objects: rendering may set
    ``priority`` on the caller's items.
    """

    def __init__(self, database: Any = None, config: ReportConfig | None = None):
        # Accepted for call-site compatibility; rendering never queries it.
        self.db = database
        self.config = config

    @property
    def report_config(self) -> ReportConfig:
        if self.config is None:
            self.config = get_config().report
        return self.config

    def generate_report(self, report_type: Any, user: Any, items: Any) -> str:
        """Render a report for ``user`` over ``items``.

        Args:
            report_type: "CSV" or "HTML" (exact match); anything else yields ""
            user: Viewer model, mapping, or object with ``name`` and ``role``
            items: Ordered line items; admins mutate ``priority`` on these in place

        Returns:
            The assembled report with surrounding whitespace stripped
        """
        cfg = self.report_config
        report_format = ReportFormat.parse(report_type)
        if report_format is None:
            logger.warning("Unknown report format %r, rendering empty report", report_type)

        if items is None:
            logger.warning("No items supplied, rendering empty body")
            items = []

        header = render_header(report_format, user, escape=cfg.escape_html)
        body = build_body(
            user,
            items,
            report_format,
            visibility_threshold=cfg.visibility_threshold,
            priority_threshold=cfg.priority_threshold,
            escape=cfg.escape_html,
        )
        footer = render_footer(report_format, body.total)

        return f"{header}{body.content}{footer}".strip()


def generate_report(
    report_type: Any, user: Any, items: Any, *, config: AppConfig | None = None
) -> str:
    """Render a report with a one-off ReportGenerator."""
    report_config = config.report if config is not None else None
    return ReportGenerator(config=report_config).generate_report(report_type, user, items)

"""Per-item transformation and body aggregation.

Each visible item becomes one formatted row plus a contribution to the
running total. Admins also flag high-value items as priority, which writes
``priority = True`` onto the caller's item object. That write happens for
every format, including CSV where priority is never rendered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from itemreport.models import AggregationResult, RenderedLine, ReportFormat
from itemreport.reporting.fields import (
    accumulate,
    get_field,
    is_poisoned,
    safe_gt,
    set_field,
)
from itemreport.reporting.templates import interpolate
from itemreport.reporting.visibility import (
    DEFAULT_VISIBILITY_THRESHOLD,
    filter_visible,
    is_admin,
)

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY_THRESHOLD = Decimal("1000")

PRIORITY_STYLE = ' style="font-weight:bold;"'


def mark_priority(viewer: Any, item: Any, threshold: Any = DEFAULT_PRIORITY_THRESHOLD) -> bool:
    """Flag ``item`` as priority in place when an admin sees a value above ``threshold``.

    Returns:
        True if the item was flagged by this call
    """
    if is_admin(viewer) and safe_gt(get_field(item, "value"), threshold):
        set_field(item, "priority", True)
        return True
    return False


def render_line(
    report_format: ReportFormat | None, viewer: Any, item: Any, escape: bool = False
) -> str:
    if report_format is ReportFormat.CSV:
        return (
            f"{interpolate(get_field(item, 'id'))},"
            f"{interpolate(get_field(item, 'name'))},"
            f"{interpolate(get_field(item, 'value'))},"
            f"{interpolate(get_field(viewer, 'name'))}\n"
        )
    if report_format is ReportFormat.HTML:
        # Pre-set priority on the input counts as well
        style = PRIORITY_STYLE if get_field(item, "priority") else ""
        return (
            f"<tr{style}>"
            f"<td>{interpolate(get_field(item, 'id'), escape)}</td>"
            f"<td>{interpolate(get_field(item, 'name'), escape)}</td>"
            f"<td>{interpolate(get_field(item, 'value'), escape)}</td>"
            "</tr>\n"
        )
    return ""


def transform_item(
    viewer: Any,
    item: Any,
    report_format: ReportFormat | None,
    priority_threshold: Any = DEFAULT_PRIORITY_THRESHOLD,
    escape: bool = False,
) -> RenderedLine:
    """Convert one visible item into its row and total contribution."""
    mark_priority(viewer, item, priority_threshold)

    if report_format is None:
        return RenderedLine(line="", value=0)

    return RenderedLine(
        line=render_line(report_format, viewer, item, escape),
        value=get_field(item, "value"),
    )


def build_body(
    viewer: Any,
    items: Iterable[Any],
    report_format: ReportFormat | None,
    visibility_threshold: Any = DEFAULT_VISIBILITY_THRESHOLD,
    priority_threshold: Any = DEFAULT_PRIORITY_THRESHOLD,
    escape: bool = False,
) -> AggregationResult:
    """Filter items, then transform and accumulate them in input order."""
    visible = filter_visible(viewer, items, visibility_threshold)

    lines: list[str] = []
    total: Any = 0
    priority_count = 0

    for item in visible:
        rendered = transform_item(viewer, item, report_format, priority_threshold, escape)
        lines.append(rendered.line)
        total = accumulate(total, rendered.value)
        if get_field(item, "priority"):
            priority_count += 1

    if is_poisoned(total):
        logger.warning("Report total is not numeric (%d visible items)", len(visible))

    logger.debug(
        "Built %s body: %d visible, %d priority",
        report_format.value if report_format else "empty",
        len(visible),
        priority_count,
    )

    return AggregationResult(
        content="".join(lines),
        total=total,
        visible_count=len(visible),
        priority_count=priority_count,
    )

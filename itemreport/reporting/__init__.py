"""Reporting module for ItemReport.

Renders CSV and HTML line item reports with role-based visibility and a running total.
"""

from itemreport.reporting.builder import ReportGenerator, generate_report

__all__ = ["ReportGenerator", "generate_report"]

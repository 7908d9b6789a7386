"""ItemReport - role-aware CSV/HTML line item reports."""

from itemreport.models import LineItem, ReportFormat, Role, Viewer
from itemreport.reporting import ReportGenerator, generate_report

__version__ = "1.0.0"

__all__ = [
    "LineItem",
    "ReportFormat",
    "ReportGenerator",
    "Role",
    "Viewer",
    "generate_report",
]

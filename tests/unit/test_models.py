"""Unit tests for ItemReport Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from itemreport.models import (
    AggregationResult,
    LineItem,
    RenderedLine,
    ReportFormat,
    Role,
    Viewer,
)


class TestReportFormat:
    """Test format token parsing."""

    def test_parse_exact_tokens(self):
        assert ReportFormat.parse("CSV") is ReportFormat.CSV
        assert ReportFormat.parse("HTML") is ReportFormat.HTML

    def test_parse_is_case_sensitive(self):
        assert ReportFormat.parse("csv") is None
        assert ReportFormat.parse("Html") is None

    def test_parse_unknown_values_return_none(self):
        assert ReportFormat.parse("PDF") is None
        assert ReportFormat.parse(None) is None
        assert ReportFormat.parse(42) is None

    def test_parse_accepts_member(self):
        assert ReportFormat.parse(ReportFormat.HTML) is ReportFormat.HTML


class TestViewer:
    """Test Viewer model behavior."""

    def test_role_enum_compares_to_literal(self):
        viewer = Viewer(name="Root", role=Role.ADMIN)
        assert viewer.role == "ADMIN"

    def test_viewer_is_immutable(self):
        viewer = Viewer(name="Ana", role=Role.STANDARD)
        with pytest.raises(ValidationError):
            viewer.name = "Other"

    def test_missing_fields_default_to_none(self):
        viewer = Viewer()
        assert viewer.name is None
        assert viewer.role is None


class TestLineItem:
    """Test LineItem model behavior."""

    def test_value_is_not_coerced(self):
        item = LineItem(id=1, name="A", value="abc")
        assert item.value == "abc"

    def test_priority_defaults_to_none(self):
        item = LineItem(id=1, name="A", value=10)
        assert item.priority is None

    def test_priority_is_assignable_in_place(self):
        item = LineItem(id=1, name="A", value=10)
        item.priority = True
        assert item.priority is True

    def test_extra_fields_are_kept(self):
        item = LineItem(id=1, name="A", value=10, sku="X-1")
        assert item.sku == "X-1"


class TestResults:
    """Test stage result models."""

    def test_rendered_line_defaults(self):
        line = RenderedLine()
        assert line.line == ""
        assert line.value == 0

    def test_aggregation_result_defaults(self):
        result = AggregationResult()
        assert result.content == ""
        assert result.total == 0
        assert result.visible_count == 0

    def test_aggregation_counts_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            AggregationResult(visible_count=-1)

"""Unit tests for role-based visibility filtering."""

from __future__ import annotations

from decimal import Decimal

from itemreport.models import LineItem, Viewer
from itemreport.reporting.visibility import filter_visible, is_admin, is_visible


class TestIsAdmin:

    def test_admin_role(self, admin_viewer):
        assert is_admin(admin_viewer)

    def test_role_match_is_exact(self):
        assert not is_admin(Viewer(name="x", role="admin"))
        assert not is_admin({"name": "x"})
        assert is_admin({"name": "x", "role": "ADMIN"})


class TestFilterVisible:
    """Visibility filter scenarios."""

    def test_standard_viewer_drops_values_over_500(self, standard_viewer, mixed_items):
        visible = filter_visible(standard_viewer, mixed_items)
        assert [item.id for item in visible] == [1, 3]

    def test_boundary_500_is_visible(self, standard_viewer):
        assert is_visible(standard_viewer, LineItem(id=1, name="A", value=500))
        assert not is_visible(standard_viewer, LineItem(id=1, name="A", value=500.01))

    def test_admin_sees_everything(self, admin_viewer, mixed_items):
        assert filter_visible(admin_viewer, mixed_items) == mixed_items

    def test_negative_and_zero_values_pass(self, standard_viewer):
        items = [LineItem(id=1, name="A", value=-20), LineItem(id=2, name="B", value=0)]
        assert filter_visible(standard_viewer, items) == items

    def test_non_numeric_value_is_hidden_from_standard_viewer(self, standard_viewer):
        items = [LineItem(id=1, name="A", value="abc"), LineItem(id=2, name="B", value=None)]
        assert filter_visible(standard_viewer, items) == []

    def test_returns_caller_objects_in_order(self, standard_viewer):
        items = [
            LineItem(id=3, name="C", value=30),
            LineItem(id=1, name="A", value=10),
            LineItem(id=2, name="B", value=20),
        ]
        visible = filter_visible(standard_viewer, items)
        assert [item.id for item in visible] == [3, 1, 2]
        assert all(a is b for a, b in zip(visible, items))

    def test_custom_threshold(self, standard_viewer, mixed_items):
        visible = filter_visible(standard_viewer, mixed_items, Decimal("1000"))
        assert [item.id for item in visible] == [1, 2, 3, 5]

    def test_filter_has_no_side_effects(self, standard_viewer, mixed_items):
        before = [item.model_dump() for item in mixed_items]
        filter_visible(standard_viewer, mixed_items)
        filter_visible(standard_viewer, mixed_items)
        assert [item.model_dump() for item in mixed_items] == before

    def test_accepts_generators(self, admin_viewer, mixed_items):
        assert len(filter_visible(admin_viewer, (item for item in mixed_items))) == 5

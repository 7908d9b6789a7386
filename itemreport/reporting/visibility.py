"""Role-based visibility filtering."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from itemreport.models import Role
from itemreport.reporting.fields import get_field, safe_le

DEFAULT_VISIBILITY_THRESHOLD = Decimal("500")


def is_admin(viewer: Any) -> bool:
    # Exact equality; "admin" is not an admin.
    return get_field(viewer, "role") == Role.ADMIN.value


def is_visible(viewer: Any, item: Any, threshold: Any = DEFAULT_VISIBILITY_THRESHOLD) -> bool:
    if is_admin(viewer):
        return True
    return safe_le(get_field(item, "value"), threshold)


def filter_visible(
    viewer: Any, items: Iterable[Any], threshold: Any = DEFAULT_VISIBILITY_THRESHOLD
) -> list[Any]:
    """Items the viewer may see, in input order.

    Returns the caller's own item objects, not copies.
    """
    if is_admin(viewer):
        return list(items)
    return [item for item in items if is_visible(viewer, item, threshold)]

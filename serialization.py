"""Render resources as the maps returned by the REST API."""

from typing import Any

from datatypes import DataType
from resource_item import ResourceItem
from resources import Resource


def item_to_json(item: ResourceItem) -> Any:
    """JSON value of an item; exact integers for every numeric type except Real."""
    value = item.to_variant()
    if value is None:
        return None
    data_type = item.descriptor.type
    if data_type.is_numeric and data_type is not DataType.REAL:
        return item.to_number()
    return value


def resource_to_map(resource: Resource) -> dict:
    """Public items of a resource, ``attr/`` at top level, other categories nested.

    ``state/on`` becomes ``{"state": {"on": ...}}``, ``attr/name`` becomes
    ``{"name": ...}``.
    """
    result: dict[str, Any] = {}
    for item in resource:
        if not item.is_public:
            continue
        category, _, name = item.descriptor.suffix.partition("/")
        value = item_to_json(item)
        if category == "attr":
            result[name] = value
        else:
            result.setdefault(category, {})[name] = value
    return result

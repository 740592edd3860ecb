"""Canonical identifiers for components, component aggregates, conditions and packs."""

from .codec import (
    IdentifierError,
    component_attributes_from_id,
    construct_id,
    get_component_aggregate_id,
    get_component_id,
    get_condition_id,
    get_package_id,
    get_partial_component_id,
    make_package_id,
    parse_component_id,
)
from .models import ComponentAttributes, PackageAttributes

__all__ = [
    "ComponentAttributes",
    "PackageAttributes",
    "IdentifierError",
    "construct_id",
    "get_component_id",
    "get_component_aggregate_id",
    "get_partial_component_id",
    "get_condition_id",
    "get_package_id",
    "make_package_id",
    "component_attributes_from_id",
    "parse_component_id",
]

"""Construction and decomposition of component and pack identifiers.

Identifier grammar (each bracketed part omitted together with its delimiter
when the value is empty):

    [Cvendor::]Cclass[&Cbundle][:Cgroup][:Csub][&Cvariant][@Cversion]
    [vendor::]name[@version]
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from constants import Delimiters

from .models import (
    ATTR_BUNDLE,
    ATTR_CLASS,
    ATTR_GROUP,
    ATTR_SUB,
    ATTR_VARIANT,
    ATTR_VENDOR,
    ATTR_VERSION,
    ComponentAttributes,
    PackageAttributes,
)

logger = logging.getLogger(__name__)

# (delimiter, value) pair consumed by construct_id
IdElement = Tuple[str, str]


class IdentifierError(ValueError):
    """Raised by strict decomposition when an identifier is ambiguous."""


def construct_id(elements: Iterable[IdElement]) -> str:
    """Concatenate ``delimiter + value`` for every non-empty value, in order."""
    return "".join(delimiter + value for delimiter, value in elements if value)


def _vendor(vendor: str, suffix: str) -> str:
    return vendor + suffix if vendor else ""


def get_component_id(component: Optional[ComponentAttributes]) -> str:
    """Return the fully specified component identifier."""
    if component is None:
        return ""
    return construct_id((
        ("", _vendor(component.vendor, Delimiters.SUFFIX_CVENDOR)),
        ("", component.cclass),
        (Delimiters.PREFIX_CBUNDLE, component.bundle),
        (Delimiters.PREFIX_CGROUP, component.group),
        (Delimiters.PREFIX_CSUB, component.sub),
        (Delimiters.PREFIX_CVARIANT, component.variant),
        (Delimiters.PREFIX_CVERSION, component.version),
    ))


def get_component_aggregate_id(component: Optional[ComponentAttributes]) -> str:
    """Return the aggregate identifier (no variant, no version)."""
    if component is None:
        return ""
    return construct_id((
        ("", _vendor(component.vendor, Delimiters.SUFFIX_CVENDOR)),
        ("", component.cclass),
        (Delimiters.PREFIX_CBUNDLE, component.bundle),
        (Delimiters.PREFIX_CGROUP, component.group),
        (Delimiters.PREFIX_CSUB, component.sub),
    ))


def get_partial_component_id(component: Optional[ComponentAttributes]) -> str:
    """Return the component identifier without vendor and version."""
    if component is None:
        return ""
    return construct_id((
        ("", component.cclass),
        (Delimiters.PREFIX_CBUNDLE, component.bundle),
        (Delimiters.PREFIX_CGROUP, component.group),
        (Delimiters.PREFIX_CSUB, component.sub),
        (Delimiters.PREFIX_CVARIANT, component.variant),
    ))


def get_condition_id(tag: str, condition: Optional[ComponentAttributes]) -> str:
    """Return ``<tag> <component id>`` for a condition expression."""
    if condition is None:
        return ""
    return f"{tag} {get_component_id(condition)}"


def get_package_id(pack: Optional[PackageAttributes]) -> str:
    """Return the fully specified pack identifier."""
    if pack is None:
        return ""
    return construct_id((
        ("", _vendor(pack.vendor, Delimiters.SUFFIX_PACK_VENDOR)),
        ("", pack.name),
        (Delimiters.PREFIX_PACK_VERSION, pack.version),
    ))


def make_package_id(vendor: str, name: str, version: str = "") -> str:
    """Return a pack identifier from loose strings."""
    return get_package_id(PackageAttributes(name=name, vendor=vendor, version=version))


def _prefix(text: str, delimiter: str) -> str:
    """Text before the first ``delimiter`` (whole text when absent)."""
    return text.partition(delimiter)[0]


def _suffix(text: str, delimiter: str) -> str:
    """Text after the last ``delimiter`` (empty when absent)."""
    _, sep, tail = text.rpartition(delimiter)
    return tail if sep else ""


def component_attributes_from_id(component_id: str, strict: bool = False) -> Dict[str, str]:
    """Decompose a component identifier into pack attribute names.

    ``Cclass`` and ``Cversion`` are always present in the result; ``Cgroup``
    and ``Csub`` when their segment exists; ``Cvendor`` when the identifier
    carries ``::``; ``Cbundle`` and ``Cvariant`` only when non-empty.

    A variant given on both the group and the sub segment is ambiguous: the
    sub segment's value wins, unless ``strict`` is set, in which case
    ``IdentifierError`` is raised.
    """
    attributes: Dict[str, str] = {}
    remainder = component_id
    if Delimiters.SUFFIX_CVENDOR in remainder:
        vendor, _, remainder = remainder.partition(Delimiters.SUFFIX_CVENDOR)
        attributes[ATTR_VENDOR] = vendor

    attributes[ATTR_VERSION] = _suffix(remainder, Delimiters.PREFIX_CVERSION)
    remainder = _prefix(remainder, Delimiters.PREFIX_CVERSION)

    segments = remainder.split(Delimiters.PREFIX_CGROUP)
    for index, segment in enumerate(segments[:3]):
        delimiter = Delimiters.PREFIX_CBUNDLE if index == 0 else Delimiters.PREFIX_CVARIANT
        name = _prefix(segment, delimiter)
        extra = _suffix(segment, delimiter)
        if index == 0:
            attributes[ATTR_CLASS] = name
            if extra:
                attributes[ATTR_BUNDLE] = extra
            continue
        attributes[ATTR_GROUP if index == 1 else ATTR_SUB] = name
        if not extra:
            continue
        previous = attributes.get(ATTR_VARIANT)
        if previous is not None:
            if strict:
                raise IdentifierError(
                    f"variant specified twice in '{component_id}': '{previous}' and '{extra}'"
                )
            logger.debug("Variant '%s' overrides '%s' in %s", extra, previous, component_id)
        attributes[ATTR_VARIANT] = extra

    if len(segments) > 3 and is_debug_enabled(logger):
        logger.debug(
            "Ignoring extra identifier segments",
            extra=extra_context(
                event="decision", component="codec", action="component_attributes_from_id",
                outcome="ignored", count=len(segments) - 3
            )
        )
    return attributes


def parse_component_id(component_id: str, strict: bool = False) -> ComponentAttributes:
    """Decompose a component identifier into ``ComponentAttributes``."""
    return ComponentAttributes.from_mapping(component_attributes_from_id(component_id, strict))

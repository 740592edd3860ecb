"""Data models for component and package identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


# Pack metadata attribute names
ATTR_VENDOR = "Cvendor"
ATTR_CLASS = "Cclass"
ATTR_BUNDLE = "Cbundle"
ATTR_GROUP = "Cgroup"
ATTR_SUB = "Csub"
ATTR_VARIANT = "Cvariant"
ATTR_VERSION = "Cversion"


def _get(attributes: Mapping[str, str], *keys: str) -> str:
    for key in keys:
        value = attributes.get(key)
        if value:
            return str(value)
    return ""


@dataclass(frozen=True)
class ComponentAttributes:
    """Attribute set of a component, condition or component aggregate.

    Empty strings mean the field is absent.
    """
    cclass: str
    vendor: str = ""
    bundle: str = ""
    group: str = ""
    sub: str = ""
    variant: str = ""
    version: str = ""

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, str]) -> "ComponentAttributes":
        """Build from a metadata attribute bag (``Cclass``, ``Cgroup``, ...).

        Plain ``vendor``/``version`` keys are accepted as fallbacks, as pack
        records carry them unprefixed.
        """
        return cls(
            cclass=_get(attributes, ATTR_CLASS),
            vendor=_get(attributes, ATTR_VENDOR, "vendor"),
            bundle=_get(attributes, ATTR_BUNDLE),
            group=_get(attributes, ATTR_GROUP),
            sub=_get(attributes, ATTR_SUB),
            variant=_get(attributes, ATTR_VARIANT),
            version=_get(attributes, ATTR_VERSION, "version"),
        )


@dataclass(frozen=True)
class PackageAttributes:
    """Attribute set of a pack."""
    name: str
    vendor: str = ""
    version: str = ""

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, str]) -> "PackageAttributes":
        return cls(
            name=_get(attributes, "name"),
            vendor=_get(attributes, "vendor"),
            version=_get(attributes, "version"),
        )

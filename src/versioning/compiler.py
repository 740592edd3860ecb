"""Compiler specifier algebra.

A compiler specifier has the form ``name[@[>=]version]``:

    GCC             any GCC version
    GCC@10.2.0      exactly 10.2.0
    GCC@>=10.2.0    10.2.0 or later

Specifiers coming from different project files are merged pairwise while the
build graph is resolved, so compatibility must be symmetric and intersection
must give the same range whichever side comes first.
"""

from __future__ import annotations

import logging
from typing import Optional

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants, Delimiters

from .comparator import compare_versions
from .models import CompilerRange, VersionComparator

logger = logging.getLogger(__name__)


def expand_compiler_id(compiler: str) -> CompilerRange:
    """Expand a compiler specifier into name, minimum and maximum versions."""
    name = compiler.partition(Delimiters.PREFIX_COMPILER_VERSION)[0]
    _, sep, clause = compiler.rpartition(Delimiters.PREFIX_COMPILER_VERSION)
    if not sep or not clause:
        # any version
        return CompilerRange(name=name)
    if clause.startswith(Delimiters.MIN_VERSION_OPERATOR):
        # minimum version
        return CompilerRange(name=name, min_version=clause[len(Delimiters.MIN_VERSION_OPERATOR):])
    # fixed version
    return CompilerRange(name=name, min_version=clause, max_version=clause)


def _below(upper: Optional[str], lower: Optional[str], compare: VersionComparator) -> bool:
    """True when both bounds are set and ``upper`` is lower than ``lower``."""
    return bool(upper) and bool(lower) and compare(upper, lower) < 0


def are_compilers_compatible(
    first: str,
    second: str,
    compare: VersionComparator = compare_versions,
) -> bool:
    """Return True if both specifiers can be satisfied by one compiler.

    An empty specifier places no constraint and is compatible with anything.
    """
    if not first or not second:
        return True
    left = expand_compiler_id(first)
    right = expand_compiler_id(second)
    if left.name != right.name:
        return False
    if _below(left.max_version, right.min_version, compare):
        return False
    if _below(right.max_version, left.min_version, compare):
        return False
    return True


def format_compiler_id(
    selected: CompilerRange,
    compare: VersionComparator = compare_versions,
    legacy: bool = False,
) -> str:
    """Encode a range back into specifier form.

    Returns an empty string when the range cannot be written as a specifier,
    i.e. when it has distinct lower and upper bounds. With ``legacy`` set,
    bounds are only considered equal when the strings are identical.
    """
    if selected.max_version is None:
        if compare(selected.min_version or Constants.ANY_VERSION, Constants.ANY_VERSION) == 0:
            return selected.name
        return f"{selected.name}@{Delimiters.MIN_VERSION_OPERATOR}{selected.min_version}"
    if legacy:
        same = selected.min_version == selected.max_version
    else:
        same = compare(selected.min_version or "", selected.max_version) == 0
    if same:
        return f"{selected.name}@{selected.max_version}"
    if not legacy:
        logger.warning(
            "Compiler range %s..%s of %s has no specifier form",
            selected.min_version, selected.max_version, selected.name,
        )
    return ""


def intersect_compiler_ranges(
    first: CompilerRange,
    second: CompilerRange,
    compare: VersionComparator = compare_versions,
) -> CompilerRange:
    """Return the range accepted by both ``first`` and ``second``.

    The caller is responsible for checking compatibility first.
    """
    first_max = first.max_version if first.max_version is not None else second.max_version
    second_max = second.max_version if second.max_version is not None else first_max
    first_min = first.min_version or Constants.ANY_VERSION
    second_min = second.min_version or Constants.ANY_VERSION

    name = first.name or second.name
    min_version = second_min if compare(first_min, second_min) < 0 else first_min
    if first_max is None or second_max is None:
        max_version = None
    else:
        max_version = second_max if compare(first_max, second_max) > 0 else first_max
    return CompilerRange(name=name, min_version=min_version, max_version=max_version)


def compilers_intersect(
    first: str,
    second: str,
    compare: VersionComparator = compare_versions,
    legacy: bool = False,
) -> str:
    """Return the intersection of two compiler specifiers.

    An empty result means there is no usable intersection: both inputs were
    empty, they are incompatible, or the result cannot be expressed as a
    specifier. ``legacy`` compares the bounds as plain strings.
    """
    if not first and not second:
        return ""
    if not are_compilers_compatible(first, second, compare):
        if is_debug_enabled(logger):
            logger.debug(
                "Incompatible compilers",
                extra=extra_context(
                    event="decision", component="compiler", action="intersect",
                    outcome="incompatible", first=first, second=second
                )
            )
        return ""
    selected = intersect_compiler_ranges(
        expand_compiler_id(first), expand_compiler_id(second), compare
    )
    return format_compiler_id(selected, compare, legacy)

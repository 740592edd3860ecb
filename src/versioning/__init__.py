"""Compiler version constraints: expansion, compatibility and intersection."""

from .comparator import compare_versions, version_key
from .compiler import (
    are_compilers_compatible,
    compilers_intersect,
    expand_compiler_id,
    format_compiler_id,
    intersect_compiler_ranges,
)
from .models import CompilerRange, VersionComparator

__all__ = [
    "CompilerRange",
    "VersionComparator",
    "compare_versions",
    "version_key",
    "expand_compiler_id",
    "are_compilers_compatible",
    "intersect_compiler_ranges",
    "format_compiler_id",
    "compilers_intersect",
]

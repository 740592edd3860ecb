"""Total-order comparison of dotted version strings."""

from __future__ import annotations

import re
from typing import Any, Iterable, Tuple

import semantic_version
from packaging import version as pep440

_RELEASE_SPLIT = re.compile(r"[._]")
_PRERELEASE_SPLIT = re.compile(r"[.\-_]")
_SEMVER_SHAPE = re.compile(r"\d+(\.\d+){0,2}(-[0-9A-Za-z.-]+)?(\+[0-9A-Za-z.-]+)?")

# (0, number) sorts before (1, text) at the same position
Part = Tuple[int, Any]
VersionKey = Tuple[Tuple[Part, ...], Tuple[Any, ...], int]


def _part(token: Any) -> Part:
    token = str(token)
    return (0, int(token)) if token.isdigit() else (1, token)


def _key(release: Iterable[Any], prerelease: Iterable[Any] = (), post: int = 0) -> VersionKey:
    parts = [_part(token) for token in release]
    # zero-fill: 6.0 and 6.0.0 are the same version
    while parts and parts[-1] == (0, 0):
        parts.pop()
    pre = tuple(_part(token) for token in prerelease)
    # a prerelease sorts before its release
    marker = (0, pre) if pre else (1,)
    return tuple(parts), marker, post


def _semver_key(value: str) -> VersionKey:
    parsed = semantic_version.Version.coerce(value)
    return _key((parsed.major, parsed.minor, parsed.patch), parsed.prerelease)


def _pep440_key(value: str) -> VersionKey:
    parsed = pep440.Version(value)
    if parsed.pre is not None:
        prerelease: Tuple[Any, ...] = parsed.pre
    elif parsed.dev is not None:
        prerelease = ("dev", parsed.dev)
    else:
        prerelease = ()
    post = parsed.post + 1 if parsed.post is not None else 0
    return _key(parsed.release, prerelease, post)


def _segment_key(value: str) -> VersionKey:
    release, _, prerelease = value.partition("+")[0].partition("-")
    return _key(
        (token for token in _RELEASE_SPLIT.split(release) if token),
        (token for token in _PRERELEASE_SPLIT.split(prerelease) if token),
    )


def version_key(value: str) -> VersionKey:
    """Return the sort key of a version string.

    Every string maps to the same key shape whichever parser reads it:
    semantic versions through ``semantic_version`` (partial versions such as
    ``6.1`` are zero-filled), four-part and other PEP 440 versions through
    ``packaging``, and anything else split into dotted segments. Build
    metadata, epochs and local labels do not take part in the ordering.
    """
    value = (value or "").strip()
    if _SEMVER_SHAPE.fullmatch(value):
        try:
            return _semver_key(value)
        except ValueError:
            pass
    try:
        return _pep440_key(value)
    except pep440.InvalidVersion:
        return _segment_key(value)


def compare_versions(first: str, second: str) -> int:
    """Compare two version strings.

    Returns a negative number, zero or a positive number when ``first`` is
    lower than, equal to or higher than ``second``. Never raises.
    """
    if first == second:
        return 0
    left = version_key(first)
    right = version_key(second)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0

"""Parser for context entries of the form ``project[.build-type][+target-type]``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern, Tuple


@dataclass(frozen=True)
class ContextName:
    """Project, build type and target type named by a context entry."""

    project: str = ""
    build: str = ""
    target: str = ""

    def __str__(self) -> str:
        text = self.project
        if self.build:
            text += f".{self.build}"
        if self.target:
            text += f"+{self.target}"
        return text


# Each field has two mutually exclusive alternatives; at most one capture
# group matches for any input.
# project name comes before the first dot (.) or plus (+), or stands alone
_PROJECT_PATTERN = re.compile(r"^(.*?)[.+].*$|^(.*)$")
# build type comes after a dot (.) and may be followed by a plus (+)
_BUILD_PATTERN = re.compile(r"^.*\.(.*)\+.*$|^.*\.(.*).*$")
# target type comes after a plus (+) and may be followed by a dot (.)
_TARGET_PATTERN = re.compile(r"^.*\+(.*)\..*$|^.*\+(.*).*$")


def _extract(pattern: Pattern[str], text: str) -> str:
    match = pattern.fullmatch(text)
    if match is None:
        return ""
    for group in match.groups():
        if group is not None:
            return group
    return ""


def parse_context_entry(context_entry: str) -> ContextName:
    """Split a context entry into project, build type and target type.

    Every field is extracted from the whole entry, so the ``.build`` and
    ``+target`` parts may appear in either order or be left out.

    Example:
        >>> parse_context_entry("blinky.Debug+Board")
        ContextName(project='blinky', build='Debug', target='Board')
        >>> parse_context_entry("blinky+Board.Debug")
        ContextName(project='blinky', build='Debug', target='Board')
    """
    fields: Tuple[str, str, str] = (
        _extract(_PROJECT_PATTERN, context_entry),
        _extract(_BUILD_PATTERN, context_entry),
        _extract(_TARGET_PATTERN, context_entry),
    )
    return ContextName(*fields)

"""Data models for compiler version constraints."""

from dataclasses import dataclass
from typing import Callable, Optional

from constants import Constants


# Version comparator: negative, zero or positive for less, equal, greater.
VersionComparator = Callable[[str, str], int]


@dataclass(frozen=True)
class CompilerRange:
    """Expanded compiler specifier ``name[@[>=]version]``.

    ``max_version`` is None when the range has no upper bound. A range
    accepting any version has ``min_version`` set to ``Constants.ANY_VERSION``.
    """
    name: str
    min_version: Optional[str] = Constants.ANY_VERSION
    max_version: Optional[str] = None

    @property
    def is_exact(self) -> bool:
        """True when the range pins a single version."""
        return self.max_version is not None and self.min_version == self.max_version

    @property
    def is_any(self) -> bool:
        """True when any version of the compiler is accepted."""
        return self.max_version is None and self.min_version == Constants.ANY_VERSION

"""Output type selection and toolchain-specific output file affixes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from constants import Constants, Delimiters, OutputTypeNames

logger = logging.getLogger(__name__)


@dataclass
class OutputType:
    """A single output toggle with its optional target filename."""

    on: bool = False
    filename: str = ""


@dataclass
class OutputTypes:
    """The five independent output toggles of a build context."""

    bin: OutputType = field(default_factory=OutputType)
    elf: OutputType = field(default_factory=OutputType)
    hex: OutputType = field(default_factory=OutputType)
    lib: OutputType = field(default_factory=OutputType)
    cmse: OutputType = field(default_factory=OutputType)


_TOGGLES = {
    OutputTypeNames.BIN.value: "bin",
    OutputTypeNames.ELF.value: "elf",
    OutputTypeNames.HEX.value: "hex",
    OutputTypeNames.LIB.value: "lib",
    OutputTypeNames.CMSE.value: "cmse",
}


def set_output_type(type_string: str, types: OutputTypes) -> bool:
    """Switch on the toggle named by ``type_string``.

    Unknown names are ignored. Returns True if a toggle was switched on.
    """
    attribute = _TOGGLES.get(type_string)
    if attribute is None:
        logger.debug("Ignoring unknown output type: %s", type_string)
        return False
    getattr(types, attribute).on = True
    return True


def output_types_from(type_strings: Iterable[str]) -> OutputTypes:
    """Build an ``OutputTypes`` with every listed type switched on."""
    types = OutputTypes()
    for type_string in type_strings:
        set_output_type(type_string, types)
    return types


def get_output_affixes(compiler: str) -> Tuple[str, str, str]:
    """Return ``(elf_suffix, lib_prefix, lib_suffix)`` for a compiler.

    ``compiler`` may be a full specifier such as ``GCC@>=10.2.0``; only the
    name is used and matched case-insensitively. Unknown compilers get the
    default affixes.
    """
    name = compiler.partition(Delimiters.PREFIX_COMPILER_VERSION)[0].strip().upper()
    return Constants.OUTPUT_AFFIXES.get(
        name,
        (Constants.DEFAULT_ELF_SUFFIX, Constants.DEFAULT_LIB_PREFIX, Constants.DEFAULT_LIB_SUFFIX),
    )

"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    USAGE_ERROR = 2
    INCOMPATIBLE = 3


class OutputTypeNames(Enum):
    """Output type strings accepted in project files.

    Args:
        Enum (string): Output type names.
    """

    BIN = "bin"
    ELF = "elf"
    HEX = "hex"
    LIB = "lib"
    CMSE = "cmse-lib"


class Delimiters:  # pylint: disable=too-few-public-methods
    """Component and pack identifier delimiters."""

    SUFFIX_CVENDOR = "::"
    PREFIX_CBUNDLE = "&"
    PREFIX_CGROUP = ":"
    PREFIX_CSUB = ":"
    PREFIX_CVARIANT = "&"
    PREFIX_CVERSION = "@"
    SUFFIX_PACK_VENDOR = "::"
    PREFIX_PACK_VERSION = "@"
    PREFIX_COMPILER_VERSION = "@"
    MIN_VERSION_OPERATOR = ">="


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "PROJMGR_LOG_LEVEL"
    ENV_CONFIG = "PROJMGR_CONFIG"
    ENV_COMPILER_ROOT = "CMSIS_COMPILER_ROOT"
    DEFAULT_CONFIG_PATHS = [
        "~/.config/projmgr/projmgr.yml",
        "~/.config/projmgr/projmgr.yaml",
        "~/.config/projmgr/projmgr.json",
    ]

    # Lowest version, used as "no lower bound"
    ANY_VERSION = "0.0.0"

    # Result code for a command that could not be launched
    EXEC_LAUNCH_FAILURE = -1

    OTHER_CATEGORY = "other"

    # Default and toolchain specific output affixes
    DEFAULT_ELF_SUFFIX = ".elf"
    DEFAULT_LIB_PREFIX = ""
    DEFAULT_LIB_SUFFIX = ".a"
    OUTPUT_AFFIXES = {
        "AC6": (".axf", "", ".lib"),
        "GCC": (".elf", "lib", ".a"),
        "IAR": (".out", "", ".a"),
    }

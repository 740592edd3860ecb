"""Argument parsing functionality for projmgr-ids."""

import argparse
from typing import List, Optional


def _add_component_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--vendor", dest="VENDOR", help="Component vendor (Cvendor)",
                        action="store", type=str, default="")
    parser.add_argument("--class", dest="CCLASS", help="Component class (Cclass)",
                        action="store", type=str, required=True)
    parser.add_argument("--bundle", dest="BUNDLE", help="Component bundle (Cbundle)",
                        action="store", type=str, default="")
    parser.add_argument("--group", dest="GROUP", help="Component group (Cgroup)",
                        action="store", type=str, default="")
    parser.add_argument("--sub", dest="SUB", help="Component sub-group (Csub)",
                        action="store", type=str, default="")
    parser.add_argument("--variant", dest="VARIANT", help="Component variant (Cvariant)",
                        action="store", type=str, default="")
    parser.add_argument("--version", dest="VERSION", help="Component version (Cversion)",
                        action="store", type=str, default="")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="projmgr-ids",
        description=(
            "Component identifiers, compiler version constraints and context names"
        ),
        add_help=True,
    )
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    sub = parser.add_subparsers(dest="COMMAND", metavar="COMMAND")
    sub.required = True

    component = sub.add_parser("component-id", help="Build a component identifier")
    _add_component_options(component)
    component.add_argument("-k", "--kind",
                           dest="KIND",
                           help="Identifier kind (default: full)",
                           action="store",
                           choices=["full", "aggregate", "partial"],
                           default="full")

    parse_id = sub.add_parser("parse-id", help="Decompose a component identifier")
    parse_id.add_argument("IDENTIFIER", help="Component identifier")
    parse_id.add_argument("--strict",
                          dest="STRICT",
                          help="Reject a variant given on both group and sub",
                          action="store_true")

    package = sub.add_parser("package-id", help="Build a pack identifier")
    package.add_argument("--vendor", dest="VENDOR", action="store", type=str, default="")
    package.add_argument("--name", dest="NAME", action="store", type=str, required=True)
    package.add_argument("--version", dest="VERSION", action="store", type=str, default="")

    expand = sub.add_parser("expand", help="Expand a compiler specifier")
    expand.add_argument("COMPILER", help="Compiler specifier, i.e. GCC@>=10.2.0")

    compatible = sub.add_parser("compatible", help="Check two compiler specifiers")
    compatible.add_argument("FIRST", help="First compiler specifier")
    compatible.add_argument("SECOND", help="Second compiler specifier")

    intersect = sub.add_parser("intersect", help="Intersect compiler specifiers")
    intersect.add_argument("COMPILERS", nargs="+", help="Compiler specifiers")
    intersect.add_argument("--legacy",
                           dest="LEGACY",
                           help="Compare range bounds as plain strings",
                           action="store_true")

    context = sub.add_parser("context", help="Parse a context entry")
    context.add_argument("ENTRY", help="Context entry project[.build][+target]")

    category = sub.add_parser("category", help="Classify files by extension")
    category.add_argument("FILES", nargs="+", help="File names")

    affixes = sub.add_parser("affixes", help="Show output file affixes for a compiler")
    affixes.add_argument("COMPILER", help="Compiler name or specifier")

    sub.add_parser("compiler-root", help="Show the compiler root directory")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)

"""projmgr-ids - component identifiers and compiler constraints from the command line.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys
from dataclasses import asdict
from typing import Any, List, Optional

from args import parse_args
from common.compiler_root import get_compiler_root
from common.file_category import get_category
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from common.output_types import get_output_affixes
from config import ConfigError, Settings, load_config
from constants import Constants, ExitCodes
from context import parse_context_entry
from identifiers import (
    ComponentAttributes,
    IdentifierError,
    component_attributes_from_id,
    get_component_aggregate_id,
    get_component_id,
    get_partial_component_id,
    make_package_id,
)
from versioning import are_compilers_compatible, compilers_intersect, expand_compiler_id

logger = logging.getLogger(__name__)


def _emit(value: Any) -> None:
    if isinstance(value, str):
        print(value)
    else:
        print(json.dumps(value, indent=2))


def _setup_logging(args, settings: Settings) -> None:
    """Configure logging; CLI level wins over config and environment."""
    level = getattr(args, "LOG_LEVEL", None) or settings.log_level
    if level:
        os.environ[Constants.ENV_LOG_LEVEL] = str(level).upper()
    configure_logging()

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        ))
        logging.getLogger().addHandler(file_handler)


def intersect_all(compilers: List[str], legacy: bool = False) -> str:
    """Fold ``compilers`` pairwise into one specifier; empty when they conflict."""
    result = ""
    for index, compiler in enumerate(compilers):
        if index == 0:
            result = compiler
            continue
        merged = compilers_intersect(result, compiler, legacy=legacy)
        if not merged and (result or compiler):
            logger.warning("No intersection between %s and %s", result, compiler)
            return ""
        result = merged
    return result


def run_command(args, settings: Settings) -> int:
    """Dispatch a parsed subcommand and return its exit code."""
    command = args.COMMAND
    if command == "component-id":
        component = ComponentAttributes(
            cclass=args.CCLASS, vendor=args.VENDOR, bundle=args.BUNDLE, group=args.GROUP,
            sub=args.SUB, variant=args.VARIANT, version=args.VERSION,
        )
        builders = {
            "full": get_component_id,
            "aggregate": get_component_aggregate_id,
            "partial": get_partial_component_id,
        }
        _emit(builders[args.KIND](component))
    elif command == "parse-id":
        strict = args.STRICT or settings.strict_variants
        try:
            _emit(component_attributes_from_id(args.IDENTIFIER, strict=strict))
        except IdentifierError as exc:
            logger.error("%s", exc)
            return ExitCodes.USAGE_ERROR.value
    elif command == "package-id":
        _emit(make_package_id(args.VENDOR, args.NAME, args.VERSION))
    elif command == "expand":
        _emit(asdict(expand_compiler_id(args.COMPILER)))
    elif command == "compatible":
        compatible = are_compilers_compatible(args.FIRST, args.SECOND)
        _emit({"compatible": compatible})
        if not compatible:
            return ExitCodes.INCOMPATIBLE.value
    elif command == "intersect":
        legacy = args.LEGACY or settings.legacy_intersection
        result = intersect_all(args.COMPILERS, legacy=legacy)
        _emit(result)
        if not result and any(args.COMPILERS):
            return ExitCodes.INCOMPATIBLE.value
    elif command == "context":
        _emit(asdict(parse_context_entry(args.ENTRY)))
    elif command == "category":
        _emit({name: get_category(name) for name in args.FILES})
    elif command == "affixes":
        elf_suffix, lib_prefix, lib_suffix = get_output_affixes(args.COMPILER)
        _emit({"elf_suffix": elf_suffix, "lib_prefix": lib_prefix, "lib_suffix": lib_suffix})
    elif command == "compiler-root":
        _emit(get_compiler_root(configured=settings.compiler_root))
    return ExitCodes.SUCCESS.value


def main(argv: Optional[List[str]] = None) -> int:
    """Main function of the program."""
    args = parse_args(argv)
    try:
        settings = load_config(getattr(args, "CONFIG", None))
    except ConfigError as exc:
        configure_logging()
        logger.error("%s", exc)
        return ExitCodes.FILE_ERROR.value
    _setup_logging(args, settings)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.COMMAND)
        )
    return run_command(args, settings)


if __name__ == "__main__":
    sys.exit(main())

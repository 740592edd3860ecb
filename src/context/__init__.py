"""Context entry parsing."""

from .parser import ContextName, parse_context_entry

__all__ = ["ContextName", "parse_context_entry"]

"""Shared helpers used across identifier, versioning and CLI modules."""

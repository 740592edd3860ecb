"""Tests for context entry parsing."""

import pytest

from context import ContextName, parse_context_entry


class TestParseContextEntry:
    """Test splitting of project, build type and target type."""

    def test_all_parts(self):
        assert parse_context_entry("myproj.Debug+Board") == ContextName("myproj", "Debug", "Board")

    def test_target_only(self):
        assert parse_context_entry("myproj+Board") == ContextName("myproj", "", "Board")

    def test_build_only(self):
        assert parse_context_entry("myproj.Release") == ContextName("myproj", "Release", "")

    def test_project_only(self):
        assert parse_context_entry("myproj") == ContextName("myproj", "", "")

    def test_target_before_build(self):
        assert parse_context_entry("myproj+Board.Debug") == ContextName("myproj", "Debug", "Board")

    def test_empty_entry(self):
        assert parse_context_entry("") == ContextName("", "", "")

    def test_missing_project(self):
        assert parse_context_entry(".Debug+Board") == ContextName("", "Debug", "Board")

    def test_last_dot_before_plus_starts_build_type(self):
        assert parse_context_entry("a.b.c+d") == ContextName("a", "c", "d")

    @pytest.mark.parametrize("entry", [
        "myproj.Debug+Board",
        "myproj+Board",
        "myproj.Release",
        "myproj",
    ])
    def test_str_reassembles_entry(self, entry):
        assert str(parse_context_entry(entry)) == entry

"""
Unit tests for domain entities.
"""

import pytest

from roamingzed.domain.entities.command_output import CommandOutput, OutputSection
from roamingzed.domain.entities.slash_command import (
    ArgumentCompletion,
    CommandInvocation,
    SlashCommand,
)
from roamingzed.domain.value_objects.text_range import TextRange
from roamingzed.domain.exceptions.domain_exceptions import InvalidTextRangeError


class TestSlashCommand:
    """Tests for SlashCommand entity."""

    def test_usage_without_argument(self):
        """Test usage of a command without arguments."""
        command = SlashCommand("graph", "Show graph", "tooltip")
        assert command.usage == "/graph"
        assert command.requires_argument is False

    def test_usage_with_argument(self):
        """Test usage of a command requiring an argument."""
        command = SlashCommand("related", "Find", "tooltip", requires_argument=True)
        assert command.usage == "/related <query>"

    def test_empty_name_rejected(self):
        """Test rejection of an empty name."""
        with pytest.raises(ValueError):
            SlashCommand("  ", "desc", "tooltip")


class TestCommandInvocation:
    """Tests for CommandInvocation entity."""

    def test_joined_arguments(self):
        """Test arguments are joined with single spaces."""
        invocation = CommandInvocation("related", ("zettelkasten", "method"))
        assert invocation.joined_arguments == "zettelkasten method"

    def test_defaults(self):
        """Test default arguments and workspace."""
        invocation = CommandInvocation("backlinks")
        assert invocation.arguments == ()
        assert invocation.workspace_root is None
        assert invocation.joined_arguments == ""


class TestCommandOutput:
    """Tests for CommandOutput entity."""

    def test_single_section_covers_text(self):
        """Test single_section spans the whole text."""
        output = CommandOutput.single_section("# Title", "Title")

        assert len(output.sections) == 1
        assert output.sections[0].range == TextRange(0, 7)
        assert output.sections[0].label == "Title"
        assert output.section_text() == "# Title"

    def test_out_of_bounds_section_rejected(self):
        """Test a section beyond the text is rejected."""
        with pytest.raises(InvalidTextRangeError):
            CommandOutput(
                text="abc",
                sections=(OutputSection(range=TextRange(0, 10), label="x"),),
            )

    def test_empty_label_rejected(self):
        """Test an empty section label is rejected."""
        with pytest.raises(InvalidTextRangeError):
            OutputSection(range=TextRange(0, 1), label="")

    def test_no_sections(self):
        """Test output without sections."""
        output = CommandOutput(text="plain")
        assert output.sections == ()


class TestArgumentCompletion:
    """Tests for ArgumentCompletion entity."""

    def test_defaults(self):
        """Test default run_command flag."""
        completion = ArgumentCompletion(label="Index", new_text="Index")
        assert completion.run_command is False

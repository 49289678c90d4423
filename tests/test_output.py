"""Tests for output formatting functionality."""

import json

from pin_cli.output import OutputFormatter, format_json, format_table
from pin_cli.tags import Tag


class TestOutputFormatter:
    """Test cases for OutputFormatter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = OutputFormatter()
        self.tags = [Tag(name="go", use_count=3), Tag(name="rust", use_count=12)]

    def test_tag_column_width_is_longest_name(self):
        """Test the tag column matches the longest name."""
        tags = self.tags + [Tag(name="javascript", use_count=1)]

        assert self.formatter.tag_column_width(tags) == len("javascript")

    def test_tag_column_width_empty(self):
        """Test the tag column width with no tags."""
        assert self.formatter.tag_column_width([]) == 0

    def test_use_count_width_minimum(self):
        """Test the use count column is never narrower than its header."""
        assert self.formatter.use_count_column_width(self.tags) == 9
        assert self.formatter.use_count_column_width([]) == 9
        assert self.formatter.use_count_column_width([Tag("a", 0)]) == 9

    def test_use_count_width_at_powers_of_ten(self):
        """Test digit counting at exact powers of ten."""
        for count, digits in [(1, 1), (10, 2), (100, 3), (10**9, 10), (10**12, 13)]:
            width = self.formatter.use_count_column_width([Tag("a", count)])
            assert width == max(digits, 9)

    def test_use_count_width_wide_counts(self):
        """Test the use count column grows past the header width."""
        tags = [Tag("a", 9999999999), Tag("b", 1)]

        assert self.formatter.use_count_column_width(tags) == 10

    def test_format_table(self):
        """Test the full table layout."""
        output = self.formatter.format_table(self.tags)

        assert output.split("\n") == [
            "| Tag  | Use Count |",
            "+------+-----------+",
            "| go   |         3 |",
            "| rust |        12 |",
            "+------+-----------+",
        ]

    def test_format_table_keeps_row_order(self):
        """Test rows appear in the order given."""
        output = self.formatter.format_table(list(reversed(self.tags)))
        lines = output.split("\n")

        assert lines[2].startswith("| rust ")
        assert lines[3].startswith("| go ")

    def test_format_table_rows_are_aligned(self):
        """Test every data row and rule has the same width."""
        tags = [Tag("a", 5), Tag("longer-tag-name", 12345678901)]
        lines = self.formatter.format_table(tags).split("\n")

        assert len({len(line) for line in lines}) == 1
        assert lines[3] == "| longer-tag-name | 12345678901 |"

    def test_format_table_empty(self):
        """Test a table with no tags has only the header and rules."""
        lines = self.formatter.format_table([]).split("\n")

        assert len(lines) == 3
        assert lines[1] == lines[2] == "+--+-----------+"

    def test_format_json(self):
        """Test JSON output keeps order and uses integer counts."""
        output = self.formatter.format_json(self.tags)

        assert json.loads(output) == [
            {"name": "go", "use_count": 3},
            {"name": "rust", "use_count": 12},
        ]

    def test_format_json_empty(self):
        """Test JSON output with no tags."""
        assert json.loads(self.formatter.format_json([])) == []


class TestConvenienceFunctions:
    """Test module-level convenience functions."""

    def test_format_table_function(self):
        """Test the format_table convenience function."""
        tags = [Tag("go", 3)]

        assert format_table(tags) == OutputFormatter().format_table(tags)

    def test_format_json_function(self):
        """Test the format_json convenience function."""
        tags = [Tag("go", 3)]

        assert format_json(tags) == OutputFormatter().format_json(tags)

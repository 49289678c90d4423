"""Output formatting for the pin CLI."""

import json
from typing import List

from .tags import Tag

TAG_HEADER = "Tag"
USE_COUNT_HEADER = "Use Count"


class OutputFormatter:
    """Handles output formatting for both table and JSON formats."""

    def tag_column_width(self, tags: List[Tag]) -> int:
        """Width of the tag column: the longest tag name."""
        return max((len(tag.name) for tag in tags), default=0)

    def use_count_column_width(self, tags: List[Tag]) -> int:
        """Width of the use count column.

        This is the number of decimal digits in the largest use count,
        but never narrower than the "Use Count" header.
        """
        max_use_count = max((tag.use_count for tag in tags), default=0)
        return max(len(str(max_use_count)), len(USE_COUNT_HEADER))

    def format_table(self, tags: List[Tag]) -> str:
        """Render tags as a bordered text table.

        Args:
            tags: Tags in display order

        Returns:
            Table text, one line per row, without a trailing newline
        """
        name_width = self.tag_column_width(tags)
        count_width = self.use_count_column_width(tags)

        rule = f"+{'-' * (name_width + 2)}+{'-' * (count_width + 2)}+"

        lines = [
            f"| {TAG_HEADER:<{name_width}} | {USE_COUNT_HEADER:>{count_width}} |",
            rule,
        ]
        for tag in tags:
            lines.append(
                f"| {tag.name:<{name_width}} | {tag.use_count:>{count_width}} |"
            )
        lines.append(rule)

        return "\n".join(lines)

    def format_json(self, tags: List[Tag]) -> str:
        """Generate JSON array output.

        Args:
            tags: Tags in display order

        Returns:
            JSON string with one object per tag
        """
        json_results = [
            {"name": tag.name, "use_count": tag.use_count} for tag in tags
        ]
        return json.dumps(json_results, indent=2)


def format_table(tags: List[Tag]) -> str:
    """Render tags as a bordered text table.

    This is a convenience function that creates an OutputFormatter instance
    and calls the format_table method.
    """
    formatter = OutputFormatter()
    return formatter.format_table(tags)


def format_json(tags: List[Tag]) -> str:
    """Generate JSON array output.

    This is a convenience function that creates an OutputFormatter instance
    and calls the format_json method.
    """
    formatter = OutputFormatter()
    return formatter.format_json(tags)

"""Tag model, response parsing and sort orders."""

import json
import re
from dataclasses import dataclass
from typing import List

from .errors import TagParseError

# Largest value the service can report for a use count.
MAX_USE_COUNT = 2**64 - 1

_DECIMAL_RE = re.compile(r"[0-9]+")


@dataclass
class Tag:
    """A bookmark tag and the number of bookmarks using it."""

    name: str
    use_count: int


def parse_use_count(name: str, value: object) -> int:
    """Parse a use count sent as a decimal string.

    Raises:
        TagParseError: If the value is not a string of ASCII digits
            representing an unsigned 64-bit integer
    """
    if not isinstance(value, str) or not _DECIMAL_RE.fullmatch(value):
        raise TagParseError(f"Invalid use count for tag {name!r}: {value!r}")

    count = int(value)
    if count > MAX_USE_COUNT:
        raise TagParseError(f"Use count out of range for tag {name!r}: {value}")
    return count


def parse_tags(body: str) -> List[Tag]:
    """Deserialize a tags/get response body.

    The body is a JSON object mapping each tag name to its use count,
    encoded as a decimal string, e.g. ``{"go": "3", "rust": "12"}``.

    Args:
        body: Raw response text

    Returns:
        Tags in the order the service sent them

    Raises:
        TagParseError: If the body is not a JSON object or any count is
            not a valid non-negative integer
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise TagParseError(f"Invalid JSON in tag listing: {e}") from e

    if not isinstance(data, dict):
        raise TagParseError(
            f"Expected a JSON object in tag listing, got {type(data).__name__}"
        )

    return [
        Tag(name=name, use_count=parse_use_count(name, value))
        for name, value in data.items()
    ]


def sort_tags(
    tags: List[Tag], alphabetical: bool = False, descending: bool = False
) -> List[Tag]:
    """Return the tags sorted by name or by use count.

    The default order is by use count, ascending. Ties keep their input
    order.

    Args:
        tags: Tags to sort
        alphabetical: Sort by name instead of use count
        descending: Reverse the order

    Returns:
        A new sorted list
    """
    if alphabetical:
        key = _by_name
    else:
        key = _by_use_count
    return sorted(tags, key=key, reverse=descending)


def _by_name(tag: Tag) -> str:
    return tag.name


def _by_use_count(tag: Tag) -> int:
    return tag.use_count


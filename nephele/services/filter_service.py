"""EC2 filter translation

Users filter ``ec2 list`` with short keys (``name=web``, ``state=running``).
This module maps each key onto the filter name DescribeInstances expects and
expands the value into wildcard case variants, so ``name=WebServer`` also
matches instances tagged ``prod-webserver``.
"""

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Union

from nephele.exceptions import FilterError

logger = logging.getLogger("nephele")

# User filter key -> EC2 DescribeInstances filter name
FILTER_MAP: Dict[str, str] = {
    "az": "availability-zone",
    "id": "instance-id",
    "name": "tag:Name",
    "state": "instance-state-name",
    "type": "instance-type",
}

Ec2Filter = Dict[str, Union[str, List[str]]]

_WORD_START = re.compile(r"\b(\w)")


def title_case(value: str) -> str:
    """Capitalize the first letter of every word, leaving the rest alone.

    Unlike ``str.title()`` this does not lowercase the remaining letters,
    so ``"my-webAPP"`` becomes ``"My-WebAPP"``.
    """
    return _WORD_START.sub(lambda m: m.group(1).upper(), value)


def expand_value(value: str) -> List[str]:
    """Expand a filter value into wildcard patterns for as-is, title and lower case.

    Duplicate patterns are dropped, keeping the first occurrence.
    """
    variants = [value, title_case(value), value.lower()]
    patterns = []
    for variant in variants:
        pattern = f"*{variant}*"
        if pattern not in patterns:
            patterns.append(pattern)
    return patterns


def resolve_key(key: str) -> str:
    """Map a user filter key to its EC2 filter name.

    Raises:
        FilterError: If the key is not supported
    """
    try:
        return FILTER_MAP[key]
    except KeyError:
        raise FilterError(f"filter error: invalid filter key: '{key}'") from None


def translate(user_filter: str) -> Ec2Filter:
    """Translate one ``key=value`` filter into an EC2 filter.

    Args:
        user_filter: Filter as typed on the command line, e.g. ``"state=running"``

    Returns:
        Dict with ``Name`` and ``Values`` as DescribeInstances expects

    Raises:
        FilterError: If ``=`` is missing or the key is unknown
    """
    if "=" not in user_filter:
        raise FilterError("filter error: invalid filter format")

    key, value = user_filter.split("=", 1)
    return {"Name": resolve_key(key), "Values": expand_value(value)}


def translate_all(user_filters: Iterable[str]) -> List[Ec2Filter]:
    """Translate several filters, stopping at the first invalid one."""
    filters = [translate(user_filter) for user_filter in user_filters]
    logger.debug(f"Translated filters: {filters}")
    return filters


def load_filters_file(path: Union[str, Path]) -> List[Ec2Filter]:
    """Load filters from a JSON file and translate them.

    The file holds a list of objects using the short keys::

        [{"Name": "state", "Values": ["running"]},
         {"Name": "name", "Values": ["web", "api"]}]

    Every value expands into the same case variants as command-line filters.

    Raises:
        FilterError: If the file is not JSON, cannot be read, or has an invalid key
    """
    path = Path(path)
    if path.suffix.lower() != ".json":
        raise FilterError("filter file error: invalid file format")

    try:
        with open(path, "r", encoding="utf-8") as f:
            entries = json.load(f)
    except OSError as e:
        raise FilterError(f"filter file error: cannot read '{path}': {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise FilterError(f"filter file error: invalid JSON in '{path}': {e.msg}") from e

    if not isinstance(entries, list):
        raise FilterError("filter file error: expected a list of filters")

    filters = []
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("Name"), str):
            raise FilterError("filter file error: each filter needs a 'Name'")
        provider_key = resolve_key(entry["Name"])
        values = entry.get("Values")
        if values is not None and not isinstance(values, list):
            raise FilterError(f"filter file error: 'Values' of '{entry['Name']}' must be a list")
        if not values:
            raise FilterError(f"filter file error: no values for '{entry['Name']}'")

        patterns = []
        for value in values:
            for pattern in expand_value(str(value)):
                if pattern not in patterns:
                    patterns.append(pattern)
        filters.append({"Name": provider_key, "Values": patterns})

    logger.debug(f"Loaded {len(filters)} filters from {path}")
    return filters

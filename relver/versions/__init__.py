"""Version comparison, range bounds and tag naming."""

from .compare import highest, highest_of, is_prerelease, lowest, lowest_of, parse_version
from .model import Branch, Tag
from .ranges import (
    ComparatorRange,
    ExactVersion,
    InvalidRange,
    MajorWildcard,
    MinorWildcard,
    VersionRange,
    classify_range,
    format_comparators,
    get_lower_bound,
    get_range,
    get_upper_bound,
    is_lts_range,
    is_major_range,
    satisfies,
)
from .select import get_earliest_version, get_first_version, get_latest_version, tags_to_versions
from .tags import DEFAULT_TAG_FORMAT, is_same_channel, make_tag, parse_tag

__all__ = [
    # compare
    "highest",
    "highest_of",
    "is_prerelease",
    "lowest",
    "lowest_of",
    "parse_version",
    # model
    "Branch",
    "Tag",
    # ranges
    "ComparatorRange",
    "ExactVersion",
    "InvalidRange",
    "MajorWildcard",
    "MinorWildcard",
    "VersionRange",
    "classify_range",
    "format_comparators",
    "get_lower_bound",
    "get_range",
    "get_upper_bound",
    "is_lts_range",
    "is_major_range",
    "satisfies",
    # select
    "get_earliest_version",
    "get_first_version",
    "get_latest_version",
    "tags_to_versions",
    # tags
    "DEFAULT_TAG_FORMAT",
    "is_same_channel",
    "make_tag",
    "parse_tag",
]

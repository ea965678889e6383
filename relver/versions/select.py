"""Pick versions out of tag lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from relver.versions.compare import highest_of, is_prerelease, lowest_of, parse_version
from relver.versions.model import Branch, Tag

__all__ = [
    "get_earliest_version",
    "get_first_version",
    "get_latest_version",
    "tags_to_versions",
]


def tags_to_versions(tags: Iterable[Tag]) -> list[str]:
    return [tag.version for tag in tags]


def _eligible(versions: Iterable[str], *, prerelease: bool) -> list[str]:
    valid = [v for v in versions if parse_version(v) is not None]
    if prerelease:
        return valid
    return [v for v in valid if not is_prerelease(v)]


def get_latest_version(versions: Iterable[str], *, prerelease: bool = False) -> str | None:
    """Return the highest version.

    Prereleases are only considered with ``prerelease=True``; a list holding
    nothing but prereleases yields None otherwise.
    """
    return highest_of(_eligible(versions, prerelease=prerelease))


def get_earliest_version(versions: Iterable[str], *, prerelease: bool = False) -> str | None:
    """Return the lowest version, with the same prerelease policy as ``get_latest_version``."""
    return lowest_of(_eligible(versions, prerelease=prerelease))


def get_first_version(versions: Iterable[str], branches: Sequence[Branch]) -> str | None:
    """Return the lowest version not already claimed by any of ``branches``.

    A version is claimed when it appears among a branch's tags. Returns None
    when every version is claimed.
    """
    claimed = {version for branch in branches for version in tags_to_versions(branch.tags)}
    return lowest_of(v for v in versions if v not in claimed)

"""Null-tolerant version comparison on top of ``semver``.

Absent versions (``None``) and strings that are not valid semver never win
and never raise: comparing one of them with a valid version yields the valid
one.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from semver import Version

__all__ = [
    "highest",
    "highest_of",
    "is_prerelease",
    "is_valid_version",
    "lowest",
    "lowest_of",
    "parse_version",
]


def is_valid_version(version: str) -> bool:
    return Version.is_valid(version)


def parse_version(version: str) -> Version | None:
    """Parse a strict semver string, or None if it is not one."""
    if not Version.is_valid(version):
        return None
    return Version.parse(version)


def is_prerelease(version: str) -> bool:
    """True for a valid prerelease version; invalid strings are never prereleases."""
    v = parse_version(version)
    return v is not None and v.prerelease is not None


def _pick(version1: str | None, version2: str | None, *, greater: bool) -> str | None:
    # Unparseable versions count as absent.
    v1 = parse_version(version1) if version1 else None
    v2 = parse_version(version2) if version2 else None
    if v1 is None or not version1:
        return version2 if v2 is not None else None
    if v2 is None or not version2:
        return version1
    if v1 == v2:
        # Equal precedence (e.g. differing build metadata): keep the result order-independent.
        return min(version1, version2)
    if (v1 > v2) == greater:
        return version1
    return version2


def highest(version1: str | None = None, version2: str | None = None) -> str | None:
    """Return the greater of two versions.

    Absent or invalid versions are ignored:

    >>> highest("1.0.0", "2.0.0")
    '2.0.0'
    >>> highest(None, "1.0.0")
    '1.0.0'
    >>> highest("v1.0.0", "1.0.0")
    '1.0.0'
    """
    return _pick(version1, version2, greater=True)


def lowest(version1: str | None = None, version2: str | None = None) -> str | None:
    """Return the lesser of two versions, with the same absent handling as ``highest``."""
    return _pick(version1, version2, greater=False)


def highest_of(versions: Iterable[str | None]) -> str | None:
    return reduce(highest, versions, None)


def lowest_of(versions: Iterable[str | None]) -> str | None:
    return reduce(lowest, versions, None)

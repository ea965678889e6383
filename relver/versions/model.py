from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Tag:
    """A released version, as found on a branch."""

    version: str
    channel: str | None = None
    # Full tag name (e.g. "v1.2.0@next") when known.
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Branch:
    """A release line and the versions it has already claimed."""

    name: str
    tags: tuple[Tag, ...] = ()
    # Wildcard or comparator range the branch is restricted to, if any.
    range: str | None = None
    channel: str | None = None
    prerelease: bool = False

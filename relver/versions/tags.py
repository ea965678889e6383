"""Tag names built from a ``${version}`` template, and back."""

from __future__ import annotations

import re

from semver import Version

from relver.versions.model import Tag

__all__ = [
    "DEFAULT_TAG_FORMAT",
    "is_same_channel",
    "make_tag",
    "parse_tag",
]

DEFAULT_TAG_FORMAT = "v${version}"

_PLACEHOLDER = "${version}"


def make_tag(template: str, version: str, channel: str | None = None) -> str:
    """Render a tag name.

    With a channel, ``version@channel`` is what gets substituted, so
    ``make_tag("v${version}", "1.0.0", "next")`` is ``"v1.0.0@next"``. A literal
    ``@`` already present in the template is kept as is, and so is every
    other character: only the first ``${version}`` is replaced.
    """
    value = f"{version}@{channel}" if channel else version
    return template.replace(_PLACEHOLDER, value, 1)


def _tag_pattern(template: str) -> re.Pattern[str]:
    head, sep, tail = template.partition(_PLACEHOLDER)
    if not sep:
        raise ValueError(f"tag format has no {_PLACEHOLDER} placeholder: {template!r}")
    return re.compile(
        rf"^{re.escape(head)}(?P<version>[^@\s]+)(?:@(?P<channel>[^@\s]+))?{re.escape(tail)}$"
    )


def parse_tag(template: str, name: str) -> Tag | None:
    """Recover the version (and channel) from a tag name.

    Returns None when the name does not follow ``template`` or does not carry a
    valid semver version.

    Raises:
        ValueError: If ``template`` has no ``${version}`` placeholder.
    """
    m = _tag_pattern(template).match(name)
    if m is None or not Version.is_valid(m.group("version")):
        return None
    return Tag(version=m.group("version"), channel=m.group("channel"), name=name)


def is_same_channel(channel: str | None, other: str | None) -> bool:
    """Compare channels; an absent or empty channel is the default channel."""
    return (channel or None) == (other or None)

"""Version commands: bounds, latest, earliest, tag."""

from __future__ import annotations

import typer

from relver.cli.commands._helpers import exit_with_code
from relver.cli.context import CLIContext, build_context
from relver.core.errors import ErrorCode
from relver.output.console import Style
from relver.versions.compare import is_valid_version
from relver.versions.ranges import (
    ComparatorRange,
    ExactVersion,
    InvalidRange,
    MajorWildcard,
    MinorWildcard,
    VersionRange,
    classify_range,
    get_lower_bound,
    get_range,
    get_upper_bound,
    is_lts_range,
)
from relver.versions.select import get_earliest_version, get_latest_version
from relver.versions.tags import DEFAULT_TAG_FORMAT, make_tag


def _kind_label(kind: VersionRange) -> str:
    match kind:
        case ExactVersion():
            return "exact"
        case MajorWildcard():
            return "major wildcard"
        case MinorWildcard():
            return "minor wildcard"
        case ComparatorRange():
            return "comparator"
        case InvalidRange():
            return "invalid"
        case other:
            raise AssertionError(f"unexpected range: {other!r}")


def _require_versions(ctx: CLIContext, versions: list[str]) -> None:
    invalid = [v for v in versions if not is_valid_version(v)]
    if not invalid:
        return
    for v in invalid:
        ctx.console.error(f"invalid version: {v}")
    ctx.console.print("hint: expected MAJOR.MINOR.PATCH[-PRERELEASE]", Style.DIM)
    exit_with_code(int(ErrorCode.USER_ERROR))


def bounds(
    range_expr: str = typer.Argument(..., metavar="RANGE", help="Range, e.g. 1.x, 1.2.x, ~1.2.0"),
) -> None:
    """Show the lower and upper version bounds of a range."""
    ctx = build_context()
    kind = classify_range(range_expr)
    if isinstance(kind, InvalidRange):
        ctx.console.error(f"invalid range: {range_expr}")
        ctx.console.print("hint: use 1.x, 1.2.x, 1.2.3, ~1.2.3, ^1.2.3 or >=1.0.0 <2.0.0", Style.DIM)
        exit_with_code(int(ErrorCode.USER_ERROR))

    lower = get_lower_bound(range_expr)
    upper = get_upper_bound(range_expr)
    ctx.console.field("kind", _kind_label(kind))
    ctx.console.field("lts", "yes" if is_lts_range(range_expr) else "no")
    ctx.console.field("lower", lower)
    ctx.console.field("upper", upper)
    if lower is not None and not isinstance(kind, ExactVersion):
        ctx.console.field("range", get_range(lower, upper))


def latest(
    versions: list[str] = typer.Argument(..., help="Candidate versions"),
    prerelease: bool = typer.Option(False, "--prerelease", help="Consider prereleases"),
) -> None:
    """Print the highest of the given versions."""
    ctx = build_context()
    _require_versions(ctx, versions)
    found = get_latest_version(versions, prerelease=prerelease)
    if found is None:
        ctx.console.warning("no eligible version (prereleases are skipped without --prerelease)")
        return
    ctx.console.print(found)


def earliest(
    versions: list[str] = typer.Argument(..., help="Candidate versions"),
    prerelease: bool = typer.Option(False, "--prerelease", help="Consider prereleases"),
) -> None:
    """Print the lowest of the given versions."""
    ctx = build_context()
    _require_versions(ctx, versions)
    found = get_earliest_version(versions, prerelease=prerelease)
    if found is None:
        ctx.console.warning("no eligible version (prereleases are skipped without --prerelease)")
        return
    ctx.console.print(found)


def tag(
    version: str = typer.Argument(..., help="Version to tag"),
    tag_format: str = typer.Option(DEFAULT_TAG_FORMAT, "--format", help="Tag template"),
    channel: str | None = typer.Option(None, "--channel", help="Distribution channel"),
) -> None:
    """Print the tag name for a version."""
    ctx = build_context()
    _require_versions(ctx, [version])
    if "${version}" not in tag_format:
        ctx.console.error(f"tag format has no ${{version}} placeholder: {tag_format}")
        exit_with_code(int(ErrorCode.USER_ERROR))
    ctx.console.print(make_tag(tag_format, version, channel))

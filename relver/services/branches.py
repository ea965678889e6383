"""Work out which versions each configured branch is responsible for.

Branches are evaluated in configured order; a branch only owns the versions
that no earlier branch has already released.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from relver.core.config import Config
from relver.core.failures import Failure, failure_of
from relver.core.result import Err, Ok, Result
from relver.services.errors import ReleaseError
from relver.versions.model import Branch, Tag
from relver.versions.ranges import (
    ComparatorRange,
    ExactVersion,
    InvalidRange,
    MajorWildcard,
    MinorWildcard,
    classify_range,
    format_comparators,
    get_lower_bound,
    get_range,
    get_upper_bound,
    is_lts_range,
    satisfies,
)
from relver.versions.select import get_first_version, get_latest_version, tags_to_versions
from relver.versions.tags import is_same_channel, parse_tag


@dataclass(frozen=True, slots=True)
class BranchPlan:
    name: str
    channel: str | None
    # Comparator range (or exact version) the branch releases into; None when
    # the branch owns nothing yet.
    range: str | None
    lower: str | None
    upper: str | None
    first: str | None
    latest: str | None


def branches_from_config(config: Config) -> Result[list[Branch], Failure[ReleaseError]]:
    """Turn config entries into ``Branch`` records, parsing every tag name."""
    errors: list[ReleaseError] = []
    branches: list[Branch] = []

    for entry in config.branches:
        tags: list[Tag] = []
        for name in entry.tags:
            tag = parse_tag(config.tag_format, name)
            if tag is None:
                errors.append(
                    ReleaseError(
                        kind="invalid_tag",
                        message=f"branch '{entry.name}': tag '{name}' does not match {config.tag_format}",
                        hint="Tags must carry a valid semver version.",
                    )
                )
                continue
            tags.append(tag)

        branch_range = entry.range
        if branch_range is None and is_lts_range(entry.name):
            branch_range = entry.name

        branches.append(
            Branch(
                name=entry.name,
                tags=tuple(tags),
                range=branch_range,
                channel=entry.channel,
                prerelease=entry.prerelease,
            )
        )

    if errors:
        return Err(failure_of(errors))
    return Ok(branches)


def _check_range(branch: Branch, range_expr: str, versions: Sequence[str]) -> list[ReleaseError]:
    if isinstance(classify_range(range_expr), InvalidRange):
        return [
            ReleaseError(
                kind="invalid_range",
                message=f"branch '{branch.name}': invalid range '{range_expr}'",
                hint="Use a wildcard (1.x, 1.2.x) or comparator range (>=1.0.0 <2.0.0).",
            )
        ]
    if branch.prerelease:
        return [
            ReleaseError(
                kind="invalid_branch",
                message=f"branch '{branch.name}': a prerelease branch cannot have a range",
            )
        ]
    return [
        ReleaseError(
            kind="tag_out_of_range",
            message=f"branch '{branch.name}': version {v} is outside {range_expr}",
        )
        for v in versions
        if not satisfies(v, range_expr)
    ]


def plan_branch(branch: Branch, previous: Sequence[Branch]) -> BranchPlan:
    """Plan one branch given the branches evaluated before it."""
    versions = tags_to_versions(branch.tags)
    first = get_first_version(versions, previous)
    on_channel = [t for t in branch.tags if is_same_channel(t.channel, branch.channel)]
    latest = get_latest_version(tags_to_versions(on_channel), prerelease=branch.prerelease)

    if branch.range is None:
        return BranchPlan(
            name=branch.name,
            channel=branch.channel,
            range=get_range(first) if first else None,
            lower=first,
            upper=None,
            first=first,
            latest=latest,
        )

    lower = get_lower_bound(branch.range)
    upper = get_upper_bound(branch.range)
    rendered: str | None
    match classify_range(branch.range):
        case ExactVersion(version=version):
            rendered = version
        case ComparatorRange() as cmp:
            rendered = format_comparators(cmp)
        case MajorWildcard() | MinorWildcard() if lower is not None:
            rendered = get_range(lower, upper)
        case _:
            rendered = None

    return BranchPlan(
        name=branch.name,
        channel=branch.channel,
        range=rendered,
        lower=lower,
        upper=upper,
        first=first,
        latest=latest,
    )


def plan_branches(branches: Sequence[Branch]) -> Result[list[BranchPlan], Failure[ReleaseError]]:
    """Plan every branch, collecting all problems before failing."""
    errors: list[ReleaseError] = []
    plans: list[BranchPlan] = []
    seen: set[str] = set()

    for i, branch in enumerate(branches):
        if branch.name in seen:
            errors.append(
                ReleaseError(
                    kind="duplicate_branch",
                    message=f"branch '{branch.name}' is configured more than once",
                )
            )
            continue
        seen.add(branch.name)

        if branch.range is not None:
            problems = _check_range(branch, branch.range, tags_to_versions(branch.tags))
            if problems:
                errors.extend(problems)
                continue

        plans.append(plan_branch(branch, branches[:i]))

    if errors:
        return Err(failure_of(errors))
    return Ok(plans)

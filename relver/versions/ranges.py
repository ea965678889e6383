"""Range classification and bound resolution.

A range string is classified once into a ``VersionRange`` variant; bounds,
containment and the LTS checks all match on that variant.

Supported shapes:

- exact version: ``1.2.3`` (also ``=1.2.3``)
- major wildcard: ``1.x``, ``1.x.x``, ``1.X.X``, ``1.*``
- minor wildcard: ``1.2.x``, ``1.2.X``, ``1.2``
- comparator range: ``>=1.0.0 <1.1.0``, ``>1.0.0``, ``<=2.0.0``, ``~1.2.3``,
  ``^1.2.3``

Lower bounds are inclusive; upper bounds are exclusive unless the range says
otherwise (``<=``). An exact version is its own lower and upper bound.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from semver import Version

__all__ = [
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
]


_NUM = r"(0|[1-9]\d*)"
_WILD = r"[xX*]"
_MAJOR_WILDCARD_RE = re.compile(rf"^{_NUM}\.{_WILD}(?:\.{_WILD})?$")
_MINOR_WILDCARD_RE = re.compile(rf"^{_NUM}\.{_NUM}(?:\.{_WILD})?$")
_SHORTHAND_RE = re.compile(r"^([~^])\s*(\S+)$")
_COMPARATOR_RE = re.compile(r"^(>=|<=|>|<|=)?(\S+)$")
_OPERATOR_SPACE_RE = re.compile(r"(>=|<=|>|<|=)\s+")


@dataclass(frozen=True, slots=True)
class ExactVersion:
    version: str


@dataclass(frozen=True, slots=True)
class MinorWildcard:
    major: int
    minor: int


@dataclass(frozen=True, slots=True)
class MajorWildcard:
    major: int


@dataclass(frozen=True, slots=True)
class ComparatorRange:
    """Range written with explicit comparators (or ``~``/``^`` shorthands)."""

    lower: str | None
    upper: str | None
    lower_inclusive: bool = True
    upper_inclusive: bool = False


@dataclass(frozen=True, slots=True)
class InvalidRange:
    text: str


type VersionRange = ExactVersion | MinorWildcard | MajorWildcard | ComparatorRange | InvalidRange


def classify_range(text: str) -> VersionRange:
    """Classify a range expression. Never raises."""
    s = text.strip()
    if Version.is_valid(s):
        return ExactVersion(s)

    m = _MAJOR_WILDCARD_RE.match(s)
    if m is not None:
        return MajorWildcard(int(m.group(1)))

    m = _MINOR_WILDCARD_RE.match(s)
    if m is not None:
        return MinorWildcard(int(m.group(1)), int(m.group(2)))

    m = _SHORTHAND_RE.match(s)
    if m is not None:
        return _classify_shorthand(m.group(1), m.group(2), text)

    return _classify_comparators(s, text)


def _classify_shorthand(operator: str, version: str, text: str) -> VersionRange:
    if not Version.is_valid(version):
        return InvalidRange(text)
    v = Version.parse(version)
    if operator == "~":
        return ComparatorRange(lower=version, upper=str(v.bump_minor()))
    # Caret: the leftmost non-zero component is fixed.
    if v.major:
        upper = v.bump_major()
    elif v.minor:
        upper = v.bump_minor()
    else:
        upper = v.bump_patch()
    return ComparatorRange(lower=version, upper=str(upper))


def _classify_comparators(s: str, text: str) -> VersionRange:
    tokens = _OPERATOR_SPACE_RE.sub(r"\1", s).split()
    if not tokens or len(tokens) > 2:
        return InvalidRange(text)

    lower: tuple[Version, bool] | None = None
    upper: tuple[Version, bool] | None = None
    for token in tokens:
        m = _COMPARATOR_RE.match(token)
        if m is None or not Version.is_valid(m.group(2)):
            return InvalidRange(text)
        op = m.group(1) or "="
        v = Version.parse(m.group(2))
        match op:
            case "=":
                if len(tokens) != 1:
                    return InvalidRange(text)
                return ExactVersion(m.group(2))
            case ">=" | ">":
                if lower is not None:
                    return InvalidRange(text)
                lower = (v, op == ">=")
            case "<=" | "<":
                if upper is not None:
                    return InvalidRange(text)
                upper = (v, op == "<=")
            case _:
                raise AssertionError(f"unexpected operator: {op}")

    if lower is not None and upper is not None:
        (lo, lo_incl), (hi, hi_incl) = lower, upper
        if lo > hi or (lo == hi and not (lo_incl and hi_incl)):
            return InvalidRange(text)

    return ComparatorRange(
        lower=str(lower[0]) if lower else None,
        upper=str(upper[0]) if upper else None,
        lower_inclusive=lower[1] if lower else True,
        upper_inclusive=upper[1] if upper else False,
    )


def is_major_range(range_expr: str) -> bool:
    """True for ``1.x`` / ``1.x.x`` style ranges."""
    return isinstance(classify_range(range_expr), MajorWildcard)


def is_lts_range(range_expr: str) -> bool:
    """True for any wildcard release line (``1.x``, ``1.1.x``).

    Exact versions and comparator ranges (``~1.0.0``, ``^1.0.0``) are never
    release lines.
    """
    return isinstance(classify_range(range_expr), (MajorWildcard, MinorWildcard))


def get_upper_bound(range_expr: str) -> str | None:
    match classify_range(range_expr):
        case ExactVersion(version=version):
            return version
        case MajorWildcard(major=major):
            return f"{major + 1}.0.0"
        case MinorWildcard(major=major, minor=minor):
            return f"{major}.{minor + 1}.0"
        case ComparatorRange(upper=upper):
            return upper
        case InvalidRange():
            return None
        case other:
            raise AssertionError(f"unexpected range: {other!r}")


def get_lower_bound(range_expr: str) -> str | None:
    match classify_range(range_expr):
        case ExactVersion(version=version):
            return version
        case MajorWildcard(major=major):
            return f"{major}.0.0"
        case MinorWildcard(major=major, minor=minor):
            return f"{major}.{minor}.0"
        case ComparatorRange(lower=lower):
            return lower
        case InvalidRange():
            return None
        case other:
            raise AssertionError(f"unexpected range: {other!r}")


def get_range(lower_bound: str, upper_bound: str | None = None) -> str:
    """Render bounds as a comparator range, e.g. ``>=1.0.0 <1.1.0``."""
    if upper_bound:
        return f">={lower_bound} <{upper_bound}"
    return f">={lower_bound}"


def format_comparators(cmp: ComparatorRange) -> str:
    """Render a comparator range with its own operators.

    >>> format_comparators(ComparatorRange(lower="1.0.0", upper="2.0.0", upper_inclusive=True))
    '>=1.0.0 <=2.0.0'
    >>> format_comparators(ComparatorRange(lower=None, upper="2.0.0"))
    '<2.0.0'
    """
    parts: list[str] = []
    if cmp.lower is not None:
        parts.append(f"{'>=' if cmp.lower_inclusive else '>'}{cmp.lower}")
    if cmp.upper is not None:
        parts.append(f"{'<=' if cmp.upper_inclusive else '<'}{cmp.upper}")
    return " ".join(parts)


def satisfies(version: str, range_expr: str) -> bool:
    """Check whether ``version`` falls within ``range_expr``.

    A prerelease only satisfies a non-exact range when one of the range's
    bounds is a prerelease of the same ``major.minor.patch``.
    """
    if not Version.is_valid(version):
        return False
    v = Version.parse(version)

    match classify_range(range_expr):
        case ExactVersion(version=exact):
            return v == Version.parse(exact)
        case MajorWildcard(major=major):
            return v.prerelease is None and Version(major) <= v < Version(major + 1)
        case MinorWildcard(major=major, minor=minor):
            return v.prerelease is None and Version(major, minor) <= v < Version(major, minor + 1)
        case ComparatorRange() as cmp:
            return _satisfies_comparators(v, cmp)
        case InvalidRange():
            return False
        case other:
            raise AssertionError(f"unexpected range: {other!r}")


def _satisfies_comparators(v: Version, cmp: ComparatorRange) -> bool:
    lower = Version.parse(cmp.lower) if cmp.lower else None
    upper = Version.parse(cmp.upper) if cmp.upper else None

    if lower is not None:
        if v < lower or (v == lower and not cmp.lower_inclusive):
            return False
    if upper is not None:
        if v > upper or (v == upper and not cmp.upper_inclusive):
            return False

    if v.prerelease is None:
        return True
    core = (v.major, v.minor, v.patch)
    return any(
        b is not None and b.prerelease is not None and (b.major, b.minor, b.patch) == core
        for b in (lower, upper)
    )

"""Single-or-many failure shape and its flattening.

Operations that can fail for several independent reasons at once (for example
planning every configured branch) report ``MultipleFailures``; everything else
reports ``SingleFailure``. Presentation code does not care which one it got and
calls ``extract_errors`` to get a flat list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "Failure",
    "MultipleFailures",
    "SingleFailure",
    "extract_errors",
    "failure_of",
]


@dataclass(frozen=True, slots=True)
class SingleFailure[E]:
    error: E


@dataclass(frozen=True, slots=True)
class MultipleFailures[E]:
    errors: tuple[E, ...]


type Failure[E] = SingleFailure[E] | MultipleFailures[E]


def failure_of[E](errors: Sequence[E]) -> Failure[E]:
    """Wrap collected errors, keeping a lone error as ``SingleFailure``.

    Raises:
        ValueError: If ``errors`` is empty.
    """
    if not errors:
        raise ValueError("failure_of() needs at least one error")
    if len(errors) == 1:
        return SingleFailure(errors[0])
    return MultipleFailures(tuple(errors))


def extract_errors(error: object) -> list[object]:
    """Flatten a failure into the individual errors it holds.

    Aggregates (``MultipleFailures`` or a native exception group) yield their
    nested errors in order; any other value yields a one-element list.
    """
    match error:
        case MultipleFailures(errors=errors):
            return list(errors)
        case SingleFailure(error=single):
            return [single]
        case BaseExceptionGroup():
            return list(error.exceptions)
        case _:
            return [error]

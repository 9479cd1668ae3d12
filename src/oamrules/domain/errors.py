"""Rule-loading and query errors.

Load-time errors (malformed keys, vocabulary violations, conflicts) are
fatal to session startup. :class:`NoMatchError` is raised per query and
is recoverable: the caller simply does not expand that branch.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class TransformError(ValueError):
    """Base class for transformation rule errors.

    Attributes:
        code: Stable machine-readable error code.
        detail: Structured context naming the offending key or type.
    """

    code: str = "TRANSFORM_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": dict(self.detail)}


class MalformedKeyError(TransformError):
    code = "MALFORMED_KEY"

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Invalid transformation key {key!r}: expected '<From>-><To>'",
            key=key,
        )


class UnknownSourceTypeError(TransformError):
    code = "UNKNOWN_SOURCE_TYPE"

    def __init__(self, key: str, from_type: str) -> None:
        super().__init__(
            f"Invalid 'From' type in {key!r}: {from_type!r} is not a known asset type",
            key=key,
            from_type=from_type,
        )


class UnknownTargetTypeError(TransformError):
    code = "UNKNOWN_TARGET_TYPE"

    def __init__(self, key: str, to_type: str) -> None:
        super().__init__(
            f"Invalid 'To' type in {key!r}: {to_type!r} is not a known asset type, "
            "'none' or 'all'",
            key=key,
            to_type=to_type,
        )


class ConflictingRuleError(TransformError):
    """A ``none`` rule and another rule were declared for the same source."""

    code = "CONFLICTING_RULE"

    def __init__(self, from_type: str, key: str, *, after_none: bool) -> None:
        if after_none:
            mode = "other after none"
            what = f"transformation {key!r} specified after 'none'"
        else:
            mode = "none after other"
            what = f"'none' ({key!r}) specified after a valid transformation"
        super().__init__(
            f"Conflicting rules for 'From' type {from_type!r}: {what}. "
            "'none' must be the only transformation for its source",
            from_type=from_type,
            key=key,
            mode=mode,
        )


class NoMatchError(TransformError):
    code = "NO_MATCH"

    def __init__(self, from_type: str, candidates: Iterable[str]) -> None:
        names = sorted(candidates)
        super().__init__(
            f"Zero transformation matches from {from_type!r} to {names}",
            from_type=from_type,
            candidates=names,
        )


class InvalidRuleError(TransformError):
    """A rule payload failed validation (e.g. confidence outside 0-100)."""

    code = "INVALID_RULE"

    def __init__(self, key: str, problems: Iterable[str]) -> None:
        problems = list(problems)
        super().__init__(
            f"Invalid transformation {key!r}: {'; '.join(problems)}",
            key=key,
            problems=problems,
        )


class InvalidOptionError(TransformError):
    code = "INVALID_OPTION"

    def __init__(self, option: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid option {option!r} = {value!r}: {reason}",
            option=option,
            value=value,
        )

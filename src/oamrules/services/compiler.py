"""Rule compiler — raw ``From->To`` entries to :class:`TransformationRule`.

Splits each key, lower-cases both segments, and fills unset confidence
from the session-wide default. Compilation does no vocabulary checks;
see :mod:`oamrules.services.validator`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from oamrules.domain.errors import InvalidOptionError, InvalidRuleError
from oamrules.domain.rules import (
    MAX_CONFIDENCE,
    TransformationRule,
    TransformationSpec,
    split_key,
)

logger = logging.getLogger(__name__)

CONFIDENCE_OPTION = "confidence"

RawTransformations = Mapping[str, TransformationSpec | Mapping[str, Any] | None]


def read_default_confidence(options: Mapping[str, Any] | None) -> int:
    """Read the global ``confidence`` option, 0 when absent or not an int.

    Raises:
        InvalidOptionError: If the option is an int outside 0-100.
    """
    if not options:
        return 0
    value = options.get(CONFIDENCE_OPTION)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    if not 0 <= value <= MAX_CONFIDENCE:
        reason = f"must be between 0 and {MAX_CONFIDENCE}"
        raise InvalidOptionError(CONFIDENCE_OPTION, value, reason)
    return value


def _as_spec(payload: TransformationSpec | Mapping[str, Any] | None) -> TransformationSpec:
    if payload is None:
        return TransformationSpec()
    if isinstance(payload, TransformationSpec):
        return payload
    return TransformationSpec.model_validate(payload)


def compile_rule(key: str, payload: Any, global_confidence: int) -> TransformationRule:
    """Compile one declarative entry.

    Raises:
        MalformedKeyError: If *key* is not ``"<From>-><To>"``.
        InvalidRuleError: If the payload or the resulting rule fails
            validation.
    """
    from_type, to_type = split_key(key)
    try:
        spec = _as_spec(payload)
        return TransformationRule(
            key=key,
            from_type=from_type,
            to_type=to_type,
            priority=spec.priority,
            confidence=spec.confidence or global_confidence,
            exclude=spec.exclude,
        )
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(p) for p in err['loc']) or 'payload'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise InvalidRuleError(key, problems) from exc


def compile_rules(
    raw: RawTransformations,
    global_confidence: int = 0,
) -> dict[str, TransformationRule]:
    """Compile every entry of *raw*, failing on the first malformed key.

    Keys are processed in sorted order so the reported error is stable.
    """
    compiled: dict[str, TransformationRule] = {}
    for key in sorted(raw):
        compiled[key] = compile_rule(key, raw[key], global_confidence)
    logger.debug(
        "Compiled %d transformation rules", len(compiled), extra={"rules": len(compiled)}
    )
    return compiled

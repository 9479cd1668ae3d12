"""Consistency validator for compiled rules.

Two checks per rule:

1. Vocabulary — the source must be a known asset type; the target must
   be a known asset type or one of ``none`` / ``all``.
2. Exclusivity — for one source, a ``none`` rule and any other rule are
   mutually exclusive. The first rule seen for a source fixes its mode;
   a later rule of the opposite mode is a conflict.

The bookkeeping lives in a :class:`ConsistencyState` local to one load.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from oamrules.domain.assets import Vocabulary
from oamrules.domain.errors import (
    ConflictingRuleError,
    UnknownSourceTypeError,
    UnknownTargetTypeError,
)
from oamrules.domain.rules import TransformationRule

logger = logging.getLogger(__name__)


@dataclass
class ConsistencyState:
    """Per-source modes registered so far during one validation pass."""

    with_none: set[str] = field(default_factory=set)
    with_other: set[str] = field(default_factory=set)

    def register(self, rule: TransformationRule) -> None:
        """Record *rule*'s mode, raising on a none/other conflict."""
        src = rule.from_type
        if rule.is_none:
            if src in self.with_other:
                raise ConflictingRuleError(src, rule.key, after_none=False)
            self.with_none.add(src)
        else:
            if src in self.with_none:
                raise ConflictingRuleError(src, rule.key, after_none=True)
            self.with_other.add(src)


def validate_rule(
    rule: TransformationRule,
    vocabulary: Vocabulary,
    state: ConsistencyState,
) -> None:
    if not vocabulary.is_source(rule.from_type):
        raise UnknownSourceTypeError(rule.key, rule.from_type)
    if not vocabulary.is_target(rule.to_type):
        raise UnknownTargetTypeError(rule.key, rule.to_type)
    state.register(rule)


def validate_rules(
    rules: Mapping[str, TransformationRule],
    vocabulary: Vocabulary,
) -> ConsistencyState:
    """Validate every rule in a single pass over sorted keys.

    Returns the final state so callers can inspect which sources are
    negated.
    """
    state = ConsistencyState()
    for key in sorted(rules):
        validate_rule(rules[key], vocabulary, state)
    logger.debug(
        "Validated %d rules (%d negated sources)",
        len(rules),
        len(state.with_none),
        extra={"rules": len(rules), "negated": sorted(state.with_none)},
    )
    return state

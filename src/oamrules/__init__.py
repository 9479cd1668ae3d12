"""oamrules — transformation authorization for asset enumeration sessions."""

from __future__ import annotations

from oamrules.domain.assets import AssetType, Target, Vocabulary
from oamrules.domain.errors import (
    ConflictingRuleError,
    InvalidOptionError,
    InvalidRuleError,
    MalformedKeyError,
    NoMatchError,
    TransformError,
    UnknownSourceTypeError,
    UnknownTargetTypeError,
)
from oamrules.domain.rules import TransformationRule, TransformationSpec
from oamrules.domain.ruleset import RuleSet
from oamrules.services.cache import Matches, MatchCache
from oamrules.services.session import TransformSession

__version__ = "0.1.0"

__all__ = [
    "AssetType",
    "ConflictingRuleError",
    "InvalidOptionError",
    "InvalidRuleError",
    "MalformedKeyError",
    "MatchCache",
    "Matches",
    "NoMatchError",
    "RuleSet",
    "Target",
    "TransformError",
    "TransformSession",
    "TransformationRule",
    "TransformationSpec",
    "UnknownSourceTypeError",
    "UnknownTargetTypeError",
    "Vocabulary",
]

"""Shared pytest fixtures for oamrules tests."""

from __future__ import annotations

from typing import Any

import pytest

from oamrules.domain.assets import Vocabulary
from oamrules.domain.rules import TransformationRule
from oamrules.services.session import TransformSession

# Mirrors a typical enumeration config: explicit rules, a defaulted rule,
# and a wildcard with exclusions.
SESSION_TRANSFORMATIONS: dict[str, Any] = {
    "FQDN->IPAddress": {"priority": 1, "confidence": 80},
    "FQDN->WHOIS": {"priority": 2},
    "FQDN->ALL": {"exclude": ["RIRORG", "FQDN"]},
    "IPAddress->IPAddress": {"priority": 1, "confidence": 80},
    "IPAddress->WHOIS": {"priority": 2},
    "IPAddress->RIRORG": None,
}


@pytest.fixture
def vocabulary() -> Vocabulary:
    return Vocabulary.default()


@pytest.fixture
def session() -> TransformSession:
    """Session loaded from :data:`SESSION_TRANSFORMATIONS` with confidence 50."""
    return TransformSession.load(SESSION_TRANSFORMATIONS, {"confidence": 50})


def make_rule(key: str, **kwargs: Any) -> TransformationRule:
    """Build a compiled rule directly, bypassing vocabulary checks."""
    from_type, to_type = key.split("->")
    return TransformationRule(key=key, from_type=from_type, to_type=to_type, **kwargs)


@pytest.fixture
def loose_rules() -> dict[str, TransformationRule]:
    """Rules with short target names outside the default vocabulary."""
    rules = [
        make_rule("FQDN->IP", priority=1, confidence=80),
        make_rule("FQDN->WHOIS", priority=2),
        make_rule("FQDN->ALL", exclude=["tls", "fqdn"]),
    ]
    return {r.key: r for r in rules}

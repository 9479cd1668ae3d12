"""Tests for the read-only RuleSet mapping."""

import pytest

from oamrules.domain.ruleset import RuleSet
from tests.conftest import make_rule


@pytest.fixture
def ruleset() -> RuleSet:
    rules = [
        make_rule("FQDN->WHOIS", priority=2, confidence=50),
        make_rule("FQDN->IPAddress", priority=1, confidence=80),
        make_rule("FQDN->ALL", confidence=30, exclude=["rirorg"]),
        make_rule("IPAddress->none"),
    ]
    return RuleSet({r.key: r for r in rules})


class TestRuleSet:
    def test_mapping_protocol(self, ruleset: RuleSet) -> None:
        assert len(ruleset) == 4
        assert "FQDN->WHOIS" in ruleset
        assert ruleset["FQDN->IPAddress"].confidence == 80
        assert set(ruleset) == {
            "FQDN->WHOIS",
            "FQDN->IPAddress",
            "FQDN->ALL",
            "IPAddress->none",
        }

    def test_read_only(self, ruleset: RuleSet) -> None:
        with pytest.raises(TypeError):
            ruleset["FQDN->URL"] = make_rule("FQDN->URL")  # type: ignore[index]

    def test_source_copy_is_isolated(self) -> None:
        source = {"FQDN->WHOIS": make_rule("FQDN->WHOIS")}
        ruleset = RuleSet(source)
        source["FQDN->URL"] = make_rule("FQDN->URL")
        assert len(ruleset) == 1

    def test_rules_from_ordered_by_priority(self, ruleset: RuleSet) -> None:
        keys = [r.key for r in ruleset.rules_from("FQDN")]
        assert keys == ["FQDN->ALL", "FQDN->IPAddress", "FQDN->WHOIS"]
        assert ruleset.rules_from("url") == ()

    def test_sources(self, ruleset: RuleSet) -> None:
        assert ruleset.sources() == frozenset({"fqdn", "ipaddress"})

    def test_confidence_explicit_beats_wildcard(self, ruleset: RuleSet) -> None:
        assert ruleset.confidence("fqdn", "IPAddress") == 80
        assert ruleset.confidence("fqdn", "url") == 30

    def test_confidence_unauthorized(self, ruleset: RuleSet) -> None:
        assert ruleset.confidence("fqdn", "rirorg") is None
        assert ruleset.confidence("ipaddress", "none") is None
        assert ruleset.confidence("url", "fqdn") is None

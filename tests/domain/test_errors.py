"""Tests for error codes and structured detail."""

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


class TestErrors:
    def test_hierarchy(self) -> None:
        for cls in (
            MalformedKeyError,
            UnknownSourceTypeError,
            UnknownTargetTypeError,
            ConflictingRuleError,
            NoMatchError,
            InvalidRuleError,
            InvalidOptionError,
        ):
            assert issubclass(cls, TransformError)
            assert issubclass(cls, ValueError)

    def test_conflict_modes(self) -> None:
        after_none = ConflictingRuleError("fqdn", "FQDN->IPAddress", after_none=True)
        after_other = ConflictingRuleError("fqdn", "FQDN->none", after_none=False)
        assert after_none.detail["mode"] == "other after none"
        assert after_other.detail["mode"] == "none after other"
        assert "fqdn" in str(after_none)

    def test_to_dict(self) -> None:
        err = UnknownTargetTypeError("FQDN->Amass", "amass")
        payload = err.to_dict()
        assert payload["code"] == "UNKNOWN_TARGET_TYPE"
        assert payload["detail"] == {"key": "FQDN->Amass", "to_type": "amass"}
        assert "amass" in payload["message"]

    def test_no_match_sorts_candidates(self) -> None:
        err = NoMatchError("fqdn", {"whois", "rirorg"})
        assert err.detail["candidates"] == ["rirorg", "whois"]

"""Tests for the asset vocabulary and target sentinels."""

import pytest

from oamrules.domain.assets import AssetType, Target, Vocabulary


class TestAssetType:
    def test_values_are_lower_case(self) -> None:
        for member in AssetType:
            assert member.value == member.value.lower()
            assert member == member.value

    def test_sentinels_not_in_default_vocabulary(self) -> None:
        values = {a.value for a in AssetType}
        assert Target.NONE not in values
        assert Target.ALL not in values


class TestVocabulary:
    def test_default_covers_asset_types(self) -> None:
        vocab = Vocabulary.default()
        assert len(vocab) == len(AssetType)
        assert vocab.names[0] == "fqdn"

    def test_case_insensitive_membership(self) -> None:
        vocab = Vocabulary(["FQDN", "IPAddress"])
        assert "fqdn" in vocab
        assert "ipaddress" in vocab
        assert "IPADDRESS" in vocab
        assert "whois" not in vocab
        assert 42 not in vocab

    def test_duplicates_collapse_keeping_order(self) -> None:
        vocab = Vocabulary(["whois", "FQDN", "Whois"])
        assert vocab.names == ("whois", "fqdn")
        assert list(vocab) == ["whois", "fqdn"]

    def test_targets_include_sentinels(self) -> None:
        vocab = Vocabulary(["fqdn"])
        assert vocab.is_target("fqdn")
        assert vocab.is_target("NONE")
        assert vocab.is_target("all")
        assert not vocab.is_target("amass")
        assert not vocab.is_source("all")

    @pytest.mark.parametrize("bad", ["", "   ", "none", "ALL"])
    def test_rejects_empty_and_reserved(self, bad: str) -> None:
        with pytest.raises(ValueError):
            Vocabulary(["fqdn", bad])

    def test_equality(self) -> None:
        assert Vocabulary(["FQDN", "whois"]) == Vocabulary(["fqdn", "whois"])
        assert Vocabulary(["fqdn"]) != Vocabulary(["whois"])

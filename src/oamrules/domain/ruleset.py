"""Read-only rule set keyed by raw ``From->To`` key."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from oamrules.domain.assets import normalize
from oamrules.domain.rules import TransformationRule


class RuleSet(Mapping[str, TransformationRule]):
    """Immutable mapping of raw key to compiled rule.

    Only constructed by the session loader after validation succeeds, so
    every rule in it is known to be consistent.
    """

    def __init__(self, rules: Mapping[str, TransformationRule]) -> None:
        self._rules = MappingProxyType(dict(rules))
        by_source: dict[str, list[TransformationRule]] = {}
        for rule in self._rules.values():
            by_source.setdefault(rule.from_type, []).append(rule)
        self._by_source: dict[str, tuple[TransformationRule, ...]] = {
            src: tuple(sorted(group, key=lambda r: (r.priority, r.key)))
            for src, group in by_source.items()
        }

    def __getitem__(self, key: str) -> TransformationRule:
        return self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def rules_from(self, from_type: str) -> tuple[TransformationRule, ...]:
        """Rules whose source is *from_type*, ordered by priority then key."""
        return self._by_source.get(normalize(from_type), ())

    def sources(self) -> frozenset[str]:
        return frozenset(self._by_source)

    def confidence(self, from_type: str, to_type: str) -> int | None:
        """Confidence for a ``from -> to`` transition.

        An explicit rule wins over a wildcard rule. Returns None when no
        rule authorizes the transition.
        """
        target = normalize(to_type)
        wildcard: TransformationRule | None = None
        for rule in self.rules_from(from_type):
            if rule.is_none:
                continue
            if rule.to_type == target:
                return rule.confidence
            if rule.is_wildcard and not rule.excludes(target) and wildcard is None:
                wildcard = rule
        return wildcard.confidence if wildcard is not None else None

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules)"

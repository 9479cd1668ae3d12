"""Match resolver — which candidate targets does a source authorize?"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from oamrules.domain.assets import normalize
from oamrules.domain.rules import TransformationRule
from oamrules.domain.ruleset import RuleSet


def resolve(
    rules: Mapping[str, TransformationRule],
    from_type: str,
    candidates: Iterable[str],
) -> frozenset[str]:
    """Return the subset of *candidates* authorized from *from_type*.

    Candidates are case-folded and de-duplicated. A wildcard rule admits
    every candidate outside its exclusions; any other rule admits its own
    target if it was asked for. ``none`` rules admit nothing. Results of
    all matching rules are unioned.

    A :class:`RuleSet` is consulted through its per-source index; any
    other mapping is scanned in full.
    """
    source = normalize(from_type)
    wanted = {normalize(c) for c in candidates}
    authorized: set[str] = set()
    if isinstance(rules, RuleSet):
        scope: Iterable[TransformationRule] = rules.rules_from(source)
    else:
        scope = rules.values()
    for rule in scope:
        if rule.from_type != source or rule.is_none:
            continue
        if rule.is_wildcard:
            authorized.update(c for c in wanted if c not in rule.exclude)
        elif rule.to_type in wanted:
            authorized.add(rule.to_type)
    return frozenset(authorized)

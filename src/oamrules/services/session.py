"""TransformSession — the per-session configuration object.

Loading compiles and validates the declared rules once, single-threaded,
before any worker queries. The resulting :class:`RuleSet` is read-only;
the only mutable state is the injected :class:`MatchCache`.

Usage::

    session = TransformSession.load(
        {"FQDN->IPAddress": {"confidence": 80}, "FQDN->ALL": {"exclude": ["rirorg"]}},
        options={"confidence": 50},
    )
    matches = session.check_transformations("fqdn", "ipaddress", "whois")
    session.check_transform_result("fqdn", "ipaddress")  # True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from oamrules.domain.assets import Vocabulary
from oamrules.domain.ruleset import RuleSet
from oamrules.services.cache import Matches, MatchCache
from oamrules.services.compiler import RawTransformations, compile_rules, read_default_confidence
from oamrules.services.validator import validate_rules

if TYPE_CHECKING:
    from oamrules.config.models import TransformsConfig
    from oamrules.config.settings import OamSettings

logger = logging.getLogger(__name__)


class TransformSession:
    """Validated rules plus the session's match cache.

    Shared by reference across all workers of a session. Construct via
    :meth:`load` or :meth:`from_config`; a failed load never yields a
    session.
    """

    def __init__(
        self,
        rules: RuleSet,
        *,
        vocabulary: Vocabulary,
        default_confidence: int = 0,
        cache: MatchCache | None = None,
    ) -> None:
        self._rules = rules
        self._vocabulary = vocabulary
        self._default_confidence = default_confidence
        self._cache = cache if cache is not None else MatchCache()

    @classmethod
    def load(
        cls,
        transformations: RawTransformations,
        options: Mapping[str, Any] | None = None,
        *,
        vocabulary: Vocabulary | None = None,
        cache: MatchCache | None = None,
    ) -> TransformSession:
        """Compile and validate *transformations*.

        Raises:
            MalformedKeyError: A key is not ``"<From>-><To>"``.
            InvalidOptionError: The global confidence is outside 0-100.
            InvalidRuleError: A rule payload fails validation.
            UnknownSourceTypeError: A source is outside the vocabulary.
            UnknownTargetTypeError: A target is outside the vocabulary and
                is neither ``none`` nor ``all``.
            ConflictingRuleError: A source has both a ``none`` rule and
                another rule.
        """
        vocab = vocabulary if vocabulary is not None else Vocabulary.default()
        confidence = read_default_confidence(options)
        compiled = compile_rules(transformations, confidence)
        validate_rules(compiled, vocab)
        rules = RuleSet(compiled)
        logger.debug(
            "Loaded %d transformation rules for %d sources",
            len(rules),
            len(rules.sources()),
            extra={"rules": len(rules), "sources": sorted(rules.sources())},
        )
        return cls(rules, vocabulary=vocab, default_confidence=confidence, cache=cache)

    @classmethod
    def from_config(
        cls,
        config: TransformsConfig,
        *,
        vocabulary: Vocabulary | None = None,
        cache: MatchCache | None = None,
    ) -> TransformSession:
        return cls.load(
            config.transformations,
            config.options.model_dump(),
            vocabulary=vocabulary,
            cache=cache,
        )

    @classmethod
    def from_settings(
        cls,
        settings: OamSettings,
        *,
        vocabulary: Vocabulary | None = None,
        cache: MatchCache | None = None,
    ) -> TransformSession:
        return cls.from_config(
            settings.to_transforms_config(), vocabulary=vocabulary, cache=cache
        )

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def default_confidence(self) -> int:
        return self._default_confidence

    def check_transformations(self, from_type: str, *to_types: str) -> Matches:
        """Authorize and cache a batch of candidate targets for one source.

        Raises:
            NoMatchError: If none of *to_types* is authorized.
        """
        return self._cache.resolve(self._rules, from_type, to_types)

    def check_transform_result(self, from_type: str, to_type: str) -> bool:
        """Point query against earlier :meth:`check_transformations` calls."""
        return self._cache.is_match(from_type, to_type)

    def matches(self, from_type: str) -> Matches | None:
        return self._cache.get(from_type)

    def confidence(self, from_type: str, to_type: str) -> int | None:
        return self._rules.confidence(from_type, to_type)

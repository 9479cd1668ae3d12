"""Thread-safe memo of resolved match sets, one entry per source type.

Entries are created on the first successful resolution for a source and
grow monotonically: later resolutions for the same source union into the
existing set. There is no eviction; entries live as long as the cache.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping

from oamrules.domain.assets import normalize
from oamrules.domain.errors import NoMatchError
from oamrules.domain.rules import TransformationRule
from oamrules.services.resolver import resolve

logger = logging.getLogger(__name__)


class Matches:
    """Authorized targets for one source type.

    Every read and write holds the entry's lock, so readers never see a
    partially merged set.
    """

    def __init__(self, from_type: str, names: Iterable[str] = ()) -> None:
        self.from_type = normalize(from_type)
        self._lock = threading.Lock()
        self._to: set[str] = {normalize(n) for n in names}

    def is_match(self, to_type: str) -> bool:
        with self._lock:
            return normalize(to_type) in self._to

    def merge(self, names: Iterable[str]) -> None:
        with self._lock:
            self._to.update(normalize(n) for n in names)

    def snapshot(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._to)

    def __contains__(self, to_type: object) -> bool:
        return isinstance(to_type, str) and self.is_match(to_type)

    def __len__(self) -> int:
        with self._lock:
            return len(self._to)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.snapshot()))

    def __repr__(self) -> str:
        return f"Matches({self.from_type!r}, {sorted(self.snapshot())})"


class MatchCache:
    """Owned component mapping source type to its :class:`Matches`.

    The table lock only guards entry creation; each entry serializes its
    own updates.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, Matches] = {}

    def resolve(
        self,
        rules: Mapping[str, TransformationRule],
        from_type: str,
        candidates: Iterable[str],
    ) -> Matches:
        """Resolve *candidates* for *from_type* and union into the cache.

        Raises:
            NoMatchError: If no candidate is authorized. The cache is left
                unchanged, including any earlier entry for *from_type*.
        """
        source = normalize(from_type)
        wanted = [normalize(c) for c in candidates]
        authorized = resolve(rules, source, wanted)
        if not authorized:
            raise NoMatchError(source, set(wanted))

        with self._lock:
            entry = self._entries.get(source)
            if entry is None:
                entry = Matches(source)
                self._entries[source] = entry
        entry.merge(authorized)
        logger.debug(
            "Resolved %s -> %s",
            source,
            sorted(authorized),
            extra={"from_type": source, "authorized": sorted(authorized)},
        )
        return entry

    def get(self, from_type: str) -> Matches | None:
        with self._lock:
            return self._entries.get(normalize(from_type))

    def is_match(self, from_type: str, to_type: str) -> bool:
        """Point lookup; False if *from_type* was never resolved."""
        entry = self.get(from_type)
        return entry is not None and entry.is_match(to_type)

    def size(self, from_type: str) -> int:
        entry = self.get(from_type)
        return len(entry) if entry is not None else 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

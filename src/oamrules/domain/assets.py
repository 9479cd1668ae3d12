"""Asset-type vocabulary and rule target sentinels.

The vocabulary is closed: rule sources must name one of its entries and
rule targets must name an entry or one of the :class:`Target` sentinels.
Names are compared case-insensitively and stored lower-case.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import StrEnum


class AssetType(StrEnum):
    """Default asset vocabulary (open asset model names, lower-cased)."""

    FQDN = "fqdn"
    IP_ADDRESS = "ipaddress"
    AUTONOMOUS_SYSTEM = "autonomoussystem"
    AUTNUM_RECORD = "autnumrecord"
    NETBLOCK = "netblock"
    IPNET_RECORD = "ipnetrecord"
    RIR_ORG = "rirorg"
    WHOIS = "whois"
    DOMAIN_RECORD = "domainrecord"
    TLS_CERTIFICATE = "tlscertificate"
    URL = "url"
    EMAIL_ADDRESS = "emailaddress"
    ORGANIZATION = "organization"
    PERSON = "person"
    PHONE = "phone"
    LOCATION = "location"
    CONTACT_RECORD = "contactrecord"
    SERVICE = "service"
    FILE = "file"
    PRODUCT = "product"
    PRODUCT_RELEASE = "productrelease"
    IDENTIFIER = "identifier"
    FUNDS_TRANSFER = "fundstransfer"


class Target(StrEnum):
    """Reserved rule targets."""

    NONE = "none"
    ALL = "all"


def normalize(name: str) -> str:
    """Case-fold an asset name for comparison."""
    return name.strip().lower()


class Vocabulary:
    """Immutable, ordered set of valid asset-type names.

    Built once at the ingestion boundary from an externally supplied list.
    Duplicates collapse, first occurrence keeps its position.
    """

    __slots__ = ("_names", "_lookup")

    def __init__(self, names: Iterable[str]) -> None:
        ordered: dict[str, None] = {}
        for raw in names:
            name = normalize(str(raw))
            if not name:
                msg = "Asset vocabulary entries must be non-empty"
                raise ValueError(msg)
            if name in (Target.NONE, Target.ALL):
                msg = f"'{name}' is a reserved rule target, not an asset type"
                raise ValueError(msg)
            ordered.setdefault(name, None)
        self._names: tuple[str, ...] = tuple(ordered)
        self._lookup: frozenset[str] = frozenset(ordered)

    @classmethod
    def default(cls) -> Vocabulary:
        return cls(AssetType)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def is_source(self, name: str) -> bool:
        """A valid rule source: any vocabulary entry."""
        return normalize(name) in self._lookup

    def is_target(self, name: str) -> bool:
        """A valid rule target: any vocabulary entry, ``none`` or ``all``."""
        key = normalize(name)
        return key in self._lookup or key in (Target.NONE, Target.ALL)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_source(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._names)} names)"

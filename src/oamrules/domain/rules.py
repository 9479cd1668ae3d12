"""Transformation rule records.

A rule is identified by its raw key ``"<From>-><To>"``. The declarative
payload (:class:`TransformationSpec`) carries only priority, confidence
and exclusions; the source and target come from splitting the key.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from oamrules.domain.assets import Target, normalize
from oamrules.domain.errors import MalformedKeyError

KEY_DELIMITER = "->"
MAX_CONFIDENCE = 100


class TransformationSpec(BaseModel):
    """Declarative payload for one ``From->To`` key.

    ``confidence == 0`` means unset; the compiler substitutes the
    session-wide default.
    """

    model_config = {"frozen": True}

    priority: int = 0
    confidence: int = Field(default=0, ge=0, le=MAX_CONFIDENCE)
    exclude: list[str] = Field(default_factory=list)


class TransformationRule(BaseModel):
    """A compiled rule. Source, target and exclusions are lower-case."""

    model_config = {"frozen": True}

    key: str
    from_type: str
    to_type: str
    priority: int = 0
    confidence: int = Field(default=0, ge=0, le=MAX_CONFIDENCE)
    exclude: frozenset[str] = frozenset()

    @field_validator("from_type", "to_type")
    @classmethod
    def _lower(cls, v: str) -> str:
        return normalize(v)

    @field_validator("exclude", mode="before")
    @classmethod
    def _lower_exclude(cls, v: object) -> object:
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(normalize(str(e)) for e in v)
        return v

    @property
    def is_none(self) -> bool:
        return self.to_type == Target.NONE

    @property
    def is_wildcard(self) -> bool:
        return self.to_type == Target.ALL

    def excludes(self, name: str) -> bool:
        return normalize(name) in self.exclude


def split_key(key: str) -> tuple[str, str]:
    """Split ``"From->To"`` into lower-cased ``(from, to)``.

    Raises:
        MalformedKeyError: If the key lacks exactly one delimiter or
            either segment is empty.
    """
    parts = key.split(KEY_DELIMITER)
    if len(parts) != 2:
        raise MalformedKeyError(key)
    from_type, to_type = (normalize(p) for p in parts)
    if not from_type or not to_type:
        raise MalformedKeyError(key)
    return from_type, to_type

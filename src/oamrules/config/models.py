"""Pydantic configuration models for the declarative rule surface.

Sparse contract: every field has a code default, so an empty config is
valid and simply authorizes nothing.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from oamrules.domain.rules import TransformationSpec


class OptionsConfig(BaseModel):
    """[options] section.

    Unknown keys are kept so host-tool options pass through untouched.
    """

    model_config = {"frozen": True, "extra": "allow"}

    confidence: int = Field(default=0, ge=0, le=100)


class TransformsConfig(BaseModel):
    """Root configuration: global options plus ``From->To`` rules.

    A key declared with no body (``None``) is an all-default rule.
    """

    model_config = {"frozen": True}

    options: OptionsConfig = Field(default_factory=OptionsConfig)
    transformations: dict[str, TransformationSpec | None] = Field(default_factory=dict)

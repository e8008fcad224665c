"""Reusable, strict base models for the codecs."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Codec instances are configuration values: frozen after construction,
    hashable, and rejecting unknown fields or loosely-typed input.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )

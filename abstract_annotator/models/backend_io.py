"""
Typed Pydantic models for the records returned by the backend.

The fetch layer hands over plain JSON; these models give each record a
checked shape before it reaches the annotation engine. Field aliases follow
the backend wire names (entityText, startPos, entityUri, ...).
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawEntityHit(BaseModel):
    """
    One entity detection as produced by the upstream NER/linking service.

    The backend also sends an endPos, which is ignored: the inclusive end
    offset is always recomputed from startPos and the text length.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    text: str = Field(..., alias="entityText", min_length=1, description="Surface form of the entity.")
    start_pos: int = Field(..., alias="startPos", ge=0, description="0-based offset in the abstract.")
    uri: str = Field(..., alias="entityUri", min_length=1, description="Identifier of the linked entity.")
    label: Optional[str] = Field(None, alias="entityLabel", description="Human-readable label (optional).")
    domain_uri: Optional[str] = Field(None, alias="domainUri", description="Knowledge base of the identifier.")

    @field_validator("start_pos", mode="before")
    @classmethod
    def reject_non_integral_offset(cls, v):
        if isinstance(v, bool) or (isinstance(v, float) and not v.is_integer()):
            raise ValueError("startPos must be an integer offset")
        return v


class ArticleMetadata(BaseModel):
    """Subset of the article metadata used to render the abstract."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    abstract: Optional[str] = Field(None, alias="abs", description="Raw abstract text, may be missing.")
    title: Optional[str] = Field(None, description="Article title (optional).")

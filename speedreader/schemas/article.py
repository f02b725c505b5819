"""Pydantic schemas for articles handed over by the extraction layer."""

from pydantic import BaseModel, ConfigDict, Field


class ArticleRecord(BaseModel):
    """Pre-extracted article: title plus paragraph-marked, normalized text."""

    model_config = ConfigDict(frozen=True, strict=True)

    title: str = ""
    text: str = ""


class ArticleStats(BaseModel):
    title: str
    word_count: int = Field(..., ge=0)
    token_count: int = Field(..., ge=0)
    estimated_ms: float = Field(..., ge=0.0)
    estimated_formatted: str

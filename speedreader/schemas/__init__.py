"""Pydantic schemas for the speed reader boundaries."""

from speedreader.schemas.article import ArticleRecord, ArticleStats

__all__ = [
    "ArticleRecord",
    "ArticleStats",
]

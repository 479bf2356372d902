"""
Pydantic models for scraper outputs.
Both records are frozen: they are built once per request and never mutated.
"""
from __future__ import annotations

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: int = Field(gt=0)
    title: str
    score: int
    author: str = ""
    url: str = ""
    num_comments: int = Field(default=0, ge=0)
    posted_at: datetime


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    posts: Tuple[Post, ...] = ()
    number: int = Field(gt=0)
    retrieved_at: datetime

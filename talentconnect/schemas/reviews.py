# talentconnect/schemas/reviews.py
from typing import Dict, Literal

from pydantic import BaseModel, Field

ReviewCategory = Literal["general", "job-search", "recruitment", "platform", "support"]


class ReviewIn(BaseModel):
    """Platform review as submitted by a user (create or edit)."""

    rating: int = Field(..., ge=1, le=5)
    title: str = Field(..., min_length=5, max_length=100)
    comment: str = Field(..., min_length=20, max_length=1000)
    category: ReviewCategory = "general"

    model_config = {
        "str_strip_whitespace": True,
        "extra": "ignore",
    }


class ReviewStats(BaseModel):
    total_reviews: int = Field(0, ge=0)
    average_rating: float = 0.0                 # one decimal
    distribution: Dict[int, int]                # 5 -> 1 stars

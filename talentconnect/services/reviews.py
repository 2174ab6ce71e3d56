import logging
from typing import Any, Iterable

from talentconnect.schemas.reviews import ReviewStats
from talentconnect.utils.similarity import ratio_half_up

log = logging.getLogger("talentconnect.reviews")

STARS = (5, 4, 3, 2, 1)


def _get(row: Any, name: str, default: Any = None) -> Any:
    if isinstance(row, dict):
        return row.get(name, default)
    return getattr(row, name, default)


def compute_review_stats(reviews: Iterable[Any]) -> ReviewStats:
    """
    Totals for approved reviews: count, mean rating to one decimal (half up)
    and the per-star distribution. Rows without an isApproved flag count as
    approved; rows without a numeric rating are skipped.
    """
    total = rating_sum = 0
    distribution = {star: 0 for star in STARS}

    for row in reviews:
        if not _get(row, "isApproved", _get(row, "is_approved", True)):
            continue
        try:
            rating = int(_get(row, "rating"))
        except (TypeError, ValueError):
            log.warning("Skipping review without a numeric rating: %r", row)
            continue
        total += 1
        rating_sum += rating
        if rating in distribution:
            distribution[rating] += 1

    average = ratio_half_up(rating_sum * 10, total) / 10 if total else 0.0
    log.info("review stats: %d reviews, average %.1f", total, average)

    return ReviewStats(total_reviews=total, average_rating=average, distribution=distribution)

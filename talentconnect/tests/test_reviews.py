import pytest
from pydantic import ValidationError

from talentconnect.schemas.reviews import ReviewIn
from talentconnect.services.reviews import compute_review_stats


def _review(**overrides):
    body = {
        "rating": 4,
        "title": "  Solid platform  ",
        "comment": "Found two interviews within a week of signing up.",
    }
    body.update(overrides)
    return ReviewIn.model_validate(body)


def test_review_defaults_and_trimming():
    r = _review()
    assert r.title == "Solid platform"
    assert r.category == "general"
    assert _review(category="job-search").category == "job-search"


@pytest.mark.parametrize("field,value", [
    ("rating", 0),
    ("rating", 6),
    ("title", "Meh "),
    ("title", "x" * 101),
    ("comment", "Too short, sorry."),
    ("comment", "y" * 1001),
    ("category", "billing"),
])
def test_review_rejects_out_of_bounds(field, value):
    with pytest.raises(ValidationError):
        _review(**{field: value})


def test_review_stats():
    rows = [
        {"rating": 5},
        {"rating": 5},
        {"rating": 4, "isApproved": True},
        {"rating": 1, "isApproved": False},
        {"rating": 2},
        {"rating": None},
    ]
    stats = compute_review_stats(rows)
    assert stats.total_reviews == 4
    # 16 / 4
    assert stats.average_rating == 4.0
    assert list(stats.distribution) == [5, 4, 3, 2, 1]
    assert stats.distribution == {5: 2, 4: 1, 3: 0, 2: 1, 1: 0}


def test_review_average_rounds_half_up():
    # 13 / 4 = 3.25
    stats = compute_review_stats([{"rating": r} for r in (4, 4, 3, 2)])
    assert stats.average_rating == 3.3


def test_review_stats_empty():
    stats = compute_review_stats([])
    assert stats.total_reviews == 0
    assert stats.average_rating == 0.0
    assert sum(stats.distribution.values()) == 0

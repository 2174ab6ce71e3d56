import itertools
from datetime import datetime, timedelta, timezone

import pytest

from talentconnect.schemas.candidates import Candidate

_BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_candidate():
    """Factory for Candidate rows; `age_days` pushes createdAt into the past."""
    ids = itertools.count(1)

    def _make(age_days: int = 0, **fields) -> Candidate:
        fields.setdefault("id", next(ids))
        fields.setdefault("createdAt", _BASE - timedelta(days=age_days))
        return Candidate.model_validate(fields)

    return _make

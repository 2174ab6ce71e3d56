import logging
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from talentconnect.config import SEARCH_LIMIT
from talentconnect.schemas.candidates import (
    Candidate, SearchFilters, SearchHit, SearchResponse, as_candidate
)
from talentconnect.services.normalize import (
    contains_ci, is_available, recency_key, salary_in_bracket
)

log = logging.getLogger("talentconnect.search")

W_TITLE = 3
W_BIO = 2
W_SKILL = 2


def relevance_score(candidate: Candidate, query: Optional[str]) -> int:
    """+3 title hit, +2 bio hit, +2 for every skill containing the query."""
    term = (query or "").strip().lower()
    if not term:
        return 0
    score = 0
    if contains_ci(candidate.title, term):
        score += W_TITLE
    if contains_ci(candidate.bio, term):
        score += W_BIO
    score += W_SKILL * sum(1 for s in candidate.skills.lowered() if term in s)
    return score


def passes_filters(candidate: Candidate, filters: SearchFilters) -> bool:
    if filters.location and not contains_ci(candidate.location, filters.location):
        return False
    if filters.experience and candidate.experience != filters.experience:
        return False
    if filters.availability and candidate.availability != filters.availability:
        return False
    if not salary_in_bracket(candidate.expected_salary, filters.salary_range):
        return False
    return True


def browse_order_key(candidate: Candidate) -> Tuple[int, float]:
    """Available first, then newest first."""
    return (0 if is_available(candidate.availability) else 1, -recency_key(candidate.created_at))


def _as_filters(filters: Union[SearchFilters, Dict[str, Any], None]) -> SearchFilters:
    if filters is None:
        return SearchFilters()
    if isinstance(filters, SearchFilters):
        return filters
    return SearchFilters.model_validate(filters)


def search_candidates(
    candidates: Iterable[Any],
    filters: Union[SearchFilters, Dict[str, Any], None] = None,
    *,
    limit: int = SEARCH_LIMIT,
) -> SearchResponse:
    """
    Recruiter text search.

    With a query, only candidates mentioning it in title, bio or a skill are
    kept and they are ordered by relevance (ties keep the browse order).
    Without one, candidates are listed available-first, newest-first.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    filters = _as_filters(filters)
    query = filters.job_title or ""

    log.info(
        "search q='%s' loc='%s' exp='%s' avail='%s' salary='%s'",
        query, filters.location, filters.experience, filters.availability, filters.salary_range,
    )

    hits = []
    for raw in candidates:
        c = as_candidate(raw)
        if not passes_filters(c, filters):
            continue
        score = relevance_score(c, query)
        if query and score == 0:
            continue
        hits.append(SearchHit(candidate=c, relevance_score=score))

    hits.sort(key=lambda h: browse_order_key(h.candidate))
    if query:
        hits.sort(key=lambda h: h.relevance_score, reverse=True)
    hits = hits[:limit]

    log.info("search found %d candidates", len(hits))
    return SearchResponse(candidates=hits, total=len(hits), search_criteria=filters)


def get_candidate_details(candidates: Iterable[Any], candidate_id: Union[int, str]) -> Optional[Candidate]:
    """Look a candidate up by id in an already-fetched pool; None if absent."""
    wanted = str(candidate_id).strip()
    for raw in candidates:
        c = as_candidate(raw)
        if str(c.id) == wanted:
            return c
    log.info("candidate %s not found", wanted)
    return None

import logging
from typing import Any, Iterable, List, Optional, Tuple

from talentconnect.config import MATCH_LIMIT
from talentconnect.schemas.candidates import (
    Candidate, MatchDetails, MatchResult, MatchStatistics, SkillMatchResponse, as_candidate
)
from talentconnect.services.normalize import is_available, recency_key
from talentconnect.utils.similarity import ratio_half_up, score_skills
from talentconnect.utils.skills import SkillSet, normalize_skills

log = logging.getLogger("talentconnect.skill_match")


def match_candidate(candidate: Candidate, query_skills: SkillSet) -> Optional[MatchResult]:
    """Score one candidate; None when nothing matched (score 0)."""
    breakdown = score_skills(query_skills, candidate.skills)
    if breakdown.score <= 0:
        return None
    return MatchResult(
        candidate=candidate,
        match_score=breakdown.score,
        matching_skills=breakdown.matching_skills,
        match_details=MatchDetails(
            exact=breakdown.exact,
            partial=breakdown.partial,
            related=breakdown.related,
            total=len(breakdown.matching_skills),
        ),
    )


def match_order_key(result: MatchResult) -> Tuple[int, int, float]:
    """Best score first, then available first, then newest first."""
    c = result.candidate
    return (
        -result.match_score,
        0 if is_available(c.availability) else 1,
        -recency_key(c.created_at),
    )


def rank_matches(results: Iterable[MatchResult], limit: int = MATCH_LIMIT) -> List[MatchResult]:
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return sorted(results, key=match_order_key)[:limit]


def match_skills(
    candidates: Iterable[Any],
    skills: Any,
    *,
    limit: int = MATCH_LIMIT,
) -> SkillMatchResponse:
    """
    Rank candidates against recruiter-entered skills ("react, node" or a list).

    An empty query is not an error: nothing can score above 0, so the
    response simply has no matches.
    """
    query = normalize_skills(skills)
    searched = list(query.lowered())
    log.info("skill match request: %s", searched)

    processed = 0
    results = []
    for raw in candidates:
        processed += 1
        result = match_candidate(as_candidate(raw), query)
        if result is not None:
            results.append(result)

    ranked = rank_matches(results, limit)
    average = ratio_half_up(sum(r.match_score for r in ranked), len(ranked)) if ranked else 0

    log.info("skill match: %d processed, %d matched, %d returned", processed, len(results), len(ranked))

    return SkillMatchResponse(
        matches=ranked,
        total=len(ranked),
        searched_skills=searched,
        statistics=MatchStatistics(
            total_candidates_processed=processed,
            candidates_with_matches=len(ranked),
            average_match_score=average,
        ),
    )

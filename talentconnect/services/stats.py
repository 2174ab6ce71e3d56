import logging
from collections import Counter
from typing import Any, Iterable

from talentconnect.config import TOP_SKILLS_LIMIT, TOP_SKILLS_SCAN
from talentconnect.schemas.candidates import SearchStats, TopSkill, as_candidate
from talentconnect.services.normalize import is_available

log = logging.getLogger("talentconnect.stats")


def compute_search_stats(
    candidates: Iterable[Any],
    *,
    top_limit: int = TOP_SKILLS_LIMIT,
    scan: int = TOP_SKILLS_SCAN,
) -> SearchStats:
    """
    Pool-level counters for the recruiter dashboard plus the most common
    skills. Only each candidate's first `scan` skills are counted; skills are
    grouped by their exact text and ties keep first-seen order.
    """
    total = available = with_skills = with_cv = 0
    skill_counts: Counter = Counter()

    for raw in candidates:
        c = as_candidate(raw)
        total += 1
        if is_available(c.availability):
            available += 1
        if c.skills:
            with_skills += 1
        if c.cv_file_path is not None:
            with_cv += 1
        skill_counts.update(c.skills[:scan])

    top = [TopSkill(skill=s, count=n) for s, n in skill_counts.most_common(max(0, top_limit))]
    log.info("stats: %d candidates, %d distinct skills", total, len(skill_counts))

    return SearchStats(
        total_candidates=total,
        available_candidates=available,
        candidates_with_skills=with_skills,
        candidates_with_cv=with_cv,
        top_skills=top,
    )

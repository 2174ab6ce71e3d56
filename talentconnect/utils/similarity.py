# talentconnect/utils/similarity.py
import logging
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, NamedTuple, Optional, Set

from talentconnect.constants import RELATED_SKILLS as RAW_RELATED
from talentconnect.utils.skills import normalize_skills

logger = logging.getLogger(__name__)

# =========================
# Weights
# =========================
W_EXACT = 3
W_PARTIAL = 2
W_RELATED = 1

EXACT = "exact"
PARTIAL = "partial"
RELATED = "related"


# =========================
# Normalize the relatedness table once (symmetric, read-only)
# =========================
def _norm(s: str) -> str:
    return (s or "").strip().lower()


def _build_related_index(raw: Mapping[str, Set[str]]) -> Mapping[str, FrozenSet[str]]:
    """
    Mirror every pair so that lookups work in both directions even when the
    source table lists only one of them.
    """
    index: Dict[str, Set[str]] = {}
    for k, vals in raw.items():
        nk = _norm(k)
        if not nk:
            continue
        for v in vals:
            nv = _norm(v)
            if not nv or nv == nk:
                continue
            index.setdefault(nk, set()).add(nv)
            index.setdefault(nv, set()).add(nk)
    return MappingProxyType({k: frozenset(v) for k, v in index.items()})


RELATED_INDEX: Mapping[str, FrozenSet[str]] = _build_related_index(RAW_RELATED)


# =========================
# Helpers
# =========================
def related_skills(skill: str) -> FrozenSet[str]:
    return RELATED_INDEX.get(_norm(skill), frozenset())


def are_related_skills(skill1: str, skill2: str) -> bool:
    return _norm(skill2) in related_skills(skill1)


def classify_pair(query_term: str, candidate_term: str) -> Optional[str]:
    """
    Match kind for one (query, candidate) pair, both already lowercased.
    Exact beats partial beats related; None when unrelated.
    """
    if candidate_term == query_term:
        return EXACT
    if query_term in candidate_term or candidate_term in query_term:
        return PARTIAL
    if are_related_skills(query_term, candidate_term):
        return RELATED
    return None


def ratio_half_up(numerator: int, denominator: int) -> int:
    """numerator / denominator rounded half up, in integers (round() sends 12.5 to 12)."""
    return (2 * numerator + denominator) // (2 * denominator)


class ScoreBreakdown(NamedTuple):
    score: int
    exact: int
    partial: int
    related: int
    matching_skills: List[str]


# =========================
# Public API
# =========================
def score_skills(query_skills: Any, candidate_skills: Any) -> ScoreBreakdown:
    """
    Weighted overlap of a recruiter query against one candidate's skills.

    Every (query, candidate) pair is classified on its own, so one candidate
    skill can count for several query terms. The score is normalized against
    an all-exact candidate (3 points per query term), rounded half up and
    clamped to 0..100.
    """
    query = normalize_skills(query_skills).lowered()
    cand = normalize_skills(candidate_skills)
    cand_lower = cand.lowered()

    counts = {EXACT: 0, PARTIAL: 0, RELATED: 0}
    matching: List[str] = []

    for q in query:
        for original, c in zip(cand, cand_lower):
            kind = classify_pair(q, c)
            if kind is None:
                continue
            counts[kind] += 1
            if original not in matching:
                matching.append(original)
            logger.debug("skill match %s: %r ~ %r", kind, q, original)

    raw = (
        W_EXACT * counts[EXACT]
        + W_PARTIAL * counts[PARTIAL]
        + W_RELATED * counts[RELATED]
    )
    max_possible = W_EXACT * len(query)
    score = ratio_half_up(raw * 100, max_possible) if max_possible > 0 else 0
    score = max(0, min(100, score))

    return ScoreBreakdown(
        score=score,
        exact=counts[EXACT],
        partial=counts[PARTIAL],
        related=counts[RELATED],
        matching_skills=matching,
    )

import logging
from typing import Any, Dict, Iterable, Optional, Sequence

from talentconnect.constants import CATEGORY_TAXONOMY, OTHERS, Category
from talentconnect.schemas.candidates import CategoryCount, CategorySummary, as_candidate
from talentconnect.utils.skills import normalize_skills

log = logging.getLogger("talentconnect.categorize")

_ICONS: Dict[str, str] = {c.name: c.icon for c in CATEGORY_TAXONOMY}


def combined_text(title: Optional[str], bio: Optional[str], skills: Any) -> str:
    return f"{(title or '').lower()} {(bio or '').lower()} {normalize_skills(skills).text()}"


def classify_text(text: str, taxonomy: Sequence[Category] = CATEGORY_TAXONOMY) -> str:
    """First category (in declared order) with any keyword inside `text`; else Others."""
    for category in taxonomy:
        if category.name == OTHERS:
            continue
        if any(kw in text for kw in category.keywords):
            return category.name
    return OTHERS


def classify_candidate(
    title: Optional[str],
    bio: Optional[str],
    skills: Any,
    taxonomy: Sequence[Category] = CATEGORY_TAXONOMY,
) -> str:
    return classify_text(combined_text(title, bio, skills), taxonomy)


def summarize_categories(
    candidates: Iterable[Any],
    taxonomy: Sequence[Category] = CATEGORY_TAXONOMY,
) -> CategorySummary:
    """
    Count every candidate into exactly one category.

    Empty categories are dropped; the rest are ordered by count descending
    (ties keep taxonomy order) and Others always comes last.
    """
    counts: Dict[str, int] = {c.name: 0 for c in taxonomy}
    counts.setdefault(OTHERS, 0)
    icons = {c.name: c.icon for c in taxonomy}

    total = 0
    for raw in candidates:
        c = as_candidate(raw)
        name = classify_candidate(c.title, c.bio, c.skills, taxonomy)
        counts[name] += 1
        total += 1
        log.debug("candidate %s -> %s", c.id, name)

    ranked = sorted(
        (name for name, n in counts.items() if n > 0 and name != OTHERS),
        key=lambda name: counts[name],
        reverse=True,
    )
    if counts[OTHERS] > 0:
        ranked.append(OTHERS)

    log.info("categorized %d professionals into %d categories", total, len(ranked))

    return CategorySummary(
        categories=[
            CategoryCount(name=name, count=counts[name], icon=icons.get(name, _ICONS[OTHERS]))
            for name in ranked
        ],
        total_professionals=total,
    )

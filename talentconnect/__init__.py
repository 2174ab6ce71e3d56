"""Candidate search, skill matching and categorization for the TalentConnect job board."""
from talentconnect.services.candidate_search import get_candidate_details, search_candidates
from talentconnect.services.categorize import classify_candidate, summarize_categories
from talentconnect.services.reviews import compute_review_stats
from talentconnect.services.skill_match import match_skills
from talentconnect.services.stats import compute_search_stats
from talentconnect.utils.similarity import are_related_skills, score_skills
from talentconnect.utils.skills import SkillSet, normalize_skills

__version__ = "1.0.0"

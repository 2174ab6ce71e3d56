# talentconnect/schemas/__init__.py
from talentconnect.schemas.candidates import (
    Candidate,
    CategoryCount,
    CategorySummary,
    MatchDetails,
    MatchResult,
    MatchStatistics,
    SearchFilters,
    SearchHit,
    SearchResponse,
    SearchStats,
    SkillMatchResponse,
    TopSkill,
    as_candidate,
)
from talentconnect.schemas.profile import ContactMessage, JobSeekerProfileUpdate, RecruiterProfileUpdate
from talentconnect.schemas.reviews import ReviewIn, ReviewStats

# talentconnect/schemas/candidates.py
from datetime import datetime
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from talentconnect.services.normalize import clean_text, parse_created_at, stored_availability
from talentconnect.utils.skills import SkillSet, parse_path_list

Availability = Literal["available", "busy"]


class Candidate(BaseModel):
    """Read-only projection of a job seeker (users JOIN job_seekers)."""

    id: Union[int, str]
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None

    title: Optional[str] = None
    bio: Optional[str] = None
    experience: Optional[str] = None                 # level label, e.g. "mid", "3-5 years"
    availability: Availability = "available"
    expected_salary: Optional[str] = Field(None, alias="expectedSalary")   # free text ("70k-80k")
    skills: SkillSet = Field(default_factory=SkillSet)
    certificates: List[str] = Field(default_factory=list, alias="certificatesPath")
    cv_file_path: Optional[str] = Field(None, alias="cvFilePath")
    linkedin_url: Optional[str] = Field(None, alias="linkedinUrl")
    github_url: Optional[str] = Field(None, alias="githubUrl")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("certificates", mode="before")
    @classmethod
    def _parse_certificates(cls, v: Any) -> List[str]:
        return parse_path_list(v)

    @field_validator("availability", mode="before")
    @classmethod
    def _normalize_availability(cls, v: Any) -> str:
        return stored_availability(v)

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, v: Any) -> Optional[datetime]:
        return parse_created_at(v)

    @field_validator("title", "bio", "experience", "location", "expected_salary", mode="before")
    @classmethod
    def _strip(cls, v: Any) -> Optional[str]:
        return clean_text(v)

    @property
    def name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


def as_candidate(raw: Any) -> Candidate:
    """Accept a Candidate, a dict row, or an attribute-style row object."""
    if isinstance(raw, Candidate):
        return raw
    if isinstance(raw, dict):
        return Candidate.model_validate(raw)
    return Candidate.model_validate(raw, from_attributes=True)


# ---------- text search ----------
class SearchFilters(BaseModel):
    job_title: Optional[str] = Field(None, alias="jobTitle")      # free-text query
    location: Optional[str] = None                                # substring
    experience: Optional[str] = None                              # exact
    availability: Optional[str] = None                            # exact
    salary_range: Optional[str] = Field(None, alias="salaryRange")  # entry | mid | senior | expert

    model_config = {
        "populate_by_name": True,
        "str_strip_whitespace": True,
        "extra": "ignore",
    }


class SearchHit(BaseModel):
    candidate: Candidate
    relevance_score: int = Field(0, ge=0)


class SearchResponse(BaseModel):
    candidates: List[SearchHit]
    total: int = Field(..., ge=0)
    search_criteria: SearchFilters


# ---------- skill match ----------
class MatchDetails(BaseModel):
    exact: int = 0
    partial: int = 0
    related: int = 0
    total: int = 0          # distinct matching candidate skills


class MatchResult(BaseModel):
    candidate: Candidate
    match_score: int = Field(..., ge=0, le=100)
    matching_skills: List[str] = Field(default_factory=list)
    match_details: MatchDetails


class MatchStatistics(BaseModel):
    total_candidates_processed: int = 0
    candidates_with_matches: int = 0
    average_match_score: int = 0


class SkillMatchResponse(BaseModel):
    matches: List[MatchResult]
    total: int = Field(..., ge=0)
    searched_skills: List[str]
    statistics: MatchStatistics


# ---------- categories ----------
class CategoryCount(BaseModel):
    name: str
    count: int = Field(..., ge=0)
    icon: str


class CategorySummary(BaseModel):
    categories: List[CategoryCount]
    total_professionals: int = Field(..., ge=0)


# ---------- stats ----------
class TopSkill(BaseModel):
    skill: str
    count: int


class SearchStats(BaseModel):
    total_candidates: int = 0
    available_candidates: int = 0
    candidates_with_skills: int = 0
    candidates_with_cv: int = 0
    top_skills: List[TopSkill] = Field(default_factory=list)

# talentconnect/schemas/profile.py
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, EmailStr, Field, field_validator

from talentconnect.schemas.candidates import Availability
from talentconnect.services.normalize import clean_text, norm_availability, validate_url
from talentconnect.utils.skills import SkillSet

USERNAME_PATTERN = r"^[a-zA-Z0-9_]{3,30}$"


class JobSeekerProfileUpdate(BaseModel):
    """Incoming job-seeker profile edit, cleaned the way it will be stored."""

    # --- users table ---
    first_name: str = Field(..., min_length=1, alias="firstName")
    last_name: str = Field(..., min_length=1, alias="lastName")
    user_name: str = Field(..., pattern=USERNAME_PATTERN, alias="userName")
    email: EmailStr
    phone: Optional[str] = None
    location: Optional[str] = None

    # --- job_seekers table ---
    title: Optional[str] = None
    experience: Optional[str] = None
    expected_salary: Optional[str] = Field(None, alias="expectedSalary")
    bio: Optional[str] = None
    skills: SkillSet = Field(default_factory=SkillSet)
    linkedin_url: Optional[str] = Field(None, alias="linkedinUrl")
    github_url: Optional[str] = Field(None, alias="githubUrl")
    availability: Availability = "available"

    model_config = {
        "populate_by_name": True,
        "str_strip_whitespace": True,
        "extra": "ignore",
    }

    @field_validator("email", mode="after")
    @classmethod
    def _lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("phone", "location", "title", "experience", "expected_salary", "bio", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Optional[str]:
        return clean_text(v)

    @field_validator("linkedin_url", "github_url", mode="before")
    @classmethod
    def _http_only(cls, v: Any) -> Optional[str]:
        # invalid links are dropped rather than rejected
        return validate_url(v) if isinstance(v, str) else None

    @field_validator("availability", mode="before")
    @classmethod
    def _availability(cls, v: Any) -> str:
        return norm_availability(v)

    def skills_json(self) -> str:
        """job_seekers.skills is a JSON text column."""
        return self.skills.to_json()


class ContactMessage(BaseModel):
    """Recruiter -> candidate email request; delivery happens elsewhere."""

    candidate_id: Union[int, str] = Field(..., alias="candidateId")
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=10, max_length=5000)

    model_config = {
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


class RecruiterProfileUpdate(BaseModel):
    """Company side of a recruiter profile edit."""

    company_name: str = Field(..., min_length=2, alias="companyName")
    company_size: Optional[str] = Field(None, alias="companySize")
    industry: Optional[str] = None
    company_website: Optional[str] = Field(None, alias="companyWebsite")
    company_description: Optional[str] = Field(None, alias="companyDescription")
    position: Optional[str] = None

    model_config = {
        "populate_by_name": True,
        "str_strip_whitespace": True,
        "extra": "ignore",
    }

    @field_validator("company_size", "industry", "company_description", "position", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Optional[str]:
        return clean_text(v)

    @field_validator("company_website", mode="before")
    @classmethod
    def _http_only(cls, v: Any) -> Optional[str]:
        return validate_url(v) if isinstance(v, str) else None

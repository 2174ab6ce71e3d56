import pytest
from pydantic import ValidationError

from talentconnect.schemas.candidates import Candidate
from talentconnect.schemas.profile import ContactMessage, JobSeekerProfileUpdate, RecruiterProfileUpdate


def _profile(**overrides):
    body = {
        "firstName": " Ada ",
        "lastName": "Lovelace",
        "userName": "ada_l",
        "email": "Ada@Lovelace.dev",
    }
    body.update(overrides)
    return JobSeekerProfileUpdate.model_validate(body)


def test_profile_update_is_cleaned():
    p = _profile(
        skills="Python, SQL, , " + "x" * 80,
        bio="   ",
        linkedinUrl="https://linkedin.com/in/ada",
        githubUrl="javascript:alert(1)",
    )
    assert p.first_name == "Ada"
    assert p.email == "ada@lovelace.dev"
    assert list(p.skills) == ["Python", "SQL"]
    assert p.skills_json() == '["Python", "SQL"]'
    assert p.bio is None
    assert p.linkedin_url == "https://linkedin.com/in/ada"
    assert p.github_url is None
    assert p.availability == "available"


@pytest.mark.parametrize("field,value", [
    ("userName", "ab"),
    ("userName", "bad name!"),
    ("email", "not-an-email"),
    ("firstName", "   "),
])
def test_profile_update_rejects_invalid_fields(field, value):
    with pytest.raises(ValidationError):
        _profile(**{field: value})


def test_profile_skills_dump_as_list():
    dumped = _profile(skills=["React"]).model_dump()
    assert dumped["skills"] == ["React"]


def test_contact_message_bounds():
    msg = ContactMessage.model_validate({
        "candidateId": 5, "subject": "  Interview  ", "message": "Hello, are you free?",
    })
    assert msg.subject == "Interview"

    with pytest.raises(ValidationError):
        ContactMessage(candidate_id=5, subject="x" * 201, message="long enough message")
    with pytest.raises(ValidationError):
        ContactMessage(candidate_id=5, subject="Hi", message="too short")
    with pytest.raises(ValidationError):
        ContactMessage(candidate_id=5, subject="   ", message="long enough message")


def test_candidate_row_projection():
    c = Candidate.model_validate({
        "id": 3,
        "firstName": "Lin",
        "availability": None,
        "skills": "null",
        "certificatesPath": None,
        "createdAt": 1700000000000,
        "title": "  Data Analyst ",
    })
    assert c.availability == "available"
    assert c.skills == ()
    assert c.certificates == []
    assert c.created_at.year == 2023
    assert c.title == "Data Analyst"

    # stored rows never fail on availability; profile edits still do
    assert Candidate.model_validate({"id": 4, "availability": "on holiday"}).availability == "busy"
    with pytest.raises(ValidationError):
        _profile(availability="on holiday")


def test_recruiter_profile_update():
    p = RecruiterProfileUpdate.model_validate({
        "companyName": "  Acme  ",
        "industry": "   ",
        "companyWebsite": " https://acme.example ",
        "position": " Talent Lead ",
    })
    assert p.company_name == "Acme"
    assert p.industry is None
    assert p.company_website == "https://acme.example"
    assert p.position == "Talent Lead"

    assert RecruiterProfileUpdate(company_name="Acme", company_website="acme.example").company_website is None
    with pytest.raises(ValidationError):
        RecruiterProfileUpdate.model_validate({"companyName": " A "})

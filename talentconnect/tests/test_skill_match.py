import pytest

from talentconnect.services.skill_match import match_skills


def test_react_node_example(make_candidate):
    c = make_candidate(skills=["React", "Express", "MongoDB"])
    resp = match_skills([c], "react, node")
    assert resp.total == 1
    match = resp.matches[0]
    assert match.match_score == 67
    assert match.matching_skills == ["React", "Express"]
    assert (match.match_details.exact, match.match_details.partial, match.match_details.related) == (1, 0, 1)
    assert match.match_details.total == 2
    assert resp.searched_skills == ["react", "node"]


def test_empty_query_returns_no_matches(make_candidate):
    pool = [make_candidate(skills=["React"]), make_candidate(skills=["Python"])]
    resp = match_skills(pool, "")
    assert resp.matches == []
    assert resp.total == 0
    assert resp.statistics.total_candidates_processed == 2
    assert resp.statistics.average_match_score == 0


def test_zero_score_candidates_are_excluded(make_candidate):
    pool = [
        make_candidate(skills=["Python"]),
        make_candidate(skills=[]),
        make_candidate(skills='["Cooking"]'),
    ]
    resp = match_skills(pool, ["python"])
    assert [m.candidate.skills[0] for m in resp.matches] == ["Python"]
    assert all(0 < m.match_score <= 100 for m in resp.matches)


def test_ordering_score_then_availability_then_recency(make_candidate):
    half_new = make_candidate(skills=["Python"], age_days=0)
    full_busy = make_candidate(skills=["Python", "SQL"], availability="busy", age_days=0)
    full_available_old = make_candidate(skills=["Python", "SQL"], age_days=20)
    full_available_new = make_candidate(skills=["Python", "SQL"], age_days=2)

    resp = match_skills([half_new, full_busy, full_available_old, full_available_new], "python; sql")
    assert [m.candidate.id for m in resp.matches] == [
        full_available_new.id, full_available_old.id, full_busy.id, half_new.id,
    ]
    assert [m.match_score for m in resp.matches] == [100, 100, 100, 50]


def test_top_25_and_statistics(make_candidate):
    pool = [make_candidate(skills=["Python"], age_days=i) for i in range(30)]
    pool.append(make_candidate(skills=["Rust"]))
    resp = match_skills(pool, "python")
    assert resp.total == 25
    assert resp.statistics.total_candidates_processed == 31
    assert resp.statistics.candidates_with_matches == 25
    assert resp.statistics.average_match_score == 100


def test_average_rounds_half_up(make_candidate):
    pool = [
        make_candidate(skills=["Python", "SQL"]),   # 100
        make_candidate(skills=["Python"]),          # 50
        make_candidate(skills=["Django"]),          # python~django related: 17
    ]
    resp = match_skills(pool, "python, sql")
    assert [m.match_score for m in resp.matches] == [100, 50, 17]
    # (100 + 50 + 17) / 3 = 55.67
    assert resp.statistics.average_match_score == 56


def test_accepts_raw_rows(make_candidate):
    rows = [
        {"id": 1, "firstName": "Ada", "lastName": "L", "skills": '["Vue", "Nuxt"]', "createdAt": "2024-02-01 10:00:00"},
        {"id": 2, "firstName": "Bob", "skills": "angular, rxjs", "createdAt": "2024-03-01T10:00:00Z"},
    ]
    resp = match_skills(rows, "javascript")
    # both only relate to javascript
    assert [m.candidate.id for m in resp.matches] == [2, 1]
    assert all(m.match_score == 33 for m in resp.matches)
    assert resp.matches[1].candidate.name == "Ada L"


def test_bad_rows_do_not_abort_the_match():
    rows = [
        {"id": 1, "skills": ["Python"], "createdAt": 10 ** 20},
        {"id": 2, "skills": ["Python"], "availability": "open to work", "createdAt": "2024-03-01"},
        {"id": 3, "skills": "[" * 5000 + "]" * 5000},
    ]
    resp = match_skills(rows, "python")
    assert [m.candidate.id for m in resp.matches] == [1, 2]
    assert resp.matches[0].candidate.created_at is None
    assert resp.matches[1].candidate.availability == "busy"
    assert resp.statistics.total_candidates_processed == 3


def test_negative_limit_is_rejected(make_candidate):
    with pytest.raises(ValueError):
        match_skills([make_candidate(skills=["Python"])], "python", limit=-1)
